"""Command executor gateway.

Runs a CommandLine and streams its output, line by line, to consumers.

Import from submodules:
- abc: CommandExecutor, LineConsumer
- real: RealCommandExecutor
- fake: FakeCommandExecutor
- dry_run: DryRunCommandExecutor
- printing: PrintingCommandExecutor
"""
