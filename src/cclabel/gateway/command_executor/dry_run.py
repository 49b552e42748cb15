"""No-op command executor for dry-run mode.

This module provides an executor that prevents actual command execution
while reporting what would have been done.
"""

from cclabel.core.command_line import CommandLine
from cclabel.gateway.command_executor.abc import CommandExecutor, LineConsumer
from cclabel.output import user_output


class DryRunCommandExecutor(CommandExecutor):
    """No-op executor that prints commands instead of running them.

    Every command reports success with no output. Read-only probes that must
    see the real VOB should be given the unwrapped executor instead.
    """

    def execute(
        self,
        command: CommandLine,
        *,
        stdout: LineConsumer,
        stderr: LineConsumer,
    ) -> int:
        """Print dry-run message instead of executing."""
        user_output(f"[DRY RUN] Would run: {command} (in {command.working_directory})")
        return 0
