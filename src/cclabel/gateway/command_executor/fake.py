"""Fake command executor for testing."""

from collections.abc import Callable

from cclabel.core.command_line import CommandLine
from cclabel.core.errors import CommandLineError
from cclabel.core.types import ExecutionResult
from cclabel.gateway.command_executor.abc import CommandExecutor, LineConsumer

Responder = Callable[[CommandLine], ExecutionResult]


def succeed(command: CommandLine) -> ExecutionResult:
    """Responder that succeeds silently for every command."""
    return ExecutionResult(exit_code=0, stdout_lines=(), stderr_lines=())


class FakeCommandExecutor(CommandExecutor):
    """In-memory fake that answers commands from a responder function.

    Constructor Injection:
    ---------------------
    - responder: Maps each CommandLine to the ExecutionResult to report.
      Defaults to succeeding with no output.
    - launch_failures: Subcommands (e.g. "mklabel") that raise CommandLineError
      instead of running.

    Mutation Tracking:
    -----------------
    - executed_commands: Every CommandLine passed to execute(), in order,
      including those that failed to launch.
    """

    def __init__(
        self,
        *,
        responder: Responder | None = None,
        launch_failures: set[str] | None = None,
    ) -> None:
        self._responder = responder if responder is not None else succeed
        self._launch_failures = launch_failures if launch_failures is not None else set()
        self._executed_commands: list[CommandLine] = []

    def execute(
        self,
        command: CommandLine,
        *,
        stdout: LineConsumer,
        stderr: LineConsumer,
    ) -> int:
        self._executed_commands.append(command)

        if command.subcommand in self._launch_failures:
            raise CommandLineError(f"Failed to launch '{command}'")

        result = self._responder(command)
        for line in result.stdout_lines:
            stdout(line)
        for line in result.stderr_lines:
            stderr(line)
        return result.exit_code

    @property
    def executed_commands(self) -> list[CommandLine]:
        return list(self._executed_commands)

    @property
    def command_strings(self) -> list[str]:
        return [str(command) for command in self._executed_commands]

    def commands_for(self, subcommand: str) -> list[CommandLine]:
        """Return executed commands whose first argument is ``subcommand``."""
        return [c for c in self._executed_commands if c.subcommand == subcommand]
