"""Abstract base class for running external commands."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from cclabel.core.command_line import CommandLine

LineConsumer = Callable[[str], None]


class CommandExecutor(ABC):
    """Abstract interface for executing a command line.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    """

    @abstractmethod
    def execute(
        self,
        command: CommandLine,
        *,
        stdout: LineConsumer,
        stderr: LineConsumer,
    ) -> int:
        """Run a command in its working directory.

        Args:
            command: Command line to run
            stdout: Called once per line written to standard output
            stderr: Called once per line written to standard error

        Returns:
            Exit code of the process

        Raises:
            CommandLineError: If the process could not be started
        """
        ...
