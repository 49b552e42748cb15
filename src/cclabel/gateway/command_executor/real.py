"""Production command execution using subprocess."""

import logging
import shutil
import subprocess

from cclabel.core.command_line import CommandLine
from cclabel.core.errors import CommandLineError
from cclabel.gateway.command_executor.abc import CommandExecutor, LineConsumer

logger = logging.getLogger(__name__)


class RealCommandExecutor(CommandExecutor):
    """Production implementation using subprocess.run."""

    def execute(
        self,
        command: CommandLine,
        *,
        stdout: LineConsumer,
        stderr: LineConsumer,
    ) -> int:
        # LBYL: Check if command exists first
        if shutil.which(command.executable) is None:
            raise CommandLineError(f"Executable '{command.executable}' not found on PATH")

        if not command.working_directory.is_dir():
            raise CommandLineError(
                f"Working directory does not exist: {command.working_directory}"
            )

        # Acceptable try/except: subprocess offers no way to check launchability up front
        try:
            result = subprocess.run(
                command.argv,
                cwd=command.working_directory,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise CommandLineError(f"Failed to launch '{command}': {e}") from e

        for line in result.stdout.splitlines():
            stdout(line)
        for line in result.stderr.splitlines():
            stderr(line)

        logger.debug("Exit code %d from: %s", result.returncode, command)
        return result.returncode
