"""Printing command executor wrapper for verbose output."""

import click

from cclabel.core.command_line import CommandLine
from cclabel.gateway.command_executor.abc import CommandExecutor, LineConsumer
from cclabel.output import user_output


class PrintingCommandExecutor(CommandExecutor):
    """Wrapper that prints each command before delegating.

    The wrapped implementation may be Real or DryRun.
    """

    def __init__(self, wrapped: CommandExecutor) -> None:
        self._wrapped = wrapped

    def execute(
        self,
        command: CommandLine,
        *,
        stdout: LineConsumer,
        stderr: LineConsumer,
    ) -> int:
        location = click.style(f"{command.working_directory}>", dim=True)
        user_output(f"{location} {click.style(str(command), fg='white', dim=True)}")
        exit_code = self._wrapped.execute(command, stdout=stdout, stderr=stderr)
        if exit_code != 0:
            user_output(click.style(f"  exit code {exit_code}", fg="yellow"))
        return exit_code
