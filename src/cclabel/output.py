"""Output helpers shared by the CLI and gateway wrappers.

user_output() writes human-facing text to stderr so that stdout stays
reserved for machine_output(), which scripts may parse.
"""

from typing import Any

import click


def user_output(message: Any = "", *, nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", *, nl: bool = True) -> None:
    """Print machine-readable output to stdout."""
    click.echo(message, nl=nl)
