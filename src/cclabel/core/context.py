"""Context holding the gateways used by cclabel commands.

Created at the CLI entry point and threaded through commands via Click's
context system. Tests build one with context_for_test() instead.
"""

from dataclasses import dataclass
from pathlib import Path

import click

from cclabel.gateway.command_executor.abc import CommandExecutor
from cclabel.gateway.command_executor.dry_run import DryRunCommandExecutor
from cclabel.gateway.command_executor.printing import PrintingCommandExecutor
from cclabel.gateway.command_executor.real import RealCommandExecutor
from cclabel.gateway.vob_root.abc import VobRootResolver
from cclabel.gateway.vob_root.real import ProbingVobRootResolver
from cclabel.output import user_output


@dataclass(frozen=True)
class ClearCaseContext:
    """Immutable context holding all dependencies for cclabel operations.

    ``executor`` runs label mutations. ``vob_root_resolver`` probes the VOB and
    is never dry-run wrapped: probes run even in dry-run mode.
    """

    executor: CommandExecutor
    vob_root_resolver: VobRootResolver
    cwd: Path
    dry_run: bool
    verbose: bool

    def with_modes(self, *, dry_run: bool, verbose: bool) -> "ClearCaseContext":
        """Return a context whose executor is wrapped for the requested modes."""
        executor = self.executor
        resolver = self.vob_root_resolver
        if dry_run and not self.dry_run:
            executor = DryRunCommandExecutor()
        if verbose and not self.verbose:
            executor = PrintingCommandExecutor(executor)
            # Probes are printed too, but never dry-run wrapped
            if isinstance(resolver, ProbingVobRootResolver):
                resolver = ProbingVobRootResolver(PrintingCommandExecutor(resolver.executor))
        return ClearCaseContext(
            executor=executor,
            vob_root_resolver=resolver,
            cwd=self.cwd,
            dry_run=self.dry_run or dry_run,
            verbose=self.verbose or verbose,
        )


def safe_cwd() -> tuple[Path | None, str | None]:
    """Get current working directory, detecting if it no longer exists."""
    try:
        return (Path.cwd(), None)
    except (FileNotFoundError, OSError):
        return (None, "Current working directory no longer exists")


def create_context(*, dry_run: bool, verbose: bool = False) -> ClearCaseContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, label mutations are printed instead of executed
        verbose: If True, every command is printed before it runs

    Returns:
        ClearCaseContext with real implementations
    """
    cwd, error_msg = safe_cwd()
    if cwd is None:
        user_output(click.style("Error: ", fg="red") + str(error_msg))
        user_output("Please change to a valid directory and try again.")
        raise SystemExit(1)

    real_executor = RealCommandExecutor()
    context = ClearCaseContext(
        executor=real_executor,
        vob_root_resolver=ProbingVobRootResolver(real_executor),
        cwd=cwd,
        dry_run=False,
        verbose=False,
    )
    return context.with_modes(dry_run=dry_run, verbose=verbose)
