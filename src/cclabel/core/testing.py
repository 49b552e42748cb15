"""Test factories for creating ClearCaseContext instances."""

from pathlib import Path

from cclabel.core.context import ClearCaseContext
from cclabel.gateway.command_executor.abc import CommandExecutor
from cclabel.gateway.command_executor.fake import FakeCommandExecutor
from cclabel.gateway.vob_root.abc import VobRootResolver
from cclabel.gateway.vob_root.real import ProbingVobRootResolver


def context_for_test(
    executor: CommandExecutor | None = None,
    vob_root_resolver: VobRootResolver | None = None,
    cwd: Path | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> ClearCaseContext:
    """Create test context with fakes for anything not provided.

    Args:
        executor: If None, creates a FakeCommandExecutor that always succeeds.
        vob_root_resolver: If None, probes through ``executor`` with
            ProbingVobRootResolver, so a responder can model the VOB.
        cwd: Current working directory (defaults to Path("/fake/vob/dir"))
        dry_run: Whether the context reports dry-run mode
        verbose: Whether the context reports verbose mode

    Example:
        >>> executor = FakeCommandExecutor()
        >>> ctx = context_for_test(executor=executor, cwd=tmp_path)
    """
    resolved_executor = executor if executor is not None else FakeCommandExecutor()
    resolver = (
        vob_root_resolver
        if vob_root_resolver is not None
        else ProbingVobRootResolver(resolved_executor)
    )
    return ClearCaseContext(
        executor=resolved_executor,
        vob_root_resolver=resolver,
        cwd=cwd if cwd is not None else Path("/fake/vob/dir"),
        dry_run=dry_run,
        verbose=verbose,
    )
