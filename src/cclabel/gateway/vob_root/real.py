"""VOB root resolution by probing parent directories with cleartool."""

import logging
from pathlib import Path

from cclabel.core.command_line import create_ls_command
from cclabel.gateway.command_executor.abc import CommandExecutor
from cclabel.gateway.vob_root.abc import VobRootResolver

logger = logging.getLogger(__name__)


def _discard(line: str) -> None:
    pass


class ProbingVobRootResolver(VobRootResolver):
    """Walks upward, running ``cleartool ls .`` in each parent directory.

    The root is the last directory whose probe succeeded; the walk stops at
    the first parent whose probe fails or at the filesystem root.
    """

    def __init__(self, executor: CommandExecutor) -> None:
        self._executor = executor

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    def resolve_vob_root(self, path: Path) -> Path:
        current = path.absolute()
        while current.parent != current:
            parent = current.parent
            probe = create_ls_command(parent)
            logger.debug("Probing for VOB membership: %s>>%s", parent, probe)
            exit_code = self._executor.execute(probe, stdout=_discard, stderr=_discard)
            if exit_code != 0:
                break
            current = parent

        logger.debug("Resolved VOB root of %s: %s", path, current)
        return current
