"""Fake VOB root resolver for testing."""

from pathlib import Path

from cclabel.gateway.vob_root.abc import VobRootResolver


class FakeVobRootResolver(VobRootResolver):
    """Returns a pre-configured VOB root.

    Tracks every path it was asked to resolve in ``resolved_paths``.
    """

    def __init__(self, *, vob_root: Path) -> None:
        self._vob_root = vob_root
        self._resolved_paths: list[Path] = []

    def resolve_vob_root(self, path: Path) -> Path:
        self._resolved_paths.append(path)
        return self._vob_root

    @property
    def resolved_paths(self) -> list[Path]:
        return list(self._resolved_paths)
