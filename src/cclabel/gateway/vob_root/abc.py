from abc import ABC, abstractmethod
from pathlib import Path


class VobRootResolver(ABC):
    @abstractmethod
    def resolve_vob_root(self, path: Path) -> Path:
        """Find the root directory of the VOB containing ``path``.

        Args:
            path: A directory assumed to be inside a VOB

        Returns:
            The topmost ancestor of ``path`` (possibly ``path`` itself) that
            is still inside the VOB

        Raises:
            CommandLineError: If a probe command could not be launched
        """
        ...
