"""Value types for the tag workflow."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileSet:
    """A base directory plus files relative to it.

    An empty ``files`` tuple means the whole directory, recursively.
    """

    basedir: Path
    files: tuple[Path, ...] = ()

    @property
    def is_whole_directory(self) -> bool:
        return len(self.files) == 0


@dataclass(frozen=True)
class TagSettings:
    """Settings read for the duration of one tag operation."""

    label_to_vob_root: bool = False
    label_entire_vob: bool = False
    ignore_mklabel_failure_on_locked_objects: bool = False


@dataclass(frozen=True)
class ExecutionResult:
    """Exit code and captured output of a single cleartool invocation."""

    exit_code: int
    stdout_lines: tuple[str, ...]
    stderr_lines: tuple[str, ...]

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def stderr(self) -> str:
        return "\n".join(self.stderr_lines)


@dataclass(frozen=True)
class TaggedFile:
    """A version that cleartool reported as labelled."""

    path: str
    label: str
    version: str | None


@dataclass(frozen=True)
class TagResult:
    """Outcome of a tag operation.

    ``command_lines`` holds every command the workflow issued, in order.
    On success ``tagged_files`` is populated; on failure ``message`` and
    ``stderr`` carry the diagnostic text.
    """

    command_lines: tuple[str, ...]
    success: bool
    tagged_files: tuple[TaggedFile, ...] = ()
    message: str | None = None
    stderr: str | None = None

    @property
    def command_text(self) -> str:
        return "\n".join(self.command_lines)

    @classmethod
    def succeeded(
        cls, command_lines: list[str], tagged_files: list[TaggedFile]
    ) -> "TagResult":
        return cls(
            command_lines=tuple(command_lines),
            success=True,
            tagged_files=tuple(tagged_files),
        )

    @classmethod
    def failed(cls, command_lines: list[str], message: str, stderr: str) -> "TagResult":
        return cls(
            command_lines=tuple(command_lines),
            success=False,
            message=message,
            stderr=stderr,
        )
