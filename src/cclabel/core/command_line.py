"""Construction of cleartool command lines."""

from dataclasses import dataclass
from pathlib import Path

from cclabel.core.types import FileSet

CLEARTOOL = "cleartool"


@dataclass(frozen=True)
class CommandLine:
    """An executable, its arguments and the directory it runs in."""

    executable: str
    args: tuple[str, ...]
    working_directory: Path

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    @property
    def subcommand(self) -> str:
        return self.args[0] if self.args else ""

    def __str__(self) -> str:
        return " ".join(self.argv)


def create_mklbtype_command(file_set: FileSet, label: str) -> CommandLine:
    """Build ``cleartool mklbtype -nc <label>`` in the file set's base directory."""
    return CommandLine(
        executable=CLEARTOOL,
        args=("mklbtype", "-nc", label),
        working_directory=file_set.basedir.absolute(),
    )


def create_mklabel_command(file_set: FileSet, label: str) -> CommandLine:
    """Build the label command for a file set.

    Specific files are passed by name (final path component) after the label.
    An empty file set labels the base directory recursively:
    ``cleartool mklabel -recurse <label> .``
    """
    args = ["mklabel"]
    if file_set.is_whole_directory:
        args.append("-recurse")
    args.append(label)

    if file_set.is_whole_directory:
        args.append(".")
    else:
        args.extend(file.name for file in file_set.files)

    return CommandLine(
        executable=CLEARTOOL,
        args=tuple(args),
        working_directory=file_set.basedir.absolute(),
    )


def create_directory_mklabel_command(directory: Path, label: str) -> CommandLine:
    """Build ``cleartool mklabel <label> .`` for a single directory element."""
    return CommandLine(
        executable=CLEARTOOL,
        args=("mklabel", label, "."),
        working_directory=directory.absolute(),
    )


def create_ls_command(directory: Path) -> CommandLine:
    """Build ``cleartool ls .``, used to probe whether a directory is inside a VOB."""
    return CommandLine(
        executable=CLEARTOOL,
        args=("ls", "."),
        working_directory=directory.absolute(),
    )
