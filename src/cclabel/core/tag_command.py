"""Label application workflow.

Creates a label type with ``cleartool mklbtype`` and applies it with
``cleartool mklabel``, optionally to the whole VOB or to every directory
from the working directory up to the VOB root.

Flow:
    validate -> mklbtype -> mklabel -> [tolerate lock failures]
    -> [label ancestors up to VOB root] -> TagResult
"""

import logging
from pathlib import Path

from cclabel.core.command_line import (
    CommandLine,
    create_directory_mklabel_command,
    create_mklabel_command,
    create_mklbtype_command,
)
from cclabel.core.errors import CommandLineError, ConfigurationError, ToolExecutionError
from cclabel.core.lock_failures import all_lock_failures
from cclabel.core.tag_output import TagOutputCollector
from cclabel.core.types import ExecutionResult, FileSet, TagResult, TagSettings
from cclabel.gateway.command_executor.abc import CommandExecutor, LineConsumer
from cclabel.gateway.vob_root.abc import VobRootResolver

logger = logging.getLogger(__name__)

TOOL_FAILURE_MESSAGE = "The cleartool command failed."


def validate_tag_request(file_set: FileSet, label: str, settings: TagSettings) -> None:
    """Reject requests that cannot be carried out, before anything runs.

    Raises:
        ConfigurationError: If the label is unusable or the settings conflict
            with each other or with the file set
    """
    if not label or not label.strip():
        raise ConfigurationError("A label name must be specified.")
    if any(ch.isspace() for ch in label):
        raise ConfigurationError(f"Label name must not contain whitespace: '{label}'")
    if settings.label_entire_vob and settings.label_to_vob_root:
        raise ConfigurationError(
            "Cannot have both labelEntireVOB=true and labelToVOBRoot=true."
        )
    if settings.label_entire_vob and not file_set.is_whole_directory:
        raise ConfigurationError("Cannot label specific files when labelEntireVOB=true.")


def _run(
    executor: CommandExecutor,
    command: CommandLine,
    *,
    stdout: LineConsumer | None = None,
) -> ExecutionResult:
    """Execute a command, collecting its output lines."""
    out_lines: list[str] = []
    err_lines: list[str] = []

    def on_stdout(line: str) -> None:
        out_lines.append(line)
        if stdout is not None:
            stdout(line)

    logger.debug("Executing: %s>>%s", command.working_directory, command)
    exit_code = executor.execute(command, stdout=on_stdout, stderr=err_lines.append)
    return ExecutionResult(
        exit_code=exit_code,
        stdout_lines=tuple(out_lines),
        stderr_lines=tuple(err_lines),
    )


def _label_target(
    file_set: FileSet,
    settings: TagSettings,
    vob_root_resolver: VobRootResolver,
) -> FileSet:
    if settings.label_entire_vob:
        vob_root = vob_root_resolver.resolve_vob_root(file_set.basedir)
        logger.debug("Labelling entire VOB from root: %s", vob_root)
        return FileSet(basedir=vob_root)
    return file_set


def _tolerates_failure(result: ExecutionResult, settings: TagSettings) -> bool:
    if result.succeeded or not settings.ignore_mklabel_failure_on_locked_objects:
        return False
    return all_lock_failures(result.stderr_lines)


def _directories_up_to(start: Path, root: Path) -> list[Path]:
    """List ``start`` and its ancestors, ending with ``root``.

    Stops at the filesystem root if ``root`` is not an ancestor of ``start``.
    """
    directories = [start]
    current = start
    while current != root and current.parent != current:
        current = current.parent
        directories.append(current)
    return directories


def _label_to_vob_root(
    working_directory: Path,
    label: str,
    *,
    executor: CommandExecutor,
    vob_root_resolver: VobRootResolver,
    collector: TagOutputCollector,
    command_lines: list[str],
) -> None:
    """Label each directory from ``working_directory`` up to the VOB root.

    A failing directory stops the walk. Failures are recorded in
    ``command_lines`` but do not affect the overall result.
    """
    logger.debug("Labelling to VOB root from: %s", working_directory)
    vob_root = vob_root_resolver.resolve_vob_root(working_directory)

    for directory in _directories_up_to(working_directory, vob_root.absolute()):
        command = create_directory_mklabel_command(directory, label)
        command_lines.append(str(command))
        result = _run(executor, command, stdout=collector.consume_line)
        if not result.succeeded:
            logger.debug(
                "Stopped labelling to VOB root after failure in %s (exit code %d): %s",
                directory,
                result.exit_code,
                result.stderr,
            )
            return


def execute_tag(
    file_set: FileSet,
    label: str,
    settings: TagSettings,
    *,
    executor: CommandExecutor,
    vob_root_resolver: VobRootResolver,
) -> TagResult:
    """Create label type ``label`` and apply it to ``file_set``.

    Args:
        file_set: Files to label, or an empty file set for the whole directory
        label: Label type name
        settings: Behaviour flags for this call
        executor: Runs the cleartool commands
        vob_root_resolver: Finds the VOB root for the VOB-wide modes

    Returns:
        TagResult describing every command issued and the outcome. A non-zero
        exit from cleartool produces a failed result rather than an exception.

    Raises:
        ConfigurationError: If the request is invalid (nothing is executed)
        ToolExecutionError: If a cleartool process could not be launched
    """
    validate_tag_request(file_set, label, settings)
    logger.debug("Executing tag command for label %s", label)

    command_lines: list[str] = []
    collector = TagOutputCollector()

    try:
        mklbtype = create_mklbtype_command(file_set, label)
        command_lines.append(str(mklbtype))
        logger.debug("Creating label: %s", label)
        created = _run(executor, mklbtype)
        if not created.succeeded:
            return TagResult.failed(command_lines, TOOL_FAILURE_MESSAGE, created.stderr)

        target = _label_target(file_set, settings, vob_root_resolver)
        mklabel = create_mklabel_command(target, label)
        command_lines.append(str(mklabel))
        labelled = _run(executor, mklabel, stdout=collector.consume_line)

        if _tolerates_failure(labelled, settings):
            logger.debug(
                "Ignoring mklabel exit code %d: all errors are caused by locked objects",
                labelled.exit_code,
            )
        elif not labelled.succeeded:
            return TagResult.failed(command_lines, TOOL_FAILURE_MESSAGE, labelled.stderr)

        if settings.label_to_vob_root:
            _label_to_vob_root(
                mklabel.working_directory,
                label,
                executor=executor,
                vob_root_resolver=vob_root_resolver,
                collector=collector,
                command_lines=command_lines,
            )
    except CommandLineError as e:
        raise ToolExecutionError("Error while executing cleartool command.") from e

    return TagResult.succeeded(command_lines, collector.tagged_files)
