"""Tests for the label application workflow."""

from pathlib import Path

import pytest

from cclabel.core.command_line import CommandLine
from cclabel.core.errors import CommandLineError, ConfigurationError, ToolExecutionError
from cclabel.core.tag_command import TOOL_FAILURE_MESSAGE, execute_tag
from cclabel.core.types import ExecutionResult, FileSet, TaggedFile, TagResult, TagSettings
from cclabel.gateway.command_executor.fake import FakeCommandExecutor
from cclabel.gateway.vob_root.fake import FakeVobRootResolver
from cclabel.gateway.vob_root.real import ProbingVobRootResolver
from tests.test_utils.vob import mklabel_failure_responder, vob_responder

LABEL = "TEST_LABEL_V1.0"

LOCK_ERRORS = [
    "cleartool: Error: Lock on global branch type 'br1' (in VOB\\Admin_vob) "
    "prevents operation 'make label'.",
    "cleartool: Error: Object locked except for users: sue_test.",
    "cleartool: Error: Trouble applying label to '.\\Folder1\\t1.txt'.",
]


@pytest.fixture
def vob_root(tmp_path: Path) -> Path:
    return tmp_path / "vob"


@pytest.fixture
def working_directory(vob_root: Path) -> Path:
    """A directory three levels below the VOB root."""
    return vob_root / "project" / "module" / "src"


def _run_tag(
    file_set: FileSet,
    settings: TagSettings,
    executor: FakeCommandExecutor,
) -> TagResult:
    return execute_tag(
        file_set,
        LABEL,
        settings,
        executor=executor,
        vob_root_resolver=ProbingVobRootResolver(executor),
    )


class TestLabelCommands:
    def test_default_settings_issue_mklbtype_then_mklabel(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor()
        file_set = FileSet(basedir=tmp_path, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(), executor)

        assert result.success is True
        assert executor.command_strings == [
            f"cleartool mklbtype -nc {LABEL}",
            f"cleartool mklabel {LABEL} test.java",
        ]
        assert all(c.working_directory == tmp_path for c in executor.executed_commands)
        assert list(result.command_lines) == executor.command_strings

    def test_empty_file_set_labels_recursively(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor()

        _run_tag(FileSet(basedir=tmp_path), TagSettings(), executor)

        assert executor.command_strings[1] == f"cleartool mklabel -recurse {LABEL} ."

    def test_tagged_files_come_from_mklabel_output(self, tmp_path: Path) -> None:
        def respond(command: CommandLine) -> ExecutionResult:
            if command.subcommand == "mklabel":
                return ExecutionResult(
                    exit_code=0,
                    stdout_lines=(
                        f'Created label "{LABEL}" on "a.java" version "\\main\\1".',
                        f'Created label "{LABEL}" on "b.java" version "\\main\\4".',
                    ),
                    stderr_lines=(),
                )
            return ExecutionResult(exit_code=0, stdout_lines=(), stderr_lines=())

        executor = FakeCommandExecutor(responder=respond)
        file_set = FileSet(basedir=tmp_path, files=(Path("a.java"), Path("b.java")))

        result = _run_tag(file_set, TagSettings(), executor)

        assert result.tagged_files == (
            TaggedFile(path="a.java", label=LABEL, version="\\main\\1"),
            TaggedFile(path="b.java", label=LABEL, version="\\main\\4"),
        )


class TestLabelToVobRoot:
    def test_labels_each_directory_up_to_vob_root(
        self, vob_root: Path, working_directory: Path
    ) -> None:
        executor = FakeCommandExecutor(responder=vob_responder(vob_root))
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        assert result.success is True

        mklbtype = executor.commands_for("mklbtype")
        assert len(mklbtype) == 1
        assert str(mklbtype[0]) == f"cleartool mklbtype -nc {LABEL}"
        assert mklbtype[0].working_directory == working_directory

        mklabel = executor.commands_for("mklabel")
        assert len(mklabel) == 5
        assert str(mklabel[0]) == f"cleartool mklabel {LABEL} test.java"
        assert mklabel[0].working_directory == working_directory

        expected_directory = working_directory
        for command in mklabel[1:]:
            assert str(command) == f"cleartool mklabel {LABEL} ."
            assert command.working_directory == expected_directory
            expected_directory = expected_directory.parent

        assert mklabel[-1].working_directory == vob_root

    def test_ancestor_commands_are_recorded(self, vob_root: Path, working_directory: Path) -> None:
        executor = FakeCommandExecutor(responder=vob_responder(vob_root))
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        assert result.command_lines == (
            f"cleartool mklbtype -nc {LABEL}",
            f"cleartool mklabel {LABEL} test.java",
            *[f"cleartool mklabel {LABEL} ."] * 4,
        )

    def test_failure_in_walk_does_not_fail_result(
        self, vob_root: Path, working_directory: Path
    ) -> None:
        def respond(command: CommandLine) -> ExecutionResult:
            if command.args == ("mklabel", LABEL, ".") and command.working_directory == vob_root:
                return ExecutionResult(
                    exit_code=1,
                    stdout_lines=(),
                    stderr_lines=("cleartool: Error: Unable to lock directory.",),
                )
            return vob_responder(vob_root)(command)

        executor = FakeCommandExecutor(responder=respond)
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        assert result.success is True
        assert result.command_lines[-1] == f"cleartool mklabel {LABEL} ."

    def test_failure_in_walk_stops_walk(self, vob_root: Path, working_directory: Path) -> None:
        failing_directory = working_directory.parent

        def respond(command: CommandLine) -> ExecutionResult:
            is_directory_label = command.args == ("mklabel", LABEL, ".")
            if is_directory_label and command.working_directory == failing_directory:
                return ExecutionResult(exit_code=1, stdout_lines=(), stderr_lines=("boom",))
            return vob_responder(vob_root)(command)

        executor = FakeCommandExecutor(responder=respond)
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        directory_labels = [
            c.working_directory for c in executor.commands_for("mklabel") if c.args[-1] == "."
        ]
        assert directory_labels == [working_directory, failing_directory]

    def test_not_run_when_label_step_fails(self, vob_root: Path, working_directory: Path) -> None:
        executor = FakeCommandExecutor(responder=mklabel_failure_responder(["cleartool: Error: x"]))
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        assert result.success is False
        assert len(executor.commands_for("mklabel")) == 1

    def test_ancestor_output_adds_tagged_files(
        self, vob_root: Path, working_directory: Path
    ) -> None:
        def respond(command: CommandLine) -> ExecutionResult:
            if command.args == ("mklabel", LABEL, ".") and command.working_directory == vob_root:
                return ExecutionResult(
                    exit_code=0,
                    stdout_lines=(f'Created label "{LABEL}" on "." version "\\main\\7".',),
                    stderr_lines=(),
                )
            if command.args == ("mklabel", LABEL, "test.java"):
                return ExecutionResult(
                    exit_code=0,
                    stdout_lines=(f'Created label "{LABEL}" on "test.java" version "\\main\\2".',),
                    stderr_lines=(),
                )
            return vob_responder(vob_root)(command)

        executor = FakeCommandExecutor(responder=respond)
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        result = _run_tag(file_set, TagSettings(label_to_vob_root=True), executor)

        assert result.tagged_files == (
            TaggedFile(path="test.java", label=LABEL, version="\\main\\2"),
            TaggedFile(path=".", label=LABEL, version="\\main\\7"),
        )

    def test_uses_vob_root_resolver(self, vob_root: Path, working_directory: Path) -> None:
        executor = FakeCommandExecutor()
        resolver = FakeVobRootResolver(vob_root=working_directory.parent)
        file_set = FileSet(basedir=working_directory, files=(Path("test.java"),))

        execute_tag(
            file_set,
            LABEL,
            TagSettings(label_to_vob_root=True),
            executor=executor,
            vob_root_resolver=resolver,
        )

        assert resolver.resolved_paths == [working_directory]
        directory_labels = [
            c.working_directory for c in executor.commands_for("mklabel") if c.args[-1] == "."
        ]
        assert directory_labels == [working_directory, working_directory.parent]


class TestLabelEntireVob:
    def test_labels_vob_root_recursively(self, vob_root: Path, working_directory: Path) -> None:
        executor = FakeCommandExecutor(responder=vob_responder(vob_root))

        result = _run_tag(
            FileSet(basedir=working_directory), TagSettings(label_entire_vob=True), executor
        )

        assert result.success is True

        mklbtype = executor.commands_for("mklbtype")
        assert len(mklbtype) == 1
        assert mklbtype[0].working_directory == working_directory

        mklabel = executor.commands_for("mklabel")
        assert len(mklabel) == 1
        assert str(mklabel[0]) == f"cleartool mklabel -recurse {LABEL} ."
        assert mklabel[0].working_directory == vob_root

    def test_probes_parents_with_ls(self, vob_root: Path, working_directory: Path) -> None:
        executor = FakeCommandExecutor(responder=vob_responder(vob_root))

        _run_tag(FileSet(basedir=working_directory), TagSettings(label_entire_vob=True), executor)

        probes = executor.commands_for("ls")
        assert [str(p) for p in probes] == ["cleartool ls ."] * 4
        assert probes[-1].working_directory == vob_root.parent


class TestValidation:
    def test_conflicting_vob_settings(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor()
        settings = TagSettings(label_to_vob_root=True, label_entire_vob=True)

        with pytest.raises(ConfigurationError) as exc_info:
            _run_tag(FileSet(basedir=tmp_path), settings, executor)

        assert str(exc_info.value) == (
            "Cannot have both labelEntireVOB=true and labelToVOBRoot=true."
        )
        assert executor.executed_commands == []

    def test_entire_vob_with_specific_files(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor()
        file_set = FileSet(basedir=tmp_path, files=(Path("test.java"),))

        with pytest.raises(ConfigurationError) as exc_info:
            _run_tag(file_set, TagSettings(label_entire_vob=True), executor)

        assert str(exc_info.value) == "Cannot label specific files when labelEntireVOB=true."
        assert executor.executed_commands == []

    @pytest.mark.parametrize("label", ["", "   ", "REL 1"])
    def test_unusable_label(self, tmp_path: Path, label: str) -> None:
        executor = FakeCommandExecutor()

        with pytest.raises(ConfigurationError):
            execute_tag(
                FileSet(basedir=tmp_path),
                label,
                TagSettings(),
                executor=executor,
                vob_root_resolver=ProbingVobRootResolver(executor),
            )

        assert executor.executed_commands == []


class TestFailures:
    def test_mklbtype_failure_aborts(self, tmp_path: Path) -> None:
        def respond(command: CommandLine) -> ExecutionResult:
            if command.subcommand == "mklbtype":
                return ExecutionResult(
                    exit_code=1,
                    stdout_lines=(),
                    stderr_lines=(f'cleartool: Error: Name "{LABEL}" already exists.',),
                )
            return ExecutionResult(exit_code=0, stdout_lines=(), stderr_lines=())

        executor = FakeCommandExecutor(responder=respond)

        result = _run_tag(FileSet(basedir=tmp_path), TagSettings(), executor)

        assert result.success is False
        assert result.message == TOOL_FAILURE_MESSAGE
        assert result.stderr == f'cleartool: Error: Name "{LABEL}" already exists.'
        assert result.command_lines == (f"cleartool mklbtype -nc {LABEL}",)
        assert executor.commands_for("mklabel") == []

    def test_lock_failures_fail_by_default(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor(responder=mklabel_failure_responder(LOCK_ERRORS))

        result = _run_tag(FileSet(basedir=tmp_path), TagSettings(), executor)

        assert result.success is False
        assert result.stderr == "\n".join(LOCK_ERRORS)

    def test_lock_failures_tolerated_when_configured(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor(responder=mklabel_failure_responder(LOCK_ERRORS))
        settings = TagSettings(ignore_mklabel_failure_on_locked_objects=True)

        result = _run_tag(FileSet(basedir=tmp_path), settings, executor)

        assert result.success is True

    def test_blank_stderr_line_is_not_tolerated(self, tmp_path: Path) -> None:
        errors = ["cleartool: Error: Object locked except for users: sue_test.", ""]
        executor = FakeCommandExecutor(responder=mklabel_failure_responder(errors))
        settings = TagSettings(ignore_mklabel_failure_on_locked_objects=True)

        result = _run_tag(FileSet(basedir=tmp_path), settings, executor)

        assert result.success is False

    def test_unrelated_error_is_not_tolerated(self, tmp_path: Path) -> None:
        errors = [
            *LOCK_ERRORS,
            "cleartool: Error: Version label of type 'LB1' already on element.",
        ]
        executor = FakeCommandExecutor(responder=mklabel_failure_responder(errors))
        settings = TagSettings(ignore_mklabel_failure_on_locked_objects=True)

        result = _run_tag(FileSet(basedir=tmp_path), settings, executor)

        assert result.success is False

    def test_failure_without_stderr_is_not_tolerated(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor(responder=mklabel_failure_responder([]))
        settings = TagSettings(ignore_mklabel_failure_on_locked_objects=True)

        result = _run_tag(FileSet(basedir=tmp_path), settings, executor)

        assert result.success is False

    def test_launch_failure_is_wrapped(self, tmp_path: Path) -> None:
        executor = FakeCommandExecutor(launch_failures={"mklbtype"})

        with pytest.raises(ToolExecutionError) as exc_info:
            _run_tag(FileSet(basedir=tmp_path), TagSettings(), executor)

        assert isinstance(exc_info.value.__cause__, CommandLineError)
