"""The ``cclabel tag`` command."""

import json
from dataclasses import asdict
from pathlib import Path

import click

from cclabel.cli.config import apply_overrides, load_settings
from cclabel.core.context import ClearCaseContext
from cclabel.core.errors import ConfigurationError, ToolExecutionError
from cclabel.core.tag_command import execute_tag
from cclabel.core.types import FileSet, TagResult
from cclabel.output import machine_output, user_output


def _render_json(result: TagResult) -> str:
    return json.dumps(asdict(result))


@click.command("tag")
@click.argument("label")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--basedir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory the files are relative to (defaults to the current directory)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (defaults to ~/.cclabel/config.toml)",
)
@click.option(
    "--label-to-vob-root",
    is_flag=True,
    help="Also label every directory from the base directory up to the VOB root",
)
@click.option(
    "--label-entire-vob",
    is_flag=True,
    help="Label the whole VOB recursively from its root",
)
@click.option(
    "--ignore-locked-failures",
    is_flag=True,
    help="Treat mklabel failures caused only by locked objects as success",
)
@click.option("--dry-run", is_flag=True, help="Print cleartool commands without running them")
@click.option("-v", "--verbose", is_flag=True, help="Print each cleartool command as it runs")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_obj
def tag_cmd(
    ctx: ClearCaseContext,
    label: str,
    files: tuple[Path, ...],
    basedir: Path | None,
    config_path: Path | None,
    label_to_vob_root: bool,
    label_entire_vob: bool,
    ignore_locked_failures: bool,
    dry_run: bool,
    verbose: bool,
    as_json: bool,
) -> None:
    """Create label type LABEL and apply it to FILES.

    FILES are relative to --basedir. Without FILES, the base directory is
    labelled recursively.

    Examples:

      cclabel tag REL_1.0 Main.java Util.java

      cclabel tag --label-entire-vob REL_1.0
    """
    ctx = ctx.with_modes(dry_run=dry_run, verbose=verbose)

    try:
        settings = apply_overrides(
            load_settings(config_path),
            label_to_vob_root=label_to_vob_root,
            label_entire_vob=label_entire_vob,
            ignore_locked_failures=ignore_locked_failures,
        )
        file_set = FileSet(basedir=basedir if basedir is not None else ctx.cwd, files=files)
        result = execute_tag(
            file_set,
            label,
            settings,
            executor=ctx.executor,
            vob_root_resolver=ctx.vob_root_resolver,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    except ToolExecutionError as e:
        raise click.ClickException(f"{e} {e.__cause__}") from e

    if as_json:
        machine_output(_render_json(result))
        if not result.success:
            raise SystemExit(1)
        return

    if not result.success:
        user_output(click.style("Error: ", fg="red") + str(result.message))
        user_output(result.command_text)
        if result.stderr:
            user_output(result.stderr)
        raise SystemExit(1)

    for tagged in result.tagged_files:
        machine_output(tagged.path)
    user_output(click.style(f"✓ Applied label {label}", fg="green"))
