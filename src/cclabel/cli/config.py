"""Loading of tag settings from TOML.

Example ~/.cclabel/config.toml:

  [tag]
  label_to_vob_root = false
  label_entire_vob = false
  ignore_mklabel_failure_on_locked_objects = true

Keys may also appear at the top level; values in [tag] win.
"""

import tomllib
from pathlib import Path

from cclabel.core.errors import ConfigurationError
from cclabel.core.types import TagSettings

SETTING_KEYS = (
    "label_to_vob_root",
    "label_entire_vob",
    "ignore_mklabel_failure_on_locked_objects",
)


def default_config_path() -> Path:
    return Path.home() / ".cclabel" / "config.toml"


def parse_settings(data: dict[str, object], *, source: str) -> TagSettings:
    """Build TagSettings from parsed TOML data.

    Raises:
        ConfigurationError: If a setting is present but not a boolean
    """
    merged: dict[str, object] = {k: v for k, v in data.items() if k in SETTING_KEYS}
    tag_table = data.get("tag", {})
    if isinstance(tag_table, dict):
        merged.update({k: v for k, v in tag_table.items() if k in SETTING_KEYS})

    values: dict[str, bool] = {}
    for key, value in merged.items():
        if not isinstance(value, bool):
            raise ConfigurationError(
                f"Setting '{key}' in {source} must be true or false, got {value!r}"
            )
        values[key] = value
    return TagSettings(**values)


def load_settings(config_path: Path | None) -> TagSettings:
    """Load settings from ``config_path``, or the default location if None.

    A missing default file yields all-false settings. An explicitly requested
    file must exist.

    Raises:
        ConfigurationError: If the file is missing, malformed or has bad values
    """
    if config_path is None:
        config_path = default_config_path()
        if not config_path.exists():
            return TagSettings()
    elif not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    # Acceptable try/except: tomllib offers no way to validate syntax up front
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    return parse_settings(data, source=str(config_path))


def apply_overrides(
    settings: TagSettings,
    *,
    label_to_vob_root: bool,
    label_entire_vob: bool,
    ignore_locked_failures: bool,
) -> TagSettings:
    """Enable settings requested on the command line on top of loaded ones."""
    return TagSettings(
        label_to_vob_root=settings.label_to_vob_root or label_to_vob_root,
        label_entire_vob=settings.label_entire_vob or label_entire_vob,
        ignore_mklabel_failure_on_locked_objects=(
            settings.ignore_mklabel_failure_on_locked_objects or ignore_locked_failures
        ),
    )
