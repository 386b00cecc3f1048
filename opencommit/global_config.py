"""User-level settings for opencommit, kept in ~/.opencommit/config.yaml.

The file is a flat YAML mapping whose keys are ResolvedConfig field names
(ai_provider, model, tokens_max_input, ...). Values written here sit
below .env files and OCO_* environment variables in precedence.
"""

from pathlib import Path
from typing import Dict, Any

import yaml


class GlobalConfigError(Exception):
    """The settings file could not be read or written."""
    pass


_CONFIG_DIR = Path.home() / ".opencommit"
_CONFIG_FILE_NAME = "config.yaml"


def get_global_config_dir() -> Path:
    """Directory holding the user settings file."""
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Create the settings directory if it is missing and return it."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Location of the YAML settings file, whether or not it exists."""
    return get_global_config_dir() / _CONFIG_FILE_NAME


def load_global_config() -> Dict[str, Any]:
    """Read the stored settings.

    A missing file is the same as an empty one.

    Raises:
        GlobalConfigError: If the file is unreadable, is not valid YAML,
            or holds something other than a mapping.
    """
    path = get_config_file_path()
    if not path.is_file():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Could not read {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise GlobalConfigError(f"{path} must contain a mapping of settings")
    return data


def save_global_config(config: Dict[str, Any]) -> None:
    """Replace the stored settings with ``config``.

    Raises:
        GlobalConfigError: If the file cannot be written.
    """
    ensure_global_config_dir()
    path = get_config_file_path()
    text = yaml.safe_dump(config, default_flow_style=False, sort_keys=False, allow_unicode=True)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise GlobalConfigError(f"Could not write {path}: {e}")


def set_values(values: Dict[str, Any]) -> None:
    """Merge ``values`` into the stored settings and write them back."""
    merged = load_global_config()
    merged.update(values)
    save_global_config(merged)


def is_configured() -> bool:
    return get_config_file_path().is_file()
