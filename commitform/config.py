"""User settings for commitform.

Handles the optional user-level settings file ~/.commitform/config.yaml:

    color: true          # styled rendering of the form
    clear_screen: true   # redraw the form on a cleared screen

A missing file means defaults. The NO_COLOR environment variable disables
colors regardless of the file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from commitform.exceptions import SettingsError

_CONFIG_DIR = Path.home() / ".commitform"


class Settings(BaseModel):
    """Presentation settings for the commit form."""

    model_config = ConfigDict(extra="ignore")

    color: bool = True
    clear_screen: bool = True


def get_config_dir() -> Path:
    """Get the commitform configuration directory.

    Returns:
        Path to ~/.commitform/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitform/config.yaml
    """
    return get_config_dir() / "config.yaml"


def load_config_file() -> Dict[str, Any]:
    """Load raw settings from ~/.commitform/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise SettingsError(f"Config in {config_file} must be a mapping")
    return config


def load_settings(environ: Optional[Dict[str, str]] = None) -> Settings:
    """Load settings from the config file and environment.

    Args:
        environ: Environment to consult. Defaults to os.environ.

    Returns:
        The effective Settings.

    Raises:
        SettingsError: If the file cannot be parsed or holds invalid values.
    """
    environ = os.environ if environ is None else environ
    raw = load_config_file()

    try:
        settings = Settings(**raw)
    except ValidationError as e:
        raise SettingsError(f"Invalid config in {get_config_file_path()}: {e}") from e

    if environ.get("NO_COLOR"):
        settings = settings.model_copy(update={"color": False})
    return settings
