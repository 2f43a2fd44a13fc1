"""Shared constants for autosettings."""

import os
from pathlib import Path

APP_NAME = "autosettings"
APP_VERSION = "0.3.0"

# CSS class marking a widget that is loaded and saved automatically
SETTING_CLASS = "setting"

# Grouped widgets carry this class prefix + group id so a scope can be queried for a group
OPTION_GROUP_CLASS_PREFIX = "optiongroup-"


def _xdg_dir(env_var: str, fallback: Path) -> Path:
    return Path(os.environ.get(env_var, str(fallback))) / APP_NAME


def config_dir() -> Path:
    """Directory holding the stored settings ($XDG_CONFIG_HOME/autosettings)."""
    return _xdg_dir("XDG_CONFIG_HOME", Path.home() / ".config")


def state_dir() -> Path:
    """Directory holding the log file ($XDG_STATE_HOME/autosettings)."""
    return _xdg_dir("XDG_STATE_HOME", Path.home() / ".local" / "state")


def default_store_path() -> Path:
    return config_dir() / "settings.json"
