"""
Configuration paths and environment variable names.
"""
from __future__ import annotations

import os

APP_NAME: str = "pi-grid"
CONFIG_DIR_NAME: str = ".pi-grid"
SETTINGS_FILE_NAME: str = "settings.yaml"
VERSION: str = "0.1.0"

ENV_CONFIG_DIR: str = "PI_GRID_DIR"
ENV_WRITE_LOG: str = "PI_GRID_WRITE_LOG"


def get_config_dir() -> str:
    """Get the user config directory (e.g., ~/.pi-grid/)."""
    env_dir = os.environ.get(ENV_CONFIG_DIR)
    if env_dir:
        home = os.path.expanduser("~")
        if env_dir == "~":
            return home
        if env_dir.startswith("~/"):
            return home + env_dir[1:]
        return env_dir
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


def get_settings_path() -> str:
    """Get path to the user settings.yaml."""
    return os.path.join(get_config_dir(), SETTINGS_FILE_NAME)


def get_project_settings_path(cwd: str) -> str:
    """Get path to the project-local settings.yaml (<cwd>/.pi-grid/settings.yaml)."""
    return os.path.join(cwd, CONFIG_DIR_NAME, SETTINGS_FILE_NAME)
