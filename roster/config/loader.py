"""Locate the TOML files that make up the configuration."""

import os
from pathlib import Path


def get_config_dir() -> Path:
    """Get the configuration directory path.

    The config directory can be overridden with ROSTER_CONFIG_DIR env var.
    Defaults to 'config/' relative to the working directory.
    """
    config_dir_env = os.environ.get("ROSTER_CONFIG_DIR")
    if config_dir_env:
        path = Path(config_dir_env)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {config_dir_env}")
        return path

    return Path("config")


def get_environment() -> str:
    """Get the current environment from ROSTER_ENV.

    Defaults to 'development' if not set.
    """
    return os.environ.get("ROSTER_ENV", "development")


def config_files() -> list[Path]:
    """Return the TOML files to read, lowest priority first.

    1. config/default.toml
    2. config/{ROSTER_ENV}.toml

    Files that do not exist are skipped by the settings source.
    """
    config_dir = get_config_dir()
    return [config_dir / "default.toml", config_dir / f"{get_environment()}.toml"]
