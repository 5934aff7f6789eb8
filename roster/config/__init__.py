"""Configuration loading for Roster.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from roster.config import get_settings

    settings = get_settings()
    level = settings.observability.logging.level
"""

from functools import lru_cache

from roster.config.loader import get_config_dir
from roster.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.

    Raises:
        FileNotFoundError: If config/default.toml is missing
    """
    default_path = get_config_dir() / "default.toml"
    if not default_path.exists():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            "Create config/default.toml or set ROSTER_CONFIG_DIR."
        )

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
