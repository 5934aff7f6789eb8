"""Configuration model exports.

    from roster.config.models import LoggingConfig, ObservabilityConfig
"""

from roster.config.models.observability import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    ObservabilityConfig,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ObservabilityConfig",
]
