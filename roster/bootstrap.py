"""Wiring for a running roster: settings, logging and the directory."""

from collections.abc import Iterable

from roster.config import Settings, get_settings
from roster.contacts.models import Contact
from roster.directory.stores.inmemory import InMemoryDirectory
from roster.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_observability(settings: Settings | None = None) -> Settings:
    """Configure logging from settings.

    Args:
        settings: Settings to use; loaded with get_settings() when omitted

    Returns:
        The settings that were applied
    """
    settings = settings or get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )
    logger.info(
        "observability_initialized",
        app_name=settings.app_name,
        log_level=log_config.level,
        log_format=log_config.format,
    )
    return settings


def build_directory(contacts: Iterable[Contact] = ()) -> InMemoryDirectory:
    """Create an in-memory directory holding ``contacts``."""
    directory = InMemoryDirectory(contacts)
    logger.info("directory_loaded", contact_count=len(directory.all_contacts()))
    return directory
