"""Directory store implementations."""

from roster.directory.store import ContactDirectory
from roster.directory.stores.inmemory import InMemoryDirectory

__all__ = [
    "ContactDirectory",
    "InMemoryDirectory",
]
