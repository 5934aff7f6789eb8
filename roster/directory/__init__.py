"""Directory: the collection of contacts and its visible, filtered view."""

from roster.directory.exceptions import (
    ContactNotFoundError,
    DirectoryError,
    DuplicateContactError,
)
from roster.directory.store import ContactDirectory, ContactPredicate, show_all_contacts
from roster.directory.stores import InMemoryDirectory

__all__ = [
    "ContactDirectory",
    "ContactPredicate",
    "InMemoryDirectory",
    "show_all_contacts",
    # Exceptions
    "ContactNotFoundError",
    "DirectoryError",
    "DuplicateContactError",
]
