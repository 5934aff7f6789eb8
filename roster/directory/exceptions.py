"""Directory exception hierarchy."""

from roster.contacts.fields import Name


class DirectoryError(Exception):
    """Base exception for directory operations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateContactError(DirectoryError):
    """Raised when a contact with the same name is already stored."""

    def __init__(self, name: Name) -> None:
        super().__init__(f"A contact named '{name}' already exists")
        self.name = name


class ContactNotFoundError(DirectoryError):
    """Raised when the target contact is not in the directory."""

    def __init__(self, name: Name) -> None:
        super().__init__(f"No contact named '{name}' in the directory")
        self.name = name
