"""Command exception hierarchy.

Every rejected command raises a subclass of CommandError. Each carries
an ``error_code`` for programmatic handling and a ``message`` meant to
be shown to the user verbatim.
"""

from enum import Enum

from roster.commands import messages


class ErrorCode(str, Enum):
    """Machine-readable reasons a command was rejected."""

    INVALID_INDEX = "INVALID_INDEX"
    """The display position is outside the visible list."""

    NO_FIELDS_EDITED = "NO_FIELDS_EDITED"
    """An edit was requested without any field to change."""

    ROLE_CONSTRAINT = "ROLE_CONSTRAINT"
    """The edit is not allowed for the contact's role."""

    DUPLICATE_RECORD = "DUPLICATE_RECORD"
    """The edited contact collides with another stored contact."""


class RoleViolation(str, Enum):
    """Which role constraint an edit broke."""

    PARENT_FOR_PARENT = "parent_for_parent"
    TAGS_FOR_PARENT = "tags_for_parent"
    PARENT_NOT_FOUND = "parent_not_found"


_ROLE_VIOLATION_MESSAGES = {
    RoleViolation.PARENT_FOR_PARENT: messages.MESSAGE_NO_PARENT_FOR_PARENT,
    RoleViolation.TAGS_FOR_PARENT: messages.MESSAGE_NO_TAGS_FOR_PARENT,
    RoleViolation.PARENT_NOT_FOUND: messages.MESSAGE_INVALID_PARENT,
}


class CommandError(Exception):
    """Base exception for all rejected commands."""

    error_code: ErrorCode

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidIndexError(CommandError):
    """Raised when the display position does not exist."""

    error_code = ErrorCode.INVALID_INDEX

    def __init__(self) -> None:
        super().__init__(messages.MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


class NoFieldsEditedError(CommandError):
    """Raised when an edit descriptor has nothing to change."""

    error_code = ErrorCode.NO_FIELDS_EDITED

    def __init__(self) -> None:
        super().__init__(messages.MESSAGE_NOT_EDITED)


class RoleConstraintError(CommandError):
    """Raised when an edit breaks a role-specific constraint."""

    error_code = ErrorCode.ROLE_CONSTRAINT

    def __init__(self, violation: RoleViolation) -> None:
        super().__init__(_ROLE_VIOLATION_MESSAGES[violation])
        self.violation = violation


class DuplicateRecordError(CommandError):
    """Raised when an edit would make a contact collide with another."""

    error_code = ErrorCode.DUPLICATE_RECORD

    def __init__(self) -> None:
        super().__init__(messages.MESSAGE_DUPLICATE_PERSON)
