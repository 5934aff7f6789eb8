"""Commands that act on the contact directory."""

from roster.commands.edit import (
    EditCommand,
    EditDescriptor,
    create_edited_contact,
    validate_role_inputs,
)
from roster.commands.exceptions import (
    CommandError,
    DuplicateRecordError,
    ErrorCode,
    InvalidIndexError,
    NoFieldsEditedError,
    RoleConstraintError,
    RoleViolation,
)
from roster.commands.index import Index
from roster.commands.results import CommandResult

__all__ = [
    "CommandResult",
    "EditCommand",
    "EditDescriptor",
    "Index",
    "create_edited_contact",
    "validate_role_inputs",
    # Exceptions
    "CommandError",
    "DuplicateRecordError",
    "ErrorCode",
    "InvalidIndexError",
    "NoFieldsEditedError",
    "RoleConstraintError",
    "RoleViolation",
]
