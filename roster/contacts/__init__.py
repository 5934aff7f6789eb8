"""Contacts: parent and student records and their field types."""

from roster.contacts.enums import Role
from roster.contacts.fields import (
    Address,
    FieldValue,
    Name,
    Note,
    Phone,
    Session,
    Tag,
)
from roster.contacts.formatting import format_contact, format_contact_view
from roster.contacts.models import Contact, Parent, Student

__all__ = [
    # Enums
    "Role",
    # Field values
    "Address",
    "FieldValue",
    "Name",
    "Note",
    "Phone",
    "Session",
    "Tag",
    # Models
    "Contact",
    "Parent",
    "Student",
    # Formatting
    "format_contact",
    "format_contact_view",
]
