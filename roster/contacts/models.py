"""Contact domain models.

A contact is either a Parent or a Student. Both are frozen pydantic
models discriminated by ``role``; records are never changed in place,
only replaced. Two contacts are the same person when their names match.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from roster.contacts.enums import Role
from roster.contacts.fields import Address, Name, Note, Phone, Session, Tag


class Parent(BaseModel):
    """A parent contact. Carries no tags, sessions or parent reference."""

    model_config = ConfigDict(frozen=True)

    role: Literal[Role.PARENT] = Field(default=Role.PARENT, description="Contact role")
    name: Name = Field(..., description="Full name")
    phone: Phone = Field(..., description="Phone number")
    address: Address = Field(..., description="Postal address")
    note: Note = Field(default=Note(value=""), description="Free-text note")

    def is_same_contact(self, other: "Contact | None") -> bool:
        """Return True if ``other`` has the same name, whatever its role or other fields."""
        return other is not None and self.name == other.name


class Student(BaseModel):
    """A student contact.

    ``parent_name`` is a soft reference: it names a Parent by value and
    is not updated when that Parent is renamed or deleted.
    """

    model_config = ConfigDict(frozen=True)

    role: Literal[Role.STUDENT] = Field(default=Role.STUDENT, description="Contact role")
    name: Name = Field(..., description="Full name")
    phone: Phone = Field(..., description="Phone number")
    address: Address = Field(..., description="Postal address")
    note: Note = Field(default=Note(value=""), description="Free-text note")
    tags: frozenset[Tag] = Field(default_factory=frozenset, description="Labels")
    sessions: frozenset[Session] = Field(
        default_factory=frozenset, description="Scheduled sessions"
    )
    parent_name: Name | None = Field(default=None, description="Name of the parent contact")

    def is_same_contact(self, other: "Contact | None") -> bool:
        """Return True if ``other`` has the same name, whatever its role or other fields."""
        return other is not None and self.name == other.name


Contact = Annotated[Parent | Student, Field(discriminator="role")]
