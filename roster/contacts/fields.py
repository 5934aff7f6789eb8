"""Validated value types for contact fields.

Each type wraps a single raw string, validates it on construction and is
immutable. Malformed input raises ``pydantic.ValidationError``, which is a
``ValueError``.
"""

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldValue(BaseModel):
    """Base for single-value contact fields.

    Subclasses set PATTERN, MIN_LENGTH, MAX_LENGTH and MESSAGE_CONSTRAINTS.
    """

    model_config = ConfigDict(frozen=True)

    PATTERN: ClassVar[re.Pattern[str] | None] = None
    MIN_LENGTH: ClassVar[int] = 0
    MAX_LENGTH: ClassVar[int | None] = None
    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: str = Field(..., strict=True, description="Raw field value")

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Return True if ``raw`` satisfies this field's constraints."""
        if raw is None:
            raise TypeError(f"{cls.__name__} value must not be None")
        if len(raw) < cls.MIN_LENGTH:
            return False
        if cls.MAX_LENGTH is not None and len(raw) > cls.MAX_LENGTH:
            return False
        if cls.PATTERN is not None and not cls.PATTERN.fullmatch(raw):
            return False
        return True

    @field_validator("value")
    @classmethod
    def check_constraints(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(cls.MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return self.value


class Name(FieldValue):
    """A person's name."""

    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
    MIN_LENGTH = 1
    MAX_LENGTH = 100
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "should not be blank and should be at most 100 characters long"
    )


class Phone(FieldValue):
    """A phone number made of digits only."""

    PATTERN = re.compile(r"\d+")
    MIN_LENGTH = 3
    MAX_LENGTH = 15
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain digits, and be between 3 and 15 digits long"
    )


class Address(FieldValue):
    """A postal address."""

    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ,.#\-/'()]*")
    MIN_LENGTH = 5
    MAX_LENGTH = 100
    MESSAGE_CONSTRAINTS = (
        "Addresses should be 5 to 100 characters long, start with a letter or digit "
        "and only contain letters, digits, spaces and , . # - / ' ( )"
    )


class Note(FieldValue):
    """Free-text note. May be empty."""

    MESSAGE_CONSTRAINTS = "Notes can take any value"


class Tag(FieldValue):
    """A single-word label attached to a student."""

    PATTERN = re.compile(r"[A-Za-z0-9]+")
    MIN_LENGTH = 1
    MAX_LENGTH = 30
    MESSAGE_CONSTRAINTS = "Tag names should be alphanumeric and at most 30 characters long"


class Session(FieldValue):
    """Identifier of a scheduled session a student attends, e.g. ``Mon 1400``."""

    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 :\-]*")
    MIN_LENGTH = 1
    MAX_LENGTH = 50
    MESSAGE_CONSTRAINTS = (
        "Sessions should start with a letter or digit and only contain "
        "letters, digits, spaces, ':' and '-'"
    )
