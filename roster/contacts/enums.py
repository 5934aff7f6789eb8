"""Enums for contact domain."""

from enum import Enum


class Role(str, Enum):
    """Which variant of contact a record is.

    The role is the discriminant of the Contact union and never
    changes after a record is created.
    """

    PARENT = "parent"
    STUDENT = "student"
