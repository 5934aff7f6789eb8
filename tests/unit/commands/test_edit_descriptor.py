"""Tests for EditDescriptor."""

import pytest
from pydantic import ValidationError

from roster.commands import EditDescriptor
from roster.contacts import Name, Note, Phone, Role, Session, Tag
from tests.factories import DescriptorFactory


class TestIsAnyFieldEdited:
    """Tests for is_any_field_edited."""

    def test_empty_descriptor(self) -> None:
        assert EditDescriptor().is_any_field_edited() is False

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"name": "Amy"},
            {"phone": "91234567"},
            {"address": "Blk 1, Clementi Road"},
            {"tags": ["math"]},
            {"parent_name": "Bob Tan"},
        ],
    )
    def test_single_field_counts(self, kwargs) -> None:
        assert DescriptorFactory.create(**kwargs).is_any_field_edited() is True

    def test_empty_tag_set_counts(self) -> None:
        """Should treat an empty set as a real edit that clears tags."""
        assert DescriptorFactory.create(tags=[]).is_any_field_edited() is True

    def test_sessions_alone_do_not_count(self) -> None:
        """Sessions are not part of the check."""
        assert DescriptorFactory.create(sessions=["Mon 1400"]).is_any_field_edited() is False

    def test_role_and_note_do_not_count(self) -> None:
        descriptor = EditDescriptor(role=Role.STUDENT, note=Note(value="hi"))
        assert descriptor.is_any_field_edited() is False


class TestCopy:
    """Tests for descriptor copying."""

    def test_copy_is_equal(self) -> None:
        descriptor = DescriptorFactory.create(name="Amy", tags=["math"], sessions=["S1"])
        copied = descriptor.model_copy(deep=True)
        assert copied == descriptor
        assert copied is not descriptor

    def test_copy_is_independent(self) -> None:
        """Should not see changes made to the original after copying."""
        descriptor = DescriptorFactory.create(name="Amy")
        copied = descriptor.model_copy(deep=True)

        descriptor.name = Name(value="Someone Else")
        descriptor.phone = Phone(value="99999999")

        assert copied.name == Name(value="Amy")
        assert copied.phone is None

    def test_caller_set_is_not_shared(self) -> None:
        """Should snapshot set values on assignment."""
        tags = {Tag(value="math")}
        descriptor = EditDescriptor(tags=tags)

        tags.add(Tag(value="science"))

        assert descriptor.tags == frozenset({Tag(value="math")})


class TestEqualityAndRepr:
    """Tests for structural equality and repr."""

    def test_equal_when_fields_match(self) -> None:
        assert DescriptorFactory.create(phone="123") == DescriptorFactory.create(phone="123")

    def test_sessions_take_part_in_equality(self) -> None:
        assert DescriptorFactory.create(sessions=["S1"]) != DescriptorFactory.create(
            sessions=["S2"]
        )

    def test_unset_differs_from_empty(self) -> None:
        assert EditDescriptor() != EditDescriptor(sessions=frozenset())

    def test_repr_lists_fields(self) -> None:
        text = repr(DescriptorFactory.create(name="Amy"))
        for field_name in ("name", "phone", "address", "role", "note", "tags", "sessions", "parent_name"):
            assert f"{field_name}=" in text

    def test_assignment_is_validated(self) -> None:
        descriptor = EditDescriptor()
        with pytest.raises(ValidationError):
            descriptor.sessions = {"not a session model"}
        descriptor.sessions = {Session(value="S1")}
        assert descriptor.sessions == frozenset({Session(value="S1")})
