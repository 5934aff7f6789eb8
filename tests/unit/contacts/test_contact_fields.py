"""Tests for contact field value types."""

import pytest
from pydantic import ValidationError

from roster.contacts import Address, Name, Note, Phone, Session, Tag


class TestAddress:
    """Tests for Address validation."""

    def test_none_raises(self) -> None:
        """Should reject None on construction and in the predicate."""
        with pytest.raises(ValidationError):
            Address(value=None)
        with pytest.raises(TypeError):
            Address.is_valid(None)

    def test_invalid_address_raises(self) -> None:
        """Should raise a ValueError for a blank address."""
        with pytest.raises(ValueError):
            Address(value="")

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            " ",
            "-",
            "Ubi",
            "Leng Inc; 1234 Market St; San Francisco CA 2349879; USA",
            "Leng Incorporation, 123131424456712124152354365635389 Market Street, "
            "San Francisco CA 234615123625612341245152162513131232131251323621232323, "
            "UNITED STATES OF AMERICA",
        ],
    )
    def test_invalid_addresses(self, raw: str) -> None:
        assert Address.is_valid(raw) is False

    @pytest.mark.parametrize(
        "raw",
        [
            "Blk 456, Denver Road, #01-355",
            "Leng Inc, 1234 Market St., Simei CA 2349879, SG",
        ],
    )
    def test_valid_addresses(self, raw: str) -> None:
        assert Address.is_valid(raw) is True

    def test_equality(self) -> None:
        """Should compare by value."""
        address = Address(value="Leng Inc, 1234 Market St., Simei CA 2349879, SG")

        assert address == Address(value="Leng Inc, 1234 Market St., Simei CA 2349879, SG")
        assert address == address
        assert address != None  # noqa: E711
        assert address != 5.0
        assert address != Address(value="Blk 456, Denver Road, #01-355")


class TestName:
    """Tests for Name validation."""

    @pytest.mark.parametrize("raw", ["", " ", "^", "peter*", "a" * 101])
    def test_invalid_names(self, raw: str) -> None:
        assert Name.is_valid(raw) is False

    @pytest.mark.parametrize("raw", ["peter jack", "12345", "Capital Tan", "David Roger Jackson Ray Jr 2nd"])
    def test_valid_names(self, raw: str) -> None:
        assert Name.is_valid(raw) is True

    def test_str_returns_raw_value(self) -> None:
        assert str(Name(value="Alice Pauline")) == "Alice Pauline"

    def test_is_hashable(self) -> None:
        """Should be usable in sets and as dict keys."""
        names = {Name(value="Alice"), Name(value="Alice"), Name(value="Bob")}
        assert len(names) == 2

    def test_is_immutable(self) -> None:
        name = Name(value="Alice")
        with pytest.raises(ValidationError):
            name.value = "Bob"


class TestPhone:
    """Tests for Phone validation."""

    @pytest.mark.parametrize("raw", ["", " ", "91", "phone", "9011p041", "9312 1534", "1" * 16])
    def test_invalid_phones(self, raw: str) -> None:
        assert Phone.is_valid(raw) is False

    @pytest.mark.parametrize("raw", ["911", "93121534", "124293842033123"])
    def test_valid_phones(self, raw: str) -> None:
        assert Phone.is_valid(raw) is True

    def test_constraint_message_in_error(self) -> None:
        with pytest.raises(ValidationError, match="only contain digits"):
            Phone(value="12a")


class TestNote:
    """Tests for Note."""

    def test_empty_note_allowed(self) -> None:
        assert str(Note(value="")) == ""

    def test_any_text_allowed(self) -> None:
        assert Note.is_valid("Prefers morning sessions; allergic to nuts!") is True


class TestTag:
    """Tests for Tag validation."""

    @pytest.mark.parametrize("raw", ["", "two words", "#hash", "a" * 31])
    def test_invalid_tags(self, raw: str) -> None:
        assert Tag.is_valid(raw) is False

    def test_valid_tag(self) -> None:
        assert Tag(value="math").value == "math"


class TestSession:
    """Tests for Session validation."""

    @pytest.mark.parametrize("raw", ["", " Mon", "Mon;1400", "x" * 51])
    def test_invalid_sessions(self, raw: str) -> None:
        assert Session.is_valid(raw) is False

    @pytest.mark.parametrize("raw", ["Mon 1400", "2024-03-01 09:00", "S1"])
    def test_valid_sessions(self, raw: str) -> None:
        assert Session.is_valid(raw) is True
