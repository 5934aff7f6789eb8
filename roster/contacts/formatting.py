"""Human-readable renderings of contacts."""

from collections.abc import Iterable

from roster.contacts.enums import Role
from roster.contacts.fields import FieldValue
from roster.contacts.models import Contact, Student

EMPTY_PLACEHOLDER = "-"


def _sorted_values(values: Iterable[FieldValue]) -> list[str]:
    return sorted(str(v) for v in values)


def _bracketed(values: Iterable[FieldValue]) -> str:
    return "".join(f"[{v}]" for v in _sorted_values(values))


def _or_placeholder(value: object | None) -> str:
    text = "" if value is None else str(value)
    return text if text else EMPTY_PLACEHOLDER


def format_contact(contact: Contact) -> str:
    """One-line summary used in command feedback.

    Example:
        ``Alice Tan; Phone: 91234567; Address: Blk 1, Clementi Road; Note: -;
        Role: student; Tags: [math]; Sessions: [Mon 1400]; Parent: Bob Tan``
    """
    parts = [
        str(contact.name),
        f"Phone: {contact.phone}",
        f"Address: {contact.address}",
        f"Note: {_or_placeholder(contact.note)}",
        f"Role: {contact.role.value}",
    ]
    if contact.role == Role.STUDENT:
        parts.append(f"Tags: {_bracketed(contact.tags)}")
        parts.append(f"Sessions: {_bracketed(contact.sessions)}")
        parts.append(f"Parent: {_or_placeholder(contact.parent_name)}")
    return "; ".join(parts)


def format_contact_view(contact: Contact, children: Iterable[Student] = ()) -> str:
    """Multi-line detail view of a contact.

    Missing or empty values are shown as ``-``. Parents list the names of
    ``children``; callers usually pass ``directory.children_of(parent)``.
    """
    lines = [
        f"Name: {contact.name}",
        f"Phone: {contact.phone}",
        f"Address: {contact.address}",
        f"Note: {_or_placeholder(contact.note)}",
    ]
    if contact.role == Role.STUDENT:
        lines.append(f"Tags: {_or_placeholder(', '.join(_sorted_values(contact.tags)))}")
        lines.append(
            f"Sessions: {_or_placeholder(', '.join(_sorted_values(contact.sessions)))}"
        )
        lines.append(f"Parent: {_or_placeholder(contact.parent_name)}")
    else:
        names = ", ".join(str(child.name) for child in children)
        lines.append(f"Children: {_or_placeholder(names)}")
    return "\n".join(lines)
