"""In-memory implementation of ContactDirectory."""

from collections.abc import Iterable

from roster.contacts.fields import Name
from roster.contacts.models import Contact
from roster.directory.exceptions import ContactNotFoundError, DuplicateContactError
from roster.directory.store import ContactDirectory, ContactPredicate, show_all_contacts
from roster.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryDirectory(ContactDirectory):
    """In-memory implementation of ContactDirectory for the running app and tests."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        """Initialize storage, adding ``contacts`` in order."""
        self._contacts: list[Contact] = []
        self._predicate: ContactPredicate = show_all_contacts
        for contact in contacts:
            self.add_contact(contact)

    def all_contacts(self) -> list[Contact]:
        return list(self._contacts)

    def filtered_contacts(self) -> list[Contact]:
        return [contact for contact in self._contacts if self._predicate(contact)]

    def has_name(self, name: Name) -> bool:
        return any(contact.name == name for contact in self._contacts)

    def add_contact(self, contact: Contact) -> None:
        if self.has_contact(contact):
            raise DuplicateContactError(contact.name)

        self._contacts.append(contact)
        logger.debug("contact_added", role=contact.role.value, total=len(self._contacts))

    def delete_contact(self, contact: Contact) -> None:
        position = self._position_of(contact.name)
        del self._contacts[position]
        logger.debug("contact_deleted", role=contact.role.value, total=len(self._contacts))

    def set_contact(self, target: Contact, edited: Contact) -> None:
        position = self._position_of(target.name)

        if not target.is_same_contact(edited) and self.has_contact(edited):
            raise DuplicateContactError(edited.name)

        self._contacts[position] = edited
        logger.debug("contact_replaced", role=edited.role.value, position=position)

    def update_filter(self, predicate: ContactPredicate) -> None:
        self._predicate = predicate

    def _position_of(self, name: Name) -> int:
        for position, contact in enumerate(self._contacts):
            if contact.name == name:
                return position
        raise ContactNotFoundError(name)
