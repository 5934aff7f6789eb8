"""ContactDirectory abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from roster.contacts.enums import Role
from roster.contacts.fields import Name
from roster.contacts.models import Contact, Parent, Student

ContactPredicate = Callable[[Contact], bool]


def show_all_contacts(_contact: Contact) -> bool:
    """Filter predicate that keeps every contact."""
    return True


class ContactDirectory(ABC):
    """Abstract interface for the contact collection.

    Holds every contact plus a filtered, ordered view of them. Display
    positions always refer to the filtered view.
    """

    @abstractmethod
    def all_contacts(self) -> list[Contact]:
        """Return every contact in insertion order."""
        pass

    @abstractmethod
    def filtered_contacts(self) -> list[Contact]:
        """Return the contacts that pass the current filter, in order."""
        pass

    def visible_count(self) -> int:
        """Number of contacts in the filtered view."""
        return len(self.filtered_contacts())

    def get_visible(self, zero_based: int) -> Contact:
        """Return the contact at ``zero_based`` in the filtered view.

        Raises:
            IndexError: If the position is outside the filtered view
        """
        if zero_based < 0:
            raise IndexError(zero_based)
        return self.filtered_contacts()[zero_based]

    @abstractmethod
    def has_name(self, name: Name) -> bool:
        """Return True if a contact of any role with this name is stored."""
        pass

    def has_contact(self, contact: Contact) -> bool:
        """Return True if the same contact (by name) is stored."""
        return self.has_name(contact.name)

    def has_parent(self, name: Name) -> bool:
        """Return True if a Parent with this name is stored. Students are ignored."""
        return any(
            contact.role == Role.PARENT and contact.name == name
            for contact in self.all_contacts()
        )

    @abstractmethod
    def add_contact(self, contact: Contact) -> None:
        """Add a contact.

        Raises:
            DuplicateContactError: If the same contact is already stored
        """
        pass

    @abstractmethod
    def delete_contact(self, contact: Contact) -> None:
        """Remove a contact.

        Raises:
            ContactNotFoundError: If the contact is not stored
        """
        pass

    @abstractmethod
    def set_contact(self, target: Contact, edited: Contact) -> None:
        """Replace ``target`` with ``edited`` in one step, keeping its position.

        Raises:
            ContactNotFoundError: If ``target`` is not stored
            DuplicateContactError: If ``edited`` collides with another contact
        """
        pass

    @abstractmethod
    def update_filter(self, predicate: ContactPredicate) -> None:
        """Replace the filter applied to the visible view."""
        pass

    def show_all(self) -> None:
        """Reset the filter so every contact is visible."""
        self.update_filter(show_all_contacts)

    def children_of(self, parent: Parent) -> list[Student]:
        """Students whose parent_name matches ``parent``'s name."""
        return [
            contact
            for contact in self.all_contacts()
            if contact.role == Role.STUDENT and contact.parent_name == parent.name
        ]
