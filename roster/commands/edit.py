"""Edit command: partial updates of a contact.

An edit takes a sparse EditDescriptor, checks it against the role of the
contact being edited and against the directory, builds a replacement
contact of the same role and swaps it in. Every check runs before the
directory is touched, so a rejected edit leaves it unchanged.
"""

from pydantic import BaseModel, ConfigDict, Field

from roster.commands.exceptions import (
    DuplicateRecordError,
    InvalidIndexError,
    NoFieldsEditedError,
    RoleConstraintError,
    RoleViolation,
)
from roster.commands.index import Index
from roster.commands.messages import MESSAGE_EDIT_PERSON_SUCCESS
from roster.commands.results import CommandResult
from roster.contacts.enums import Role
from roster.contacts.fields import Address, Name, Note, Phone, Session, Tag
from roster.contacts.formatting import format_contact
from roster.contacts.models import Contact, Parent, Student
from roster.directory.store import ContactDirectory
from roster.observability.logging import get_logger

logger = get_logger(__name__)


class EditDescriptor(BaseModel):
    """The fields to change on a contact and their new values.

    ``None`` means "leave unchanged"; an empty set is a real value that
    clears tags or sessions. ``role`` and ``note`` can be recorded here
    but an edit never applies them.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: Name | None = Field(default=None, description="New name")
    phone: Phone | None = Field(default=None, description="New phone number")
    address: Address | None = Field(default=None, description="New address")
    role: Role | None = Field(default=None, description="Not applied by edits")
    note: Note | None = Field(default=None, description="Not applied by edits")
    tags: frozenset[Tag] | None = Field(default=None, description="Replacement tag set")
    sessions: frozenset[Session] | None = Field(
        default=None, description="Replacement session set"
    )
    parent_name: Name | None = Field(default=None, description="New parent reference")

    def is_any_field_edited(self) -> bool:
        """Return True if at least one editable field is set.

        Sessions are not counted, so a sessions-only descriptor reports
        no edits even though create_edited_contact would apply it.
        """
        return any(
            value is not None
            for value in (self.name, self.phone, self.address, self.tags, self.parent_name)
        )


def create_edited_contact(contact: Contact, descriptor: EditDescriptor) -> Contact:
    """Build the replacement for ``contact`` with ``descriptor`` applied.

    The result always has the original's role and note. Role checks must
    already have passed; this function does not validate.
    """
    name = descriptor.name if descriptor.name is not None else contact.name
    phone = descriptor.phone if descriptor.phone is not None else contact.phone
    address = descriptor.address if descriptor.address is not None else contact.address

    if contact.role == Role.STUDENT:
        return Student(
            name=name,
            phone=phone,
            address=address,
            note=contact.note,
            tags=descriptor.tags if descriptor.tags is not None else contact.tags,
            sessions=(
                descriptor.sessions if descriptor.sessions is not None else contact.sessions
            ),
            parent_name=(
                descriptor.parent_name
                if descriptor.parent_name is not None
                else contact.parent_name
            ),
        )

    return Parent(name=name, phone=phone, address=address, note=contact.note)


def validate_role_inputs(
    contact: Contact,
    descriptor: EditDescriptor,
    directory: ContactDirectory,
) -> None:
    """Reject descriptor fields that ``contact``'s role does not allow.

    Checks run against the original contact and the directory's current
    contents.

    Raises:
        RoleConstraintError: If the edit breaks a role constraint
    """
    if contact.role == Role.PARENT:
        if descriptor.parent_name is not None:
            raise RoleConstraintError(RoleViolation.PARENT_FOR_PARENT)
        if descriptor.tags is not None:
            raise RoleConstraintError(RoleViolation.TAGS_FOR_PARENT)
        return

    new_parent = descriptor.parent_name
    if new_parent is None or new_parent == contact.parent_name:
        return

    # Only a Parent can be referenced; a Student with this name does not count
    if not directory.has_parent(new_parent):
        raise RoleConstraintError(RoleViolation.PARENT_NOT_FOUND)


class EditCommand:
    """Edits the contact at a display position in the visible list."""

    COMMAND_WORD = "edit"

    def __init__(self, index: Index, descriptor: EditDescriptor) -> None:
        """Create an edit of the contact at ``index``.

        The descriptor is copied, so later changes by the caller have no
        effect on this command.

        Raises:
            NoFieldsEditedError: If the descriptor changes nothing
        """
        if not descriptor.is_any_field_edited():
            raise NoFieldsEditedError()

        self.index = index
        self.descriptor = descriptor.model_copy(deep=True)

    def execute(self, directory: ContactDirectory) -> CommandResult:
        """Apply the edit to ``directory``.

        Raises:
            InvalidIndexError: If the index is outside the visible list
            RoleConstraintError: If the edit breaks a role constraint
            DuplicateRecordError: If the result collides with another contact
        """
        log = logger.bind(command=self.COMMAND_WORD, index=self.index.one_based)

        if self.index.zero_based >= directory.visible_count():
            log.warning("edit_rejected", error_code=InvalidIndexError.error_code.value)
            raise InvalidIndexError()

        contact = directory.get_visible(self.index.zero_based)

        try:
            validate_role_inputs(contact, self.descriptor, directory)
        except RoleConstraintError as e:
            log.warning(
                "edit_rejected",
                error_code=e.error_code.value,
                violation=e.violation.value,
                role=contact.role.value,
            )
            raise

        edited = create_edited_contact(contact, self.descriptor)

        if not contact.is_same_contact(edited) and directory.has_contact(edited):
            log.warning(
                "edit_rejected",
                error_code=DuplicateRecordError.error_code.value,
                role=contact.role.value,
            )
            raise DuplicateRecordError()

        directory.set_contact(contact, edited)
        directory.show_all()

        log.info("contact_edited", role=edited.role.value)
        return CommandResult(
            feedback_to_user=MESSAGE_EDIT_PERSON_SUCCESS.format(format_contact(edited)),
            contact=edited,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, EditCommand):
            return NotImplemented
        return self.index == other.index and self.descriptor == other.descriptor

    def __repr__(self) -> str:
        return f"EditCommand(index={self.index!r}, descriptor={self.descriptor!r})"
