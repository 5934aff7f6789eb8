"""User-facing message strings for commands."""

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
MESSAGE_NO_PARENT_FOR_PARENT = "A parent cannot have a parent."
MESSAGE_NO_TAGS_FOR_PARENT = "A parent cannot have tags."
MESSAGE_INVALID_PARENT = "This parent does not exist in the address book"
MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {}"
