"""Contact collection exceptions.

All contact collection exceptions inherit from ContactsError.
"""

from addressbook.config.exceptions import ReportableError


class ContactsError(Exception):
    """Base exception for contact collection errors."""

    pass


class DuplicateContactError(ContactsError):
    """Raised when adding a contact whose full name is already present."""

    def __init__(self, full_name: str):
        self.full_name = full_name
        super().__init__(f"This person already exists in the address book: {full_name}")


class ContactFileError(ReportableError, ContactsError):
    """Raised when a contacts file cannot be read or holds invalid records.

    Examples:
    - File does not exist
    - YAML syntax error
    - A record fails Contact validation
    - Two records share the same name
    """

    pass
