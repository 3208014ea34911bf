"""Contact collection access.

This module provides:
- ContactSource: read-only protocol the search engine depends on
- AddressBook: in-memory collection with unique names
- load_address_book: YAML contacts file loader
"""

from .exceptions import ContactFileError, ContactsError, DuplicateContactError
from .store import AddressBook, ContactSource, load_address_book

__all__ = [
    "AddressBook",
    "ContactSource",
    "load_address_book",
    "ContactsError",
    "ContactFileError",
    "DuplicateContactError",
]
