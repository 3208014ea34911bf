"""Contact collection and YAML contact-file loading."""

from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

import yaml
from pydantic import ValidationError

from addressbook.domain.models import Contact
from addressbook.logging import get_logger

from .exceptions import ContactFileError, DuplicateContactError

logger = get_logger(__name__, component="contacts")


class ContactSource(Protocol):
    """Read-only access to the current contact collection."""

    def list_all_contacts(self) -> Sequence[Contact]:
        """Return every contact in display order."""
        ...


class AddressBook:
    """Ordered in-memory collection of contacts with unique names.

    Implements ContactSource; ``list_all_contacts`` hands out an immutable
    snapshot so readers never observe later additions mid-search.
    """

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: List[Contact] = []
        for contact in contacts or ():
            self.add_contact(contact)

    def add_contact(self, contact: Contact) -> None:
        """Append ``contact``.

        Raises:
            DuplicateContactError: If a contact with the same full name exists
        """
        if self.has_name(contact.name.full_name):
            raise DuplicateContactError(contact.name.full_name)
        self._contacts.append(contact)

    def has_name(self, full_name: str) -> bool:
        return any(existing.name.full_name == full_name for existing in self._contacts)

    def list_all_contacts(self) -> Tuple[Contact, ...]:
        return tuple(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self):
        return iter(self.list_all_contacts())


def load_address_book(path: Path) -> AddressBook:
    """
    Load an AddressBook from a YAML contacts file.

    Expected shape::

        contacts:
          - name: Alice Tan
            phone: "91234567"
            tags: [friend]

    A file with no ``contacts`` key, or an empty list, yields an empty book.

    Args:
        path: Path to the YAML file

    Returns:
        AddressBook holding the records in file order

    Raises:
        ContactFileError: If the file is missing, unparsable or holds invalid records
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except FileNotFoundError:
        raise ContactFileError(
            f"Contacts file not found: {path}",
            suggestions=[
                "Check the path passed with --contacts or ADDRESSBOOK_FILE",
                "Set address_book.file in config.yaml",
            ],
        )
    except yaml.YAMLError as e:
        raise ContactFileError(
            f"Failed to parse contacts file {path}: {e}",
            suggestions=[
                "Check YAML syntax in the contacts file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        )
    except OSError as e:
        raise ContactFileError(
            f"Failed to read contacts file {path}: {e}",
            suggestions=[f"Ensure {path} is readable", "Check file permissions"],
        )

    records = _extract_records(document, path)

    book = AddressBook()
    errors = []
    for index, record in enumerate(records, 1):
        try:
            book.add_contact(Contact.model_validate(record))
        except ValidationError as e:
            for error in e.errors():
                field_path = " -> ".join(str(loc) for loc in error["loc"]) or "record"
                errors.append(f"Contact {index}: {field_path}: {error['msg']}")
        except DuplicateContactError as e:
            errors.append(f"Contact {index}: duplicate name '{e.full_name}'")

    if errors:
        raise ContactFileError(
            f"Contacts file {path} contains invalid records",
            errors=errors,
            suggestions=[
                "Names may only contain letters and spaces",
                "Each name must appear only once",
            ],
        )

    logger.info(
        f"Loaded {len(book)} contact(s) from {path}",
        extra={"event": "contacts.loaded", "contacts_file": str(path), "contact_count": len(book)},
    )
    return book


def _extract_records(document, path: Path) -> list:
    if document is None:
        return []
    if not isinstance(document, dict):
        raise ContactFileError(
            f"Contacts file {path} must be a mapping with a 'contacts' list",
            suggestions=["Start the file with 'contacts:' followed by a list of entries"],
        )
    records = document.get("contacts") or []
    if not isinstance(records, list):
        raise ContactFileError(
            f"'contacts' in {path} must be a list, got {type(records).__name__}",
            suggestions=["Write each contact as a '- name: ...' list item"],
        )
    return records
