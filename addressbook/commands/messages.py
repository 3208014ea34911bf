"""User-facing message templates and listing helpers."""

from typing import Sequence

from addressbook.domain.models import Contact

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
MESSAGE_MEANT_TO_FIND = "Did you mean: "


def persons_listed_summary(contacts: Sequence[Contact]) -> str:
    """E.g. ``2 persons listed!``"""
    return MESSAGE_PERSONS_LISTED_OVERVIEW.format(count=len(contacts))


def format_contact_listing(contacts: Sequence[Contact]) -> str:
    """Render contacts as a 1-based indexed list, one per line.

    Returns an empty string for no contacts.
    """
    return "\n".join(
        f"{index}. {contact.as_text()}" for index, contact in enumerate(contacts, 1)
    )
