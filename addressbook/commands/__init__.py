"""User commands built on top of the search engine."""

from .exceptions import CommandError, InvalidCommandFormatError
from .find import CommandResult, FindCommand
from .messages import (
    MESSAGE_MEANT_TO_FIND,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    format_contact_listing,
    persons_listed_summary,
)

__all__ = [
    "FindCommand",
    "CommandResult",
    "CommandError",
    "InvalidCommandFormatError",
    "MESSAGE_MEANT_TO_FIND",
    "MESSAGE_PERSONS_LISTED_OVERVIEW",
    "format_contact_listing",
    "persons_listed_summary",
]
