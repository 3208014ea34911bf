"""The ``find`` command: search contacts by name keywords."""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Optional, Set, Tuple

from addressbook.contacts.store import ContactSource
from addressbook.domain.models import Contact
from addressbook.logging import get_logger
from addressbook.logging.context import log_context
from addressbook.search.engine import NameSearchEngine
from addressbook.search.models import SearchOutcome

from .exceptions import InvalidCommandFormatError
from .messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_MEANT_TO_FIND,
    format_contact_listing,
    persons_listed_summary,
)

logger = get_logger(__name__, component="commands")


@dataclass(frozen=True)
class CommandResult:
    """What a command reports back to the user.

    Attributes:
        feedback_to_user: Summary line to display
        relevant_contacts: Contacts to list under the summary, if any
    """

    feedback_to_user: str
    relevant_contacts: Optional[Tuple[Contact, ...]] = field(default=None)

    def listing(self) -> str:
        """Indexed listing of relevant_contacts (empty string when none)."""
        return format_contact_listing(self.relevant_contacts or ())


class FindCommand:
    """Finds and lists all contacts whose name contains any of the keywords.

    Keywords are first matched as whole words. If none match, contacts whose
    name words contain a keyword as a substring are offered instead under a
    "Did you mean" prefix. Matching is case-sensitive.
    """

    COMMAND_WORD = "find"

    MESSAGE_USAGE = (
        COMMAND_WORD + ": Finds all persons whose names contain any of "
        "the specified keywords (case-sensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: " + COMMAND_WORD + " alice bob charlie"
    )

    def __init__(self, keywords: AbstractSet[str]):
        self._keywords: FrozenSet[str] = frozenset(keywords)

    @classmethod
    def parse(cls, arguments: str) -> "FindCommand":
        """Build a FindCommand from the text after the command word.

        Raises:
            InvalidCommandFormatError: If no keywords were given
        """
        keywords = (arguments or "").split()
        if not keywords:
            raise InvalidCommandFormatError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(usage=cls.MESSAGE_USAGE),
                usage=cls.MESSAGE_USAGE,
            )
        return cls(set(keywords))

    @property
    def keywords(self) -> Set[str]:
        """A copy of the keywords; mutating it does not affect the command."""
        return set(self._keywords)

    def execute(self, source: ContactSource) -> CommandResult:
        """Run the search against ``source`` and build the user-facing result."""
        with log_context(command=self.COMMAND_WORD, keyword_count=len(self._keywords)):
            outcome = NameSearchEngine(source).find(self._keywords)
            result = self.result_for(outcome)
            logger.debug(
                "Find command completed",
                extra={
                    "event": "command.find.completed",
                    "fallback": outcome.is_fallback,
                    "match_count": len(outcome),
                },
            )
        return result

    @staticmethod
    def result_for(outcome: SearchOutcome) -> CommandResult:
        """Pick the message for ``outcome``; fallback results get the "Did you mean" prefix."""
        summary = persons_listed_summary(outcome.contacts)
        if outcome.is_fallback:
            summary = MESSAGE_MEANT_TO_FIND + summary
        return CommandResult(feedback_to_user=summary, relevant_contacts=outcome.contacts)
