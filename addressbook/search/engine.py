"""Name search engine for finding contacts by keyword.

This module implements the two-tier matching used by the ``find`` command:
1. Exact pass: a keyword equals a whole word of the contact's name
2. Fallback pass: a keyword is a substring of some word of the name,
   run only when the exact pass found nothing

Matching is case-sensitive and results keep the order of the collection.
"""

import logging
from typing import AbstractSet, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from addressbook.contacts.store import ContactSource
from addressbook.domain.models import Contact
from addressbook.logging import get_logger

from .exceptions import InvalidArgumentError
from .models import ExactMatches, FallbackMatches, SearchOutcome

logger = get_logger(__name__, component="search")

NamePredicate = Callable[[List[str], AbstractSet[str]], bool]


def search(keywords: AbstractSet[str], contacts: Iterable[Contact]) -> SearchOutcome:
    """Find contacts whose name matches any of ``keywords``.

    Algorithm:
    1. Snapshot ``contacts`` so both passes walk the same order
    2. No usable keywords or no contacts: return an empty ExactMatches
    3. Exact pass; if it finds anything, return ExactMatches
    4. Otherwise substring pass; return FallbackMatches (possibly empty)

    Args:
        keywords: Set of search terms, case preserved
        contacts: Contact collection in display order

    Returns:
        ExactMatches or FallbackMatches

    Raises:
        InvalidArgumentError: If keywords or contacts is None, keywords is a bare string
            or holds a non-string, or a contact is None or has no name
    """
    return NameSearchEngine.run(keywords, contacts, logger)


def matches_exactly(words_in_name: List[str], keywords: AbstractSet[str]) -> bool:
    """True if any keyword equals one of the name's words."""
    return not keywords.isdisjoint(words_in_name)


def matches_substring(words_in_name: List[str], keywords: AbstractSet[str]) -> bool:
    """True if any keyword occurs inside one of the name's words.

    Only keyword-in-word is checked, never word-in-keyword.
    """
    return any(keyword in word for keyword in keywords for word in words_in_name)


class NameSearchEngine:
    """Runs name searches against a read-only contact source.

    The engine holds no state between calls; each ``find`` reads a fresh
    snapshot from the source.
    """

    def __init__(
        self,
        source: ContactSource,
        logger_instance: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    ):
        """Initialize NameSearchEngine.

        Args:
            source: Provider of the current contact collection
            logger_instance: Optional logger (defaults to module logger)
        """
        self.source = source
        self.logger = logger_instance or logger

    def find(self, keywords: AbstractSet[str]) -> SearchOutcome:
        """Search the source's current contacts for ``keywords``."""
        return self.run(keywords, self.source.list_all_contacts(), self.logger)

    @staticmethod
    def run(keywords, contacts, log) -> SearchOutcome:
        """Validate inputs and perform the exact-then-fallback search."""
        terms = _validated_keywords(keywords)
        snapshot = _validated_contacts(contacts)

        # Nothing to search with or nothing to search in: no fallback to offer.
        if not terms or not snapshot:
            log.debug(
                "Search skipped, no keywords or no contacts",
                extra={
                    "event": "search.skipped",
                    "keyword_count": len(terms),
                    "contact_count": len(snapshot),
                },
            )
            return ExactMatches()

        exact = _collect(snapshot, terms, matches_exactly)
        if exact:
            log.info(
                f"Exact name search found {len(exact)} contact(s)",
                extra={
                    "event": "search.exact.matched",
                    "keyword_count": len(terms),
                    "contact_count": len(snapshot),
                    "match_count": len(exact),
                },
            )
            return ExactMatches(contacts=exact)

        log.debug(
            "Exact name search empty, trying substring fallback",
            extra={
                "event": "search.exact.empty",
                "keyword_count": len(terms),
                "contact_count": len(snapshot),
            },
        )

        similar = _collect(snapshot, terms, matches_substring)
        if similar:
            log.info(
                f"Substring fallback found {len(similar)} contact(s)",
                extra={
                    "event": "search.fallback.matched",
                    "keyword_count": len(terms),
                    "contact_count": len(snapshot),
                    "match_count": len(similar),
                },
            )
        else:
            log.info(
                "No contacts matched by either strategy",
                extra={
                    "event": "search.fallback.empty",
                    "keyword_count": len(terms),
                    "contact_count": len(snapshot),
                },
            )
        return FallbackMatches(contacts=similar)


def _validated_keywords(keywords) -> frozenset:
    """Return an immutable copy of ``keywords`` without empty strings.

    An empty keyword would be a substring of every word, so it is never
    allowed to take part in matching. Any other non-string member is a
    caller error.
    """
    if keywords is None:
        raise InvalidArgumentError("keywords must not be None")
    if isinstance(keywords, (str, bytes)):
        raise InvalidArgumentError(
            f"keywords must be a set of strings, got a bare {type(keywords).__name__}"
        )
    try:
        terms = frozenset(keywords)
    except TypeError as e:
        raise InvalidArgumentError(f"keywords must be a set of strings: {e}") from e
    for keyword in terms:
        if not isinstance(keyword, str):
            raise InvalidArgumentError(
                f"keywords must be strings, got {type(keyword).__name__}: {keyword!r}"
            )
    return frozenset(keyword for keyword in terms if keyword)


def _validated_contacts(contacts) -> Tuple[Contact, ...]:
    """Snapshot ``contacts``, rejecting missing entries and entries without a name."""
    if contacts is None:
        raise InvalidArgumentError("contacts must not be None")
    snapshot = tuple(contacts)
    for position, contact in enumerate(snapshot):
        if contact is None:
            raise InvalidArgumentError(f"contacts[{position}] is None")
        if getattr(contact, "name", None) is None:
            raise InvalidArgumentError(
                f"contacts[{position}] has no name: {type(contact).__name__}"
            )
    return snapshot


def _collect(
    contacts: Sequence[Contact], keywords: AbstractSet[str], predicate: NamePredicate
) -> Tuple[Contact, ...]:
    # A contact listed more than once in the collection is kept at its first position.
    seen = set()
    matched = []
    for contact in contacts:
        if id(contact) in seen:
            continue
        if predicate(contact.name.words_in_name, keywords):
            seen.add(id(contact))
            matched.append(contact)
    return tuple(matched)
