"""Search outcome types.

A search produces exactly one of two variants:
- ExactMatches: at least one keyword equalled a whole word of a name
- FallbackMatches: nothing matched exactly; these are the substring hits,
  possibly none at all

Callers branch on the variant (or ``is_fallback``) rather than on list
emptiness to decide which message to show.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from addressbook.domain.models import Contact


@dataclass(frozen=True)
class ExactMatches:
    """Contacts whose name contains one of the keywords as a whole word.

    Attributes:
        contacts: Matches in collection order, each contact at most once
    """

    contacts: Tuple[Contact, ...] = ()

    is_fallback = False

    def __len__(self) -> int:
        return len(self.contacts)


@dataclass(frozen=True)
class FallbackMatches:
    """Contacts whose name words contain a keyword as a substring.

    Only produced when the exact pass found nothing. An empty
    ``contacts`` is a valid "nothing found by either strategy" outcome.
    """

    contacts: Tuple[Contact, ...] = ()

    is_fallback = True

    def __len__(self) -> int:
        return len(self.contacts)


SearchOutcome = Union[ExactMatches, FallbackMatches]
