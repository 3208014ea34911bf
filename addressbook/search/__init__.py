"""Keyword name search over contacts.

This module provides:
- search: two-pass (exact, then substring) name matching
- NameSearchEngine: the same algorithm bound to a ContactSource
- ExactMatches / FallbackMatches: the two search outcome variants
- InvalidArgumentError: raised for missing inputs
"""

from .engine import NameSearchEngine, matches_exactly, matches_substring, search
from .exceptions import InvalidArgumentError, SearchError
from .models import ExactMatches, FallbackMatches, SearchOutcome

__all__ = [
    "search",
    "NameSearchEngine",
    "matches_exactly",
    "matches_substring",
    "ExactMatches",
    "FallbackMatches",
    "SearchOutcome",
    "SearchError",
    "InvalidArgumentError",
]
