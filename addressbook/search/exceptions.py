"""Search engine exceptions.

All search exceptions inherit from SearchError so callers can catch the
whole family with a single except clause.
"""


class SearchError(Exception):
    """Base exception for name search errors."""

    pass


class InvalidArgumentError(SearchError, ValueError):
    """Raised when a required search input is missing or of the wrong kind.

    Examples:
    - keywords is None
    - contacts is None
    - a bare string was passed where a set of keywords was expected

    Empty keyword sets and empty contact collections are legitimate inputs
    and never raise this.
    """

    pass
