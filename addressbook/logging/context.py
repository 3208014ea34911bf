"""Scoped log context for the address book.

Fields pushed here (command word, keyword count, contacts file, ...) are
stamped onto every record emitted while the scope is active. Storage is a
ContextVar so concurrent searches never see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


_log_fields: ContextVar[Dict[str, Any]] = ContextVar("addressbook_log_fields", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current scope."""
    return dict(_log_fields.get())


def push_log_context(**fields) -> Token:
    """Layer ``fields`` over the current context.

    Returns:
        Token to hand back to pop_log_context()
    """
    return _log_fields.set({**_log_fields.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before the matching push."""
    _log_fields.reset(token)


def clear_log_context() -> None:
    """Drop every field. Mostly useful between tests."""
    _log_fields.set({})


class log_context:
    """Context manager form of push/pop.

    Example:
        >>> with log_context(command="find", keyword_count=2):
        ...     logger.info("Running search")
    """

    def __init__(self, **fields):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
