"""Structured logging helpers for the address book."""

import logging
from typing import Optional, Union

from .config import configure_logging
from .context import log_context


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """Adds a fixed ``component`` field; per-call ``extra`` wins on conflicts."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Return the named logger, tagged with ``component`` when one is given.

    Args:
        name: Logger name, normally ``__name__``
        component: Subsystem label added to every record (``search``, ``cli``, ...)

    Example:
        >>> logger = get_logger(__name__, component="search")
        >>> logger.debug("Exact pass empty", extra={"event": "search.exact.empty"})
    """
    logger = logging.getLogger(name)
    if component:
        return ComponentLoggerAdapter(logger, {"component": component})
    return logger


__all__ = ["ComponentLoggerAdapter", "configure_logging", "get_logger", "log_context"]
