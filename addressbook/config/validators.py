"""Soft checks on raw configuration that warn instead of failing."""

import warnings
from typing import Any, Dict, List

YAML_SUFFIXES = (".yaml", ".yml")


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    address_book = config_dict.get("address_book", {})
    if isinstance(address_book, dict):
        contacts_file = address_book.get("file")
        if isinstance(contacts_file, str) and contacts_file.strip():
            if not contacts_file.strip().lower().endswith(YAML_SUFFIXES):
                warning_messages.append(
                    f"Contacts file '{contacts_file}' does not end in .yaml or .yml; "
                    "it will still be parsed as YAML"
                )

    logging_section = config_dict.get("logging", {})
    if isinstance(logging_section, dict):
        level = logging_section.get("level")
        if isinstance(level, str) and level.strip().upper() == "DEBUG":
            warning_messages.append(
                "logging.level is DEBUG; every search pass will be logged"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """Emit each message as a UserWarning."""
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
