"""Command-line entry point for the address book."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from addressbook.commands.exceptions import InvalidCommandFormatError
from addressbook.commands.find import FindCommand
from addressbook.config.environment import EnvironmentConfig
from addressbook.config.exceptions import ConfigurationError
from addressbook.config.loader import load_config
from addressbook.config.models import AppConfig
from addressbook.contacts.exceptions import ContactFileError
from addressbook.contacts.store import load_address_book
from addressbook.logging import get_logger
from addressbook.logging.config import configure_logging
from addressbook.logging.context import log_context

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def load_runtime_config(
    config_path: Optional[Path],
    contacts_override: Optional[Path],
    log_level_override: Optional[str],
) -> Tuple[AppConfig, EnvironmentConfig, Path]:
    """
    Load configuration and resolve the effective settings.

    Priority for both contacts file and log level: CLI > environment > config.

    Returns:
        Tuple of (AppConfig, EnvironmentConfig, contacts file path); the
        environment config's log_level holds the effective level

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if contacts_override:
        contacts_file = Path(contacts_override)
    elif env_config.contacts_file:
        contacts_file = Path(env_config.contacts_file)
    else:
        contacts_file = Path(app_config.address_book.file)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config, contacts_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addressbook",
        description="Address Book - search your contacts by name",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--contacts",
        type=Path,
        default=None,
        help="Path to YAML contacts file (overrides config and ADDRESSBOOK_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    find_parser = subparsers.add_parser(
        FindCommand.COMMAND_WORD,
        help="Find contacts whose names contain any of the keywords (case-sensitive)",
    )
    find_parser.add_argument("keywords", nargs="*", metavar="KEYWORD")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the address book CLI.

    Returns:
        0 on success, 1 on configuration/contacts errors, 2 on bad command usage
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config, contacts_file = load_runtime_config(
            args.config, args.contacts, args.log_level
        )

        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        command = FindCommand.parse(" ".join(args.keywords))

        with log_context(contacts_file=str(contacts_file)):
            address_book = load_address_book(contacts_file)
            result = command.execute(address_book)

        print(result.feedback_to_user)
        listing = result.listing()
        if listing:
            print(listing)
        return EXIT_OK

    except InvalidCommandFormatError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE
    except (ConfigurationError, ContactFileError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.error(
            f"{type(e).__name__}: {e.message}",
            extra={"event": "cli.error", "error_type": type(e).__name__},
        )
        return EXIT_ERROR
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Unexpected error",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
