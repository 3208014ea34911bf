"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_CONTACTS_FILE = "data/addressbook.yaml"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class AddressBookConfig(BaseModel):
    """Where the contact collection lives."""

    file: str = Field(
        DEFAULT_CONTACTS_FILE, min_length=1, description="Path to the YAML contacts file"
    )

    @field_validator("file")
    @classmethod
    def strip_file(cls, v: str) -> str:
        """Strip whitespace from the contacts file path."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("address_book.file cannot be empty")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the address book CLI."""

    address_book: AddressBookConfig = Field(
        default_factory=AddressBookConfig, description="Contact collection settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = {"extra": "forbid"}
