"""Command parsing exceptions."""


class CommandError(Exception):
    """Base exception for command errors."""

    pass


class InvalidCommandFormatError(CommandError):
    """Raised when a command's arguments do not fit its usage.

    Attributes:
        usage: The command's usage text, shown back to the user
    """

    def __init__(self, message: str, usage: str):
        self.usage = usage
        super().__init__(message)
