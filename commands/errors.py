"""
Command Errors
Runtime and construction-time error types for commands
"""

from typing import Optional

INVALID_ARGUMENT = "Invalid Argument"
COMMAND_FAILURE = "Command Failure"

# The two runtime error kinds a command body may raise
ERROR_TYPES = (INVALID_ARGUMENT, COMMAND_FAILURE)


class CommandError(Exception):
    """
    Base class for errors raised from inside a command's run().

    Subclasses are recoverable: the dispatcher reports them to the user
    and keeps going.
    """

    error_type = COMMAND_FAILURE

    def __init__(self, reason: str = "", command: Optional[str] = None):
        self.reason = reason
        self.command = command
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = f"[{self.command}] " if self.command else ""
        if self.reason:
            return f"{prefix}{self.error_type}: {self.reason}"
        return f"{prefix}{self.error_type}"


class InvalidArgument(CommandError):
    """The supplied arguments failed the command's own validation."""

    error_type = INVALID_ARGUMENT


class CommandFailure(CommandError):
    """The command body failed while performing its side effects."""

    error_type = COMMAND_FAILURE


class CommandDefinitionError(ValueError):
    """Malformed command metadata. Raised at construction, never at runtime."""

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name
        if name:
            message = f"Invalid definition for command '{name}': {message}"
        super().__init__(message)


class CommandNotImplementedError(NotImplementedError):
    """A command was registered without overriding run()."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The {name} command has no run() method")
