"""
Error Handler
Classifies errors raised by commands at the dispatcher boundary
"""

import traceback
from typing import Any, Dict, List, Optional

from commands.errors import (
    COMMAND_FAILURE,
    CommandDefinitionError,
    CommandError,
    CommandNotImplementedError,
    InvalidArgument,
)
from utils.logger import get_logger

GENERIC_FAILURE = "Something went wrong while running that command. Please try again later."


class ErrorHandler:
    """Error handler for command invocations."""

    def __init__(self):
        self.logger = get_logger("ErrorHandler")
        self.error_counts: Dict[str, int] = {}

    def handle_command_error(self, error: Exception, command: Any = None) -> str:
        """
        Log a runtime command error and build the reply for the user.

        Args:
            error: Exception raised by the command
            command: Command that raised it, if known

        Returns:
            Text to send back to the channel

        Raises:
            CommandNotImplementedError: Re-raised unmodified
            CommandDefinitionError: Re-raised unmodified
        """
        if isinstance(error, (CommandNotImplementedError, CommandDefinitionError)):
            raise error

        name = getattr(command, "name", None) or getattr(error, "command", None) or "unknown"
        self._count(name, error)

        if isinstance(error, InvalidArgument):
            self.logger.warning(f"[{name}] {error.error_type}: {error.reason}")
            return f"❌ **{error.error_type}:** {error.reason or 'invalid arguments'}"

        if isinstance(error, CommandError):
            self.logger.error(f"[{name}] {error.error_type}: {error.reason}")
        else:
            self.logger.error(f"[{name}] Unexpected {type(error).__name__}: {error}")
        self.logger.debug(
            "Traceback:\n"
            + "".join(traceback.format_exception(type(error), error, error.__traceback__))
        )

        return f"❌ **{COMMAND_FAILURE}:** {GENERIC_FAILURE}"

    async def run_command(self, command: Any, message: Any, args: List[str]) -> Optional[str]:
        """
        Run a command, turning runtime errors into a reply.

        Args:
            command: Command to run
            message: Triggering message
            args: Arguments for the command

        Returns:
            Error reply text, or None if the command succeeded
        """
        try:
            self.logger.debug(f"Executing: {command.name} {args}")
            await command.run(message, args)
        except CommandNotImplementedError:
            self.logger.critical(f"Command {command.name} has no implementation")
            raise
        except Exception as error:
            return self.handle_command_error(error, command)
        return None

    def _count(self, name: str, error: Exception) -> None:
        error_key = f"{name}:{type(error).__name__}"
        self.error_counts[error_key] = self.error_counts.get(error_key, 0) + 1

    def reset(self) -> None:
        """Clear error counts."""
        if self.error_counts:
            self.logger.debug("Error counts cleared")
        self.error_counts.clear()


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler
