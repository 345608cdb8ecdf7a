"""
Command
Base class every executable command extends
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, FrozenSet, List, Optional, Tuple

from commands import mentions
from commands.definition import CommandDefinition
from commands.errors import (
    ERROR_TYPES,
    CommandFailure,
    CommandNotImplementedError,
    InvalidArgument,
)
from utils.logger import get_logger

logger = get_logger("Command")


class Command:
    """
    A single chat command.

    Subclasses pass their options to ``__init__`` and override ``run``::

        class Ping(Command):
            def __init__(self, client):
                super().__init__(client, {
                    "name": "ping",
                    "aliases": ["pong"],
                    "description": "Check the bot is alive",
                })

            async def run(self, message, args):
                await message.channel.send("Pong!")

    Permission, owner-only and disabled flags are declared here but enforced
    by the dispatcher before ``run`` is called (see ``commands.checks``).
    """

    error_types = ERROR_TYPES

    def __init__(self, client: Any, options: Mapping):
        self._definition = CommandDefinition.from_options(client, options)
        self._client = client
        logger.debug(f"Loaded command: {self._definition.name}")

    @property
    def client(self) -> Any:
        return self._client

    @property
    def definition(self) -> CommandDefinition:
        return self._definition

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def aliases(self) -> Tuple[str, ...]:
        return self._definition.aliases

    @property
    def usage(self) -> str:
        return self._definition.usage

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def type(self) -> Enum:
        return self._definition.type

    @property
    def client_permissions(self) -> FrozenSet[str]:
        return self._definition.client_permissions

    @property
    def user_permissions(self) -> FrozenSet[str]:
        return self._definition.user_permissions

    @property
    def examples(self) -> Tuple[str, ...]:
        return self._definition.examples

    @property
    def owner_only(self) -> bool:
        return self._definition.owner_only

    @property
    def disabled(self) -> bool:
        return self._definition.disabled

    async def run(self, message: Any, args: List[str]) -> Any:
        """
        Run the command.

        Args:
            message: Invocation context (the triggering message)
            args: Arguments already split from the message content

        Raises:
            InvalidArgument: Overrides raise this for bad user input
            CommandFailure: Overrides raise this when execution fails
            CommandNotImplementedError: Always, unless overridden
        """
        raise CommandNotImplementedError(self.name)

    def matches(self, invoked: str) -> bool:
        """Check whether an invoked name is this command's name or an alias."""
        if not invoked:
            return False
        invoked = invoked.lower()
        return invoked == self.name.lower() or any(invoked == a.lower() for a in self.aliases)

    def invalid_argument(self, reason: str) -> InvalidArgument:
        return InvalidArgument(reason, command=self.name)

    def command_failure(self, reason: str) -> CommandFailure:
        return CommandFailure(reason, command=self.name)

    def resolve_member(self, message: Any, mention: Optional[str]) -> Optional[Any]:
        return mentions.resolve_member(message, mention)

    def resolve_role(self, message: Any, mention: Optional[str]) -> Optional[Any]:
        return mentions.resolve_role(message, mention)

    def resolve_channel(self, message: Any, mention: Optional[str]) -> Optional[Any]:
        return mentions.resolve_channel(message, mention)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} type={self.type!r}>"
