"""
Hosting client for commands.
Owns the command type vocabulary, the permission vocabulary and the bot owner identity.
"""

from enum import Enum
from typing import Any, FrozenSet, Optional

import discord

from bot.config import Config, config
from utils.logger import get_logger, set_level

logger = get_logger("Client")

# Loggers owned by the framework, re-levelled from configuration
FRAMEWORK_LOGGERS = ("Client", "Command", "CommandDefinition", "CommandChecks", "ErrorHandler")


class CommandType(str, Enum):
    """Command categories recognised by the client."""

    INFO = "info"
    FUN = "fun"
    COLOR = "color"
    POINTS = "points"
    MISC = "misc"
    MODERATION = "moderation"
    ADMIN = "admin"
    OWNER = "owner"


# Capability names as the platform spells them, upper-cased (SEND_MESSAGES, ...)
PERMISSION_FLAGS: FrozenSet[str] = frozenset(
    flag.upper() for flag in discord.Permissions.VALID_FLAGS
)


class CommandClient:
    """Client state shared read-only by every command."""

    types = CommandType
    permissions = PERMISSION_FLAGS

    def __init__(self, owner_id: Optional[int] = None, prefix: str = "."):
        self.owner_id = owner_id
        self.prefix = prefix

    def is_owner(self, user: Any) -> bool:
        """
        Check whether a user is the configured bot owner.

        Args:
            user: Discord user/member object or a raw ID

        Returns:
            True if the user is the owner
        """
        if self.owner_id is None or user is None:
            return False
        user_id = getattr(user, "id", user)
        try:
            return int(user_id) == self.owner_id
        except (TypeError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"<CommandClient owner_id={self.owner_id} prefix={self.prefix!r}>"


def create_client(cfg: Optional[Config] = None) -> CommandClient:
    """Create a client from configuration."""
    cfg = cfg or config
    set_level(cfg.log_level, *FRAMEWORK_LOGGERS)
    client = CommandClient(owner_id=cfg.OWNER_ID, prefix=cfg.PREFIX)
    if client.owner_id is None:
        logger.warning("OWNER_ID is not set; owner-only commands will be refused")
    logger.debug(f"Client created: {client!r}")
    return client
