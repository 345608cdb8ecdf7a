"""
Command Checks
Pre-run checks a dispatcher applies before calling Command.run()
"""

from typing import Any, Iterable, List

import discord

from commands.command import Command
from commands.errors import CommandNotImplementedError
from utils.logger import get_logger
from utils.validation import ValidationResult

logger = get_logger("CommandChecks")


def ensure_implemented(command: Command) -> None:
    """
    Fail fast on a command registered without a run() override.

    Meant for startup, so a missing implementation stops the bot from
    loading instead of surfacing on the first invocation.

    Raises:
        CommandNotImplementedError: If run() is the base implementation
    """
    if type(command).run is Command.run:
        raise CommandNotImplementedError(command.name)


def missing_permissions(required: Iterable[str], granted: discord.Permissions) -> List[str]:
    """
    List required capability names not present in a permission set.

    Args:
        required: Upper-case capability names (SEND_MESSAGES, ...)
        granted: Resolved channel permissions

    Returns:
        Sorted list of missing names
    """
    return sorted(perm for perm in required if not getattr(granted, perm.lower(), False))


def _format_permissions(names: List[str]) -> str:
    return ", ".join(f"`{name.replace('_', ' ').title()}`" for name in names)


def check_invocation(command: Command, message: Any) -> ValidationResult:
    """
    Check whether a message may invoke a command.

    Args:
        command: Command about to run
        message: Triggering message (author, channel, guild)

    Returns:
        ValidationResult; when invalid, ``error`` is user-facing text and
        ``value`` holds the missing permission names, if any
    """
    if command.disabled:
        return ValidationResult(valid=False, error=f"The {command.name} command is disabled")

    if command.owner_only and not command.client.is_owner(message.author):
        return ValidationResult(
            valid=False,
            error=f"The {command.name} command can only be used by the bot owner",
        )

    guild = getattr(message, "guild", None)
    if guild is None:
        # Direct messages carry no guild permissions to check
        return ValidationResult(valid=True)

    channel = message.channel

    missing = missing_permissions(command.client_permissions, channel.permissions_for(guild.me))
    if missing:
        logger.debug(f"{command.name}: bot missing {missing} in channel {channel.id}")
        return ValidationResult(
            valid=False,
            error=f"I need the following permissions: {_format_permissions(missing)}",
            value=missing,
        )

    if command.user_permissions:
        missing = missing_permissions(
            command.user_permissions, channel.permissions_for(message.author)
        )
        if missing:
            return ValidationResult(
                valid=False,
                error=f"You need the following permissions: {_format_permissions(missing)}",
                value=missing,
            )

    return ValidationResult(valid=True)
