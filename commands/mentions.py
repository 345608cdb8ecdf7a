"""
Mention Resolver
Turns inline mention tokens into guild directory entries
"""

import re
from typing import Any, Optional, Pattern

# Pre-compiled mention patterns, matched against the whole token.
# IDs are snowflakes, so at most 20 digits.
MEMBER_MENTION = re.compile(r"<@!?(\d{1,20})>", re.ASCII)
ROLE_MENTION = re.compile(r"<@&(\d{1,20})>", re.ASCII)
CHANNEL_MENTION = re.compile(r"<#(\d{1,20})>", re.ASCII)


def _parse(pattern: Pattern, token: Optional[str]) -> Optional[str]:
    if not token or not isinstance(token, str):
        return None
    match = pattern.fullmatch(token)
    if not match:
        return None
    return match.group(1)


def parse_member_mention(token: Optional[str]) -> Optional[str]:
    """Return the user ID in a ``<@id>`` or ``<@!id>`` token, else None."""
    return _parse(MEMBER_MENTION, token)


def parse_role_mention(token: Optional[str]) -> Optional[str]:
    """Return the role ID in a ``<@&id>`` token, else None."""
    return _parse(ROLE_MENTION, token)


def parse_channel_mention(token: Optional[str]) -> Optional[str]:
    """Return the channel ID in a ``<#id>`` token, else None."""
    return _parse(CHANNEL_MENTION, token)


def _guild(context: Any) -> Optional[Any]:
    return getattr(context, "guild", None)


def resolve_member(context: Any, token: Optional[str]) -> Optional[Any]:
    """
    Look up the member a mention token refers to.

    Args:
        context: Invocation context (usually the triggering message)
        token: Raw argument such as ``<@!123>``

    Returns:
        The cached member, or None if the token is absent, malformed,
        used outside a guild, or the member is not cached
    """
    member_id = parse_member_mention(token)
    guild = _guild(context)
    if member_id is None or guild is None:
        return None
    return guild.get_member(int(member_id))


def resolve_role(context: Any, token: Optional[str]) -> Optional[Any]:
    """
    Look up the role a mention token refers to.

    Args:
        context: Invocation context (usually the triggering message)
        token: Raw argument such as ``<@&456>``

    Returns:
        The cached role, or None
    """
    role_id = parse_role_mention(token)
    guild = _guild(context)
    if role_id is None or guild is None:
        return None
    return guild.get_role(int(role_id))


def resolve_channel(context: Any, token: Optional[str]) -> Optional[Any]:
    """Look up the guild channel a ``<#id>`` token refers to, or None."""
    channel_id = parse_channel_mention(token)
    guild = _guild(context)
    if channel_id is None or guild is None:
        return None
    return guild.get_channel(int(channel_id))
