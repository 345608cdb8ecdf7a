"""Shared pytest fixtures and fake Discord objects for command tests."""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import discord
import pytest

from bot.client import CommandClient

OWNER_ID = 111111111111111111
BOT_ID = 222222222222222222
USER_ID = 333333333333333333


class FakeGuild:
    """Guild with cached member, role and channel directories keyed by int ID."""

    def __init__(
        self,
        members: Optional[Dict[int, Any]] = None,
        roles: Optional[Dict[int, Any]] = None,
        channels: Optional[Dict[int, Any]] = None,
        me: Any = None,
    ):
        self.members = members or {}
        self.roles = roles or {}
        self.channels = channels or {}
        self.me = me
        self.lookups: List[tuple] = []

    def get_member(self, member_id: int) -> Optional[Any]:
        self.lookups.append(("member", member_id))
        return self.members.get(member_id)

    def get_role(self, role_id: int) -> Optional[Any]:
        self.lookups.append(("role", role_id))
        return self.roles.get(role_id)

    def get_channel(self, channel_id: int) -> Optional[Any]:
        self.lookups.append(("channel", channel_id))
        return self.channels.get(channel_id)


class FakeChannel:
    """Text channel resolving permissions per member ID and recording sends."""

    def __init__(self, channel_id: int = 444444444444444444, permissions=None):
        self.id = channel_id
        self.permissions: Dict[int, discord.Permissions] = permissions or {}
        self.sent: List[str] = []

    def permissions_for(self, member: Any) -> discord.Permissions:
        return self.permissions.get(member.id, discord.Permissions.none())

    async def send(self, content: str) -> None:
        self.sent.append(content)


class FakeMessage:
    def __init__(self, author: Any, channel: FakeChannel, guild: Optional[FakeGuild], content: str = ""):
        self.author = author
        self.channel = channel
        self.guild = guild
        self.content = content


def make_member(member_id: int, name: str = "member") -> SimpleNamespace:
    return SimpleNamespace(id=member_id, name=name)


@pytest.fixture
def client() -> CommandClient:
    return CommandClient(owner_id=OWNER_ID)


@pytest.fixture
def bot_member() -> SimpleNamespace:
    return make_member(BOT_ID, "bot")


@pytest.fixture
def author() -> SimpleNamespace:
    return make_member(USER_ID, "alice")


@pytest.fixture
def guild(bot_member, author) -> FakeGuild:
    return FakeGuild(
        members={BOT_ID: bot_member, USER_ID: author, 123: make_member(123, "bob")},
        roles={456: SimpleNamespace(id=456, name="Moderator")},
        channels={789: SimpleNamespace(id=789, name="general")},
        me=bot_member,
    )


@pytest.fixture
def channel() -> FakeChannel:
    return FakeChannel(
        permissions={
            BOT_ID: discord.Permissions(send_messages=True, embed_links=True),
            USER_ID: discord.Permissions(send_messages=True),
            OWNER_ID: discord.Permissions(send_messages=True),
        }
    )


@pytest.fixture
def message(author, channel, guild) -> FakeMessage:
    return FakeMessage(author, channel, guild)
