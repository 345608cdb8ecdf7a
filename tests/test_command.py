"""Tests for the Command base class."""

import asyncio

import pytest

from bot.client import CommandType
from commands.checks import ensure_implemented
from commands.command import Command
from commands.errors import (
    ERROR_TYPES,
    CommandDefinitionError,
    CommandNotImplementedError,
    InvalidArgument,
)


class Ping(Command):
    def __init__(self, client):
        super().__init__(client, {"name": "ping", "aliases": ["Pong", "p"]})

    async def run(self, message, args):
        await message.channel.send("Pong!")


class Avatar(Command):
    def __init__(self, client):
        super().__init__(
            client,
            {"name": "avatar", "usage": "avatar <user mention>", "type": CommandType.INFO},
        )

    async def run(self, message, args):
        member = self.resolve_member(message, args[0] if args else None)
        if member is None:
            raise self.invalid_argument("Please mention a member of this server")
        await message.channel.send(f"{member.name}'s avatar")


def test_base_run_names_the_command(client, message):
    command = Command(client, {"name": "ping"})

    with pytest.raises(CommandNotImplementedError, match="ping") as exc_info:
        asyncio.run(command.run(message, []))

    assert isinstance(exc_info.value, NotImplementedError)
    assert exc_info.value.name == "ping"


def test_override_runs(client, message):
    asyncio.run(Ping(client).run(message, []))
    assert message.channel.sent == ["Pong!"]


def test_override_resolves_mentions(client, message):
    asyncio.run(Avatar(client).run(message, ["<@!123>"]))
    assert message.channel.sent == ["bob's avatar"]


def test_override_raises_invalid_argument(client, message):
    with pytest.raises(InvalidArgument) as exc_info:
        asyncio.run(Avatar(client).run(message, ["bob"]))

    assert exc_info.value.command == "avatar"
    assert exc_info.value.error_type == "Invalid Argument"


def test_defaults_exposed_as_properties(client):
    command = Command(client, {"name": "ping"})

    assert command.client is client
    assert command.usage == "ping"
    assert command.description == ""
    assert command.type is CommandType.MISC
    assert command.client_permissions == {"SEND_MESSAGES", "EMBED_LINKS"}
    assert command.user_permissions == frozenset()
    assert command.owner_only is False
    assert command.disabled is False
    assert command.error_types == ERROR_TYPES == ("Invalid Argument", "Command Failure")


def test_invalid_definition_produces_no_instance(client):
    with pytest.raises(CommandDefinitionError):
        Command(client, {"description": "no name"})


def test_metadata_is_read_only(client):
    command = Ping(client)
    with pytest.raises(AttributeError):
        command.name = "other"
    with pytest.raises(AttributeError):
        command.disabled = True


def test_same_options_give_identical_commands(client):
    first, second = Ping(client), Ping(client)
    assert first.definition == second.definition
    assert first is not second


@pytest.mark.parametrize("invoked,expected", [
    ("ping", True),
    ("PING", True),
    ("pong", True),
    ("p", True),
    ("pin", False),
    ("", False),
])
def test_matches_name_and_aliases(client, invoked, expected):
    assert Ping(client).matches(invoked) is expected


def test_command_failure_is_bound_to_command(client):
    error = Ping(client).command_failure("API unavailable")
    assert error.command == "ping"
    assert str(error) == "[ping] Command Failure: API unavailable"


def test_ensure_implemented(client):
    ensure_implemented(Ping(client))

    with pytest.raises(CommandNotImplementedError, match="The ping command has no run\\(\\) method"):
        ensure_implemented(Command(client, {"name": "ping"}))
