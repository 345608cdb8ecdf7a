"""
Command framework core: command base class, definitions, mentions and errors.
"""

from .errors import (
    ERROR_TYPES,
    CommandDefinitionError,
    CommandError,
    CommandFailure,
    CommandNotImplementedError,
    InvalidArgument,
)
from .definition import CommandDefinition, validate_options
from .command import Command
from .mentions import resolve_channel, resolve_member, resolve_role
from .checks import check_invocation, ensure_implemented, missing_permissions

__all__ = [
    "ERROR_TYPES",
    "Command",
    "CommandDefinition",
    "CommandDefinitionError",
    "CommandError",
    "CommandFailure",
    "CommandNotImplementedError",
    "InvalidArgument",
    "check_invocation",
    "ensure_implemented",
    "missing_permissions",
    "resolve_channel",
    "resolve_member",
    "resolve_role",
    "validate_options",
]
