"""
Command Definition
Declarative command metadata, validated and defaulted once at load time
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from commands.errors import CommandDefinitionError
from utils.logger import get_logger
from utils.validation import ValidationUtils

logger = get_logger("CommandDefinition")

DEFAULT_CLIENT_PERMISSIONS: FrozenSet[str] = frozenset({"SEND_MESSAGES", "EMBED_LINKS"})

OPTION_KEYS = (
    "name",
    "aliases",
    "usage",
    "description",
    "type",
    "client_permissions",
    "user_permissions",
    "examples",
    "owner_only",
    "disabled",
)

# camelCase spellings accepted for compatibility with JS-style command files
OPTION_SYNONYMS = {
    "clientPermissions": "client_permissions",
    "userPermissions": "user_permissions",
    "ownerOnly": "owner_only",
}


@dataclass(frozen=True)
class CommandDefinition:
    """
    Validated definition of a command. Every field holds a concrete value.

    Build it with ``from_options``, which applies the client's vocabularies.
    Direct construction still checks the name and fills in ``usage``.
    """

    name: str
    type: Enum
    aliases: Tuple[str, ...] = ()
    usage: str = ""
    description: str = ""
    client_permissions: FrozenSet[str] = DEFAULT_CLIENT_PERMISSIONS
    user_permissions: FrozenSet[str] = frozenset()
    examples: Tuple[str, ...] = ()
    owner_only: bool = False
    disabled: bool = False

    def __post_init__(self):
        result = ValidationUtils.validate_identifier(self.name, "Command name")
        if not result:
            raise CommandDefinitionError(result.error)
        if not isinstance(self.type, Enum):
            raise CommandDefinitionError("type must be a command type member", result.sanitized)
        object.__setattr__(self, "name", result.sanitized)
        if not self.usage:
            object.__setattr__(self, "usage", result.sanitized)

    @classmethod
    def from_options(cls, client: Any, options: Mapping) -> "CommandDefinition":
        """
        Validate raw options and build a fully defaulted definition.

        Args:
            client: Hosting client exposing ``types`` and ``permissions``
            options: Raw option mapping

        Returns:
            CommandDefinition

        Raises:
            CommandDefinitionError: If the options are malformed
        """
        validate_options(client, options)
        opts = _canonical_options(options)

        name = opts["name"].strip()

        client_permissions = _permission_set(opts.get("client_permissions"))
        if not client_permissions:
            if "client_permissions" in opts:
                logger.debug(f"{name}: empty client permissions replaced with defaults")
            client_permissions = DEFAULT_CLIENT_PERMISSIONS

        type_value = opts.get("type")
        command_type = (
            _lookup_type(client, type_value) if type_value is not None else client.types.MISC
        )

        return cls(
            name=name,
            aliases=tuple(a.strip() for a in opts.get("aliases") or ()),
            usage=opts.get("usage") or name,
            description=opts.get("description") or "",
            type=command_type,
            client_permissions=client_permissions,
            user_permissions=_permission_set(opts.get("user_permissions")),
            examples=tuple(opts.get("examples") or ()),
            owner_only=bool(opts.get("owner_only") or False),
            disabled=bool(opts.get("disabled") or False),
        )


def validate_options(client: Any, options: Any) -> None:
    """
    Reject malformed command metadata.

    Args:
        client: Hosting client exposing ``types`` and ``permissions``
        options: Raw option mapping

    Raises:
        CommandDefinitionError: On the first problem found
    """
    if not isinstance(options, Mapping):
        raise CommandDefinitionError(
            f"Command options must be a mapping, got {type(options).__name__}"
        )

    opts = _canonical_options(options)

    result = ValidationUtils.validate_identifier(opts.get("name"), "Command name")
    if not result:
        raise CommandDefinitionError(result.error)
    name = result.sanitized

    for key in ("aliases", "examples"):
        value = opts.get(key)
        if value is None:
            continue
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise CommandDefinitionError(f"{key} must be a list of strings", name)
        for item in value:
            check = ValidationUtils.validate_identifier(item, f"Each entry in {key}")
            if not check:
                raise CommandDefinitionError(check.error, name)

    for key in ("usage", "description"):
        value = opts.get(key)
        if value is not None and not isinstance(value, str):
            raise CommandDefinitionError(f"{key} must be a string", name)

    type_value = opts.get("type")
    if type_value is not None and _lookup_type(client, type_value) is None:
        valid = ", ".join(member.name for member in client.types)
        raise CommandDefinitionError(f"Invalid command type: {type_value!r}. Valid: {valid}", name)

    for key in ("client_permissions", "user_permissions"):
        value = opts.get(key)
        if value is None:
            continue
        if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
            raise CommandDefinitionError(f"{key} must be a collection of permission names", name)
        if not all(isinstance(perm, str) for perm in value):
            raise CommandDefinitionError(f"{key} must contain only strings", name)
        unknown = sorted(perm for perm in value if perm.upper() not in client.permissions)
        if unknown:
            raise CommandDefinitionError(f"Invalid {key}: {', '.join(unknown)}", name)

    for key in ("owner_only", "disabled"):
        value = opts.get(key)
        if value is not None and not isinstance(value, bool):
            raise CommandDefinitionError(f"{key} must be a boolean", name)


def _canonical_options(options: Mapping) -> Dict[str, Any]:
    """Map option keys to their snake_case names, rejecting unknown keys."""
    canonical: Dict[str, Any] = {}
    for key, value in options.items():
        target = OPTION_SYNONYMS.get(key, key)
        if target not in OPTION_KEYS:
            raise CommandDefinitionError(f"Unknown command option: {key!r}")
        if target in canonical:
            raise CommandDefinitionError(f"Option given twice: {target!r}")
        canonical[target] = value
    return canonical


def _lookup_type(client: Any, value: Any) -> Optional[Enum]:
    """Find a command type by member, value or name."""
    types = client.types
    if isinstance(value, types):
        return value
    if not isinstance(value, str):
        return None
    try:
        return types(value.lower())
    except ValueError:
        pass
    try:
        return types[value.upper()]
    except KeyError:
        return None


def _permission_set(value: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not value:
        return frozenset()
    return frozenset(perm.upper() for perm in value)
