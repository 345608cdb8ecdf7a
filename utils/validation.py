"""
Validation Utilities
Helper functions for validating Discord IDs, identifiers and user input
"""

import re
from typing import Any, List, Optional, Union

# Discord snowflake ID pattern: 17-20 digits
SNOWFLAKE_REGEX = re.compile(r"^[0-9]{17,20}$")

# Zero-width and control characters: stripped from user input, rejected in identifiers
ZERO_WIDTH_REGEX = re.compile(r"[\u200B-\u200D\uFEFF]")
CONTROL_CHAR_REGEX = re.compile(r"[\x00-\x1F\x7F-\x9F]")


class ValidationResult:
    """Result of a validation operation."""

    def __init__(
        self,
        valid: bool,
        error: Optional[str] = None,
        sanitized: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        self.valid = valid
        self.error = error
        self.sanitized = sanitized
        self.value = value

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        if self.valid:
            return "ValidationResult(valid=True)"
        return f"ValidationResult(valid=False, error={self.error!r})"


class ValidationUtils:
    """Utility class for input validation."""

    @staticmethod
    def is_valid_snowflake(id_value: Union[str, int]) -> bool:
        """
        Check if value is a valid Discord snowflake ID.

        Args:
            id_value: ID to validate

        Returns:
            True if valid snowflake
        """
        if isinstance(id_value, bool) or not isinstance(id_value, (str, int)):
            return False
        return bool(SNOWFLAKE_REGEX.match(str(id_value)))

    @staticmethod
    def sanitize_input(input_value: str) -> str:
        """
        Sanitize user input to prevent injection.

        Args:
            input_value: Input to sanitize

        Returns:
            Sanitized input string
        """
        if not isinstance(input_value, str):
            return ""

        sanitized = input_value.strip()
        sanitized = ZERO_WIDTH_REGEX.sub("", sanitized)
        sanitized = CONTROL_CHAR_REGEX.sub("", sanitized)

        return sanitized

    @staticmethod
    def validate_identifier(value: Any, label: str = "Name") -> ValidationResult:
        """
        Validate a command identifier (name or alias).

        Args:
            value: Identifier to validate
            label: Field label used in the error message

        Returns:
            ValidationResult with the identifier, minus surrounding
            whitespace, as ``sanitized``
        """
        if value is None:
            return ValidationResult(valid=False, error=f"{label} is required")

        if not isinstance(value, str):
            return ValidationResult(
                valid=False,
                error=f"{label} must be a string, got {type(value).__name__}",
            )

        sanitized = value.strip()
        if not sanitized:
            return ValidationResult(valid=False, error=f"{label} must not be empty")

        if ZERO_WIDTH_REGEX.search(sanitized) or CONTROL_CHAR_REGEX.search(sanitized):
            return ValidationResult(
                valid=False,
                error=f"{label} must not contain control or zero-width characters",
            )

        return ValidationResult(valid=True, sanitized=sanitized)

    @staticmethod
    def validate_args_length(
        args: Optional[List[Any]],
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> ValidationResult:
        """
        Validate command arguments length.

        Args:
            args: Command arguments
            min_length: Minimum required
            max_length: Maximum allowed

        Returns:
            ValidationResult with valid status
        """
        length = len(args) if args else 0

        if min_length is not None and length < min_length:
            return ValidationResult(
                valid=False,
                error=f"Too few arguments. Minimum: {min_length}"
            )

        if max_length is not None and length > max_length:
            return ValidationResult(
                valid=False,
                error=f"Too many arguments. Maximum: {max_length}"
            )

        return ValidationResult(valid=True)
