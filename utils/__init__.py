"""
Utility modules for the command framework.
"""

from .logger import get_logger, set_level, setup_logging
from .validation import ValidationResult, ValidationUtils
from .error_handler import ErrorHandler, get_error_handler

__all__ = [
    "get_logger",
    "set_level",
    "setup_logging",
    "ValidationUtils",
    "ValidationResult",
    "ErrorHandler",
    "get_error_handler",
]
