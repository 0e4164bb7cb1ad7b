"""
Error taxonomy and validation helpers for the resolution engine.

Every error is raised at the point of detection and propagates to the
caller. Raise sites log the problem with its context before raising.
"""

from enum import Enum
from typing import Any

from core.logging import log_error


class ResolutionError(Exception):
    """Base class for every error raised by the resolution engine."""


class InvalidNotation(ResolutionError, ValueError):
    """A dice notation string does not match ``[count]d[sides][+-modifier]``."""


class NotFound(ResolutionError, LookupError):
    """A referenced skill, weapon or armor id is missing, or a slot is empty."""


class WrongCategory(ResolutionError):
    """A resolved item is not the expected kind of equipment."""


class InvalidOffhand(ResolutionError):
    """An off-hand weapon lacks the ``light`` property."""


class MissingDamageProfile(ResolutionError):
    """A weapon has no damage profile for the selected wielding mode."""


class InvalidScore(ResolutionError, ValueError):
    """An ability score or a character level is below 1."""


# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================
# These helpers log the failing value with its context and then raise, so
# raise sites read as a single call.


def require_positive(
    value: int,
    param_name: str,
    error: type[ResolutionError] = InvalidScore,
    context: dict[str, Any] | None = None,
) -> int:
    """
    Validates that an integer is at least 1.

    Args:
        value (int): The value to validate.
        param_name (str): Human-readable parameter name for error messages.
        error (type[ResolutionError]): The error class to raise.
        context (dict[str, Any] | None): Additional context for logging.

    Returns:
        int: The validated value.

    Raises:
        ResolutionError: The given error class, if the value is below 1.

    """
    if value < 1:
        log_error(
            f"{param_name} cannot be less than 1, got: {value}",
            {**(context or {}), "param_name": param_name, "value": value},
        )
        raise error(f"{param_name} cannot be less than 1: {value}")
    return value


def require_enum_type(
    value: Any,
    enum_class: type[Enum],
    param_name: str,
    context: dict[str, Any] | None = None,
) -> Any:
    """
    Validates that a value is a member of the given enum, coercing strings.

    Args:
        value (Any): The value to validate.
        enum_class (type[Enum]): The expected enum class.
        param_name (str): Human-readable parameter name for error messages.
        context (dict[str, Any] | None): Additional context for logging.

    Returns:
        Any: The validated enum member.

    Raises:
        ValueError: If the value is not a member of the enum.

    """
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(value)
    except ValueError:
        log_error(
            f"{param_name} must be {enum_class.__name__} enum, got: {value!r}",
            {
                **(context or {}),
                "param_name": param_name,
                "expected_type": enum_class.__name__,
                "actual_type": type(value).__name__,
            },
        )
        raise
