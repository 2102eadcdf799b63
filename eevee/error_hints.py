"""Hints for lookup errors.

Provides short remediation steps shown next to the error message,
so an operator knows what a valid value looks like.
"""

from typing import Final

from eevee.errors import EeveeError


# Mapping of coercion kinds to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    "required": "This key is required. Set it to a non-empty value.",
    "date": "Use a full ISO-8601 UTC timestamp (e.g., '2024-01-31T12:00:00.000Z').",
    "duration": (
        "Use one or more <number><unit> parts with units s, m, h, D, M, Y "
        "(e.g., '90s' or '1h30m')."
    ),
    "number": "This key must be numeric (e.g., '42', '-1', '0x1F').",
    "boolean": "Use one of: yes, true, on, 1, no, false, off, 0.",
}

DEFAULT_HINT: Final[str] = "Check the value assigned to this key."


def get_error_hint(kind: str | None) -> str:
    """Get a user-friendly hint for a coercion kind.

    Args:
        kind: The coercion kind (e.g., 'duration'), or None.

    Returns:
        A user-friendly hint string.
    """
    if kind is None:
        return DEFAULT_HINT
    return ERROR_HINTS.get(kind, DEFAULT_HINT)


def format_lookup_error(error: EeveeError, *, include_hint: bool = True) -> str:
    """Format a lookup error with optional hint.

    Args:
        error: The error to format.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    if include_hint:
        return f"{error.message}\n    Hint: {get_error_hint(error.kind)}"
    return error.message
