"""Error types raised by transformers.

Every error names the offending key so the caller can tell which
configuration value is missing or malformed. Errors are classified
the same way for logging and metrics:

- MISSING: a required value is absent or empty
- FORMAT: a value is present but cannot be parsed
- BUG: the parser reached a branch that valid input can never reach
"""

from enum import Enum


class LookupErrorClass(str, Enum):
    """Classification of lookup errors."""

    MISSING = "MISSING"
    FORMAT = "FORMAT"
    BUG = "BUG"


class EeveeError(ValueError):
    """Base exception for all lookup errors.

    Provides structured error information for logging.
    """

    def __init__(
        self,
        error_class: LookupErrorClass,
        message: str,
        name: str | None = None,
        kind: str | None = None,
    ) -> None:
        """Initialize the lookup error.

        Args:
            error_class: Classification of the error.
            message: Human-readable error message.
            name: Key whose value failed.
            kind: Coercion that failed (e.g. 'duration'), if any.
        """
        super().__init__(message)
        self.error_class = error_class
        self.message = message
        self.name = name
        self.kind = kind

    def to_dict(self) -> dict[str, str | None]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "name": self.name,
            "kind": self.kind,
        }


class MissingValueError(EeveeError):
    """Raised when a required value is absent or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_class=LookupErrorClass.MISSING,
            message=f"{name} is not defined",
            name=name,
            kind="required",
        )


class InvalidValueError(EeveeError):
    """Raised when a present value cannot be coerced.

    The message template depends on the coercion kind, so each kind
    reads naturally: "PORT is not a number", "TTL is not a valid
    duration".
    """

    MESSAGES: dict[str, str] = {
        "date": "{name} is not a valid date",
        "duration": "{name} is not a valid duration",
        "number": "{name} is not a number",
        "boolean": "{name} is not a valid boolean value.",
    }

    def __init__(self, name: str, kind: str) -> None:
        """Initialize the error.

        Args:
            name: Key whose value failed to parse.
            kind: One of 'date', 'duration', 'number', 'boolean'.

        Raises:
            KeyError: If kind is not a known coercion kind.
        """
        super().__init__(
            error_class=LookupErrorClass.FORMAT,
            message=self.MESSAGES[kind].format(name=name),
            name=name,
            kind=kind,
        )


class DurationUnitError(EeveeError):
    """Raised when the duration parser meets a unit it has no factor for."""

    def __init__(self, unit: str, name: str | None = None) -> None:
        super().__init__(
            error_class=LookupErrorClass.BUG,
            message=(
                f"Invalid unit encountered: {unit}. "
                "This is a bug, please report this."
            ),
            name=name,
        )
        self.unit = unit
