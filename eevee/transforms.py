"""Built-in transformers.

Each transformer takes an envelope and returns a new one, or raises an
``EeveeError`` naming the offending key. All of them keep ``name``; all
except ``secret`` keep the ``secret`` flag. Defaults only apply when the
value is absent, never when it is malformed.

Transformers with a default are usable in a pipeline as they are, or
with another default through ``functools.partial``::

    pipe(secret, partial(as_int, default=8080))
"""

import re
import sys
from datetime import UTC, datetime
from typing import Final, TypeVar

from eevee.envelope import V, VRaw
from eevee.errors import DurationUnitError, InvalidValueError, MissingValueError


T = TypeVar("T")

SECOND_MS: Final[int] = 1000
MINUTE_MS: Final[int] = 60 * SECOND_MS
HOUR_MS: Final[int] = 60 * MINUTE_MS
DAY_MS: Final[int] = 24 * HOUR_MS

# Unit letter to milliseconds; months and years are fixed-length
DURATION_UNITS_MS: Final[dict[str, int]] = {
    "s": SECOND_MS,
    "m": MINUTE_MS,
    "h": HOUR_MS,
    "D": DAY_MS,
    "M": 30 * DAY_MS,
    "Y": 365 * DAY_MS,
}

TRUTHY_VALUES: Final[frozenset[str]] = frozenset({"yes", "true", "on", "1"})
FALSY_VALUES: Final[frozenset[str]] = frozenset({"no", "false", "off", "0"})

_DURATION_PATTERN = re.compile(r"(?:\d+[smhDMY])+", re.ASCII)
_DURATION_TOKEN = re.compile(r"(\d+)([smhDMY])")

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_PREFIXED_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY_PATTERN = re.compile(r"[+-]?Infinity")


def must(v: VRaw) -> V[str]:
    """Require a non-empty value.

    Args:
        v: Raw envelope.

    Returns:
        Envelope with the same value, now known to be a string.

    Raises:
        MissingValueError: If the value is absent or empty.
    """
    if not v.value:
        raise MissingValueError(v.name)
    return v.derive(v.value)


def _to_iso_string(moment: datetime) -> str:
    """Render a UTC datetime as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


def as_iso_date(v: V[str]) -> V[datetime]:
    """Parse an ISO-8601 UTC timestamp.

    Only the canonical millisecond form is accepted: the value must equal
    the timestamp rendered back as ``YYYY-MM-DDTHH:MM:SS.sssZ``.

    Args:
        v: Envelope holding the timestamp string.

    Returns:
        Envelope holding a timezone-aware UTC datetime.

    Raises:
        InvalidValueError: If the value is not a canonical timestamp.
    """
    if isinstance(v.value, str):
        try:
            parsed = datetime.fromisoformat(v.value)
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(UTC)
        except (ValueError, OverflowError):
            raise InvalidValueError(v.name, "date") from None
        if parsed.tzinfo is not None and _to_iso_string(parsed) == v.value:
            return v.derive(parsed)
    raise InvalidValueError(v.name, "date")


def as_duration(v: VRaw, default: int = 0) -> V[int]:
    """Parse a duration such as ``90s`` or ``1h30m`` into milliseconds.

    Args:
        v: Raw envelope.
        default: Milliseconds to use when the value is absent.

    Returns:
        Envelope holding the total duration in milliseconds.

    Raises:
        InvalidValueError: If the value is not a sequence of
            ``<digits><unit>`` parts.
        DurationUnitError: If a matched unit has no known factor.
    """
    if v.value is None:
        return v.derive(default)

    if not isinstance(v.value, str) or not _DURATION_PATTERN.fullmatch(v.value):
        raise InvalidValueError(v.name, "duration")

    duration = 0
    for match in _DURATION_TOKEN.finditer(v.value):
        amount, unit = match.groups()
        factor = DURATION_UNITS_MS.get(unit)
        if factor is None:
            raise DurationUnitError(unit, name=v.name)
        duration += int(amount) * factor

    return v.derive(duration)


def _parse_number(text: str) -> int | float | None:
    """Parse a numeric literal.

    Accepts decimal integers and fractions with an optional exponent,
    ``0x``/``0o``/``0b`` literals and ``Infinity``. Blank text is 0.

    Returns:
        The number, or None if the text is not numeric.
    """
    text = text.strip()
    if not text:
        return 0
    if _INTEGER_PATTERN.fullmatch(text):
        limit = sys.get_int_max_str_digits()
        if limit and len(text.lstrip("+-")) > limit:
            # Too long for int(); overflows to infinity
            return float(text)
        return int(text)
    if _PREFIXED_PATTERN.fullmatch(text):
        return int(text, 0)
    if _INFINITY_PATTERN.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _DECIMAL_PATTERN.fullmatch(text):
        number = float(text)
        if number.is_integer():
            return int(number)
        return number
    return None


def as_int(v: VRaw, default: int = 0) -> V[int | float]:
    """Parse a numeric value.

    A blank string parses as 0 rather than counting as absent.

    Args:
        v: Raw envelope.
        default: Value to use when the value is absent.

    Returns:
        Envelope holding the number.

    Raises:
        InvalidValueError: If the value is not numeric.
    """
    if v.value is None:
        return v.derive(default)

    number = _parse_number(v.value) if isinstance(v.value, str) else None
    if number is None:
        raise InvalidValueError(v.name, "number")
    return v.derive(number)


def as_bool(v: VRaw, default: bool = False) -> V[bool]:
    """Parse a boolean flag, case-insensitively.

    Args:
        v: Raw envelope.
        default: Value to use when the value is absent.

    Returns:
        Envelope holding the flag.

    Raises:
        InvalidValueError: If the value is not in either value set.
    """
    if v.value is None:
        return v.derive(default)

    lowered = v.value.lower() if isinstance(v.value, str) else None
    if lowered in TRUTHY_VALUES:
        return v.derive(True)
    if lowered in FALSY_VALUES:
        return v.derive(False)

    raise InvalidValueError(v.name, "boolean")


def secret(v: V[T]) -> V[T]:
    """Flag the value as sensitive. Never fails."""
    return v.mark_secret()
