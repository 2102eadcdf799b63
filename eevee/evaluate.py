"""Evaluation of a single lookup."""

from collections.abc import Callable
from typing import Any, TypeVar, overload

from eevee.envelope import V, VRaw
from eevee.reader import Source, as_reader


T = TypeVar("T")


def read_raw(source: Source, name: str) -> VRaw:
    """Read the raw envelope for a name.

    Args:
        source: Reader, function returning envelopes, or mapping.
        name: Key to look up.

    Returns:
        Raw envelope produced by the source.

    Raises:
        ValueError: If name is empty or not a string.
        TypeError: If the source is not a supported reader.
    """
    if not isinstance(name, str) or not name:
        raise ValueError("Lookup name must be a non-empty string")
    return as_reader(source)(name)


@overload
def ev(source: Source, name: str) -> str | None: ...


@overload
def ev(source: Source, name: str, transform: Callable[[VRaw], V[T]]) -> T: ...


def ev(
    source: Source,
    name: str,
    transform: Callable[[VRaw], V[Any]] | None = None,
) -> Any:
    """Read a value and optionally transform it.

    Errors raised by the transform propagate unchanged.

    Args:
        source: Reader, function returning envelopes, or mapping.
        name: Key to look up.
        transform: Optional transformer applied to the raw envelope.

    Returns:
        The transformed value, or the raw string (None if absent) when
        no transform is given.
    """
    raw = read_raw(source, name)
    if transform is not None:
        return transform(raw).value
    return raw.value


evaluate = ev
