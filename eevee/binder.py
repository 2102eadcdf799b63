"""Binding a reader into a call-by-name lookup function."""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, TypeVar, overload

from eevee.envelope import V, VRaw
from eevee.evaluate import ev
from eevee.reader import Source, as_reader


T = TypeVar("T")

# Wraps a transformer with side effects, keeping its result and errors
Applier: TypeAlias = Callable[[Callable[[VRaw], V[Any]]], Callable[[VRaw], V[Any]]]


class Eevee(Protocol):
    """Lookup function bound to a reader."""

    @overload
    def __call__(self, name: str) -> str | None: ...

    @overload
    def __call__(self, name: str, transform: Callable[[VRaw], V[T]]) -> T: ...


def bind(reader: Source, applier: Applier | None = None) -> Eevee:
    """Bind a reader, and optionally an applier, into a lookup function.

    When both an applier and a transform are present, the applier wraps
    the whole transform once per call, however many stages it has.
    Lookups without a transform return the raw value and skip the
    applier.

    Args:
        reader: Reader, function returning envelopes, or mapping.
        applier: Optional wrapper applied to every transform.

    Returns:
        Function of ``(name, transform=None)``.
    """
    bound = as_reader(reader)

    def lookup(name: str, transform: Callable[[VRaw], V[Any]] | None = None) -> Any:
        if transform is None:
            return ev(bound, name)
        if applier is not None:
            return ev(bound, name, applier(transform))
        return ev(bound, name, transform)

    return lookup  # type: ignore[return-value]
