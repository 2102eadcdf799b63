"""Reader abstraction over an external key-value source.

A source is either a callable returning a raw envelope for a name, or a
plain mapping from names to optional strings. Both are adapted to the
``Reader`` protocol so the evaluator handles them the same way.
"""

from collections.abc import Callable, Mapping
from typing import Protocol, TypeAlias, runtime_checkable

from eevee.envelope import V, VRaw


BasicReader: TypeAlias = Mapping[str, str | None]


@runtime_checkable
class Reader(Protocol):
    """Protocol for key-value readers.

    Any callable taking a name and returning a raw envelope can be used
    as a reader.
    """

    def __call__(self, name: str) -> VRaw:
        """Read the raw value for a name.

        Args:
            name: Key to look up.

        Returns:
            Raw envelope; its value is None when the key is absent.
        """
        ...


Source: TypeAlias = Reader | Callable[[str], VRaw] | BasicReader


class FunctionReader:
    """Reader backed by a function returning envelopes."""

    def __init__(self, fn: Callable[[str], VRaw]) -> None:
        self._fn = fn

    def __call__(self, name: str) -> VRaw:
        envelope = self._fn(name)
        if not isinstance(envelope, V):
            raise TypeError(
                f"Reader returned {type(envelope).__name__} for {name}, expected V"
            )
        return envelope


class MappingReader:
    """Reader backed by a plain mapping.

    Missing keys read as None. Values are never flagged as secret.
    """

    def __init__(self, mapping: BasicReader) -> None:
        self._mapping = mapping

    def __call__(self, name: str) -> VRaw:
        return V(value=self._mapping.get(name), name=name, secret=False)


def as_reader(source: Source) -> Reader:
    """Adapt a source to the ``Reader`` protocol.

    Args:
        source: Reader, function returning envelopes, or mapping.

    Returns:
        A reader for the source.

    Raises:
        TypeError: If the source is neither callable nor a mapping.
    """
    if isinstance(source, FunctionReader | MappingReader):
        return source
    if callable(source):
        return FunctionReader(source)
    if isinstance(source, Mapping):
        return MappingReader(source)
    raise TypeError(
        f"Unsupported reader type: {type(source).__name__}. "
        "Expected a callable or a mapping."
    )
