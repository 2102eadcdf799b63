"""Value envelope threaded through transformation pipelines."""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict


T = TypeVar("T")
U = TypeVar("U")

REDACTED_VALUE = "[REDACTED]"


class V(BaseModel, Generic[T]):
    """A value together with the key it was read under.

    Envelopes are immutable. Every transformation stage returns a new
    envelope carrying the same ``name`` and, unless it intentionally
    upgrades it, the same ``secret`` flag.

    Attributes:
        value: Current value at this pipeline stage.
        name: Logical key the value was read under.
        secret: Whether the value is sensitive and must not be displayed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    value: T
    name: str
    secret: bool = False

    def derive(self, value: U) -> "V[U]":
        """Return a new envelope holding ``value`` with the same metadata.

        Args:
            value: Value for the derived envelope.

        Returns:
            Envelope with this envelope's ``name`` and ``secret`` flag.
        """
        return V(value=value, name=self.name, secret=self.secret)

    def mark_secret(self) -> "V[T]":
        """Return a copy flagged as secret."""
        return V(value=self.value, name=self.name, secret=True)

    def display_value(self) -> Any:
        """Get the value in a form safe for logs and error output.

        Returns:
            The value itself, or the redaction placeholder for secrets.
        """
        if self.secret:
            return REDACTED_VALUE
        return self.value

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        yield "value", self.display_value()
        yield "name", self.name
        yield "secret", self.secret


# Raw envelope produced by a reader
VRaw: TypeAlias = V[str | None]

# A transformer maps one envelope to another and may raise
Transformer: TypeAlias = Callable[[V[Any]], V[T]]
VT: TypeAlias = Callable[[V[Any]], V[T]]
