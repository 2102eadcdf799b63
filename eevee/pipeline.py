"""Composition of transformers into pipelines.

``pipe`` composes any number of transformers at runtime. ``Pipeline`` is
the same composition built one stage at a time, so a type checker can
follow the value type from stage to stage.

Example:
    >>> port = pipe(must, as_int)
    >>> port(V(value="8080", name="PORT")).value
    8080
    >>> timeout = Pipeline().then(secret).then(as_duration)
    >>> timeout(V(value="1m", name="TIMEOUT")).value
    60000
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from eevee.envelope import V, VRaw


T = TypeVar("T")
U = TypeVar("U")


def _run(stages: tuple[Callable[[V[Any]], V[Any]], ...], initial: V[Any]) -> V[Any]:
    """Thread an envelope through stages left to right.

    The first stage to raise aborts the run; the error propagates as is.
    """
    value = initial
    for stage in stages:
        value = stage(value)
    return value


def pipe(*transforms: Callable[[V[Any]], V[Any]]) -> Callable[[VRaw], V[Any]]:
    """Compose transformers into a single transformer.

    Args:
        *transforms: Transformers applied in order; stage i's output is
            stage i+1's input.

    Returns:
        Transformer running every stage. With no stages it returns its
        input unchanged.
    """
    stages = tuple(transforms)

    def piped(initial: VRaw) -> V[Any]:
        return _run(stages, initial)

    return piped


class Pipeline(Generic[T]):
    """Immutable, incrementally typed pipeline.

    Each ``then`` call returns a new pipeline with one more stage; the
    original is left untouched.
    """

    def __init__(self, stages: tuple[Callable[[V[Any]], V[Any]], ...] = ()) -> None:
        """Initialize the pipeline.

        Args:
            stages: Transformers already in the pipeline.
        """
        self._stages = stages

    @property
    def stages(self) -> tuple[Callable[[V[Any]], V[Any]], ...]:
        """Transformers in execution order."""
        return self._stages

    def then(self, transform: Callable[[V[T]], V[U]]) -> "Pipeline[U]":
        """Append a stage.

        Args:
            transform: Transformer consuming this pipeline's output.

        Returns:
            New pipeline ending with ``transform``.
        """
        return Pipeline((*self._stages, transform))

    def __call__(self, initial: VRaw) -> V[T]:
        result: V[T] = _run(self._stages, initial)
        return result

    def __len__(self) -> int:
        return len(self._stages)

    def __repr__(self) -> str:
        names = ", ".join(getattr(s, "__name__", repr(s)) for s in self._stages)
        return f"Pipeline([{names}])"
