"""Appliers that observe lookups without changing their outcome.

An applier wraps a transformer with another transformer of the same
shape. The wrapped transformer's result is returned untouched and its
errors are re-raised after being observed.
"""

import time
from collections.abc import Callable
from functools import wraps
from typing import Any

from eevee.binder import Applier
from eevee.envelope import REDACTED_VALUE, V, VRaw
from eevee.errors import EeveeError
from eevee.observability.logging import get_logger
from eevee.observability.metrics import LookupMetrics
from eevee.settings import get_settings


logger = get_logger("lookup")

_Transform = Callable[[VRaw], V[Any]]


def _elapsed_ms(start_ns: int) -> float:
    return (time.perf_counter_ns() - start_ns) / 1_000_000


def _error_class(exc: Exception) -> str:
    if isinstance(exc, EeveeError):
        return exc.error_class.value
    return type(exc).__name__


def logging_applier(
    log: Any = None,
    include_values: bool | None = None,
) -> Applier:
    """Build an applier that logs every transformed lookup.

    Successful lookups are logged at debug level as ``lookup_resolved``,
    failures at warning level as ``lookup_failed``. Secret values are
    always replaced with the redaction placeholder.

    Args:
        log: Logger to use (default: module logger).
        include_values: Whether to log resolved values. Defaults to the
            ``EEVEE_LOG_VALUES`` setting.

    Returns:
        Applier for ``bind``.
    """
    base_log = log if log is not None else logger
    if include_values is None:
        include_values = get_settings().log_values

    def applier(transform: _Transform) -> _Transform:
        @wraps(transform)
        def logged(v: VRaw) -> V[Any]:
            start_ns = time.perf_counter_ns()
            try:
                result = transform(v)
            except Exception as exc:
                base_log.warning(
                    "lookup_failed",
                    name=v.name,
                    secret=v.secret,
                    error_class=_error_class(exc),
                    error=str(exc),
                    duration_ms=round(_elapsed_ms(start_ns), 3),
                )
                raise

            fields: dict[str, Any] = {
                "name": result.name,
                "secret": result.secret,
                "duration_ms": round(_elapsed_ms(start_ns), 3),
            }
            if include_values:
                fields["value"] = REDACTED_VALUE if result.secret else repr(result.value)
            base_log.debug("lookup_resolved", **fields)
            return result

        return logged

    return applier


def metrics_applier(metrics: LookupMetrics | None = None) -> Applier:
    """Build an applier that records lookups in ``LookupMetrics``.

    Args:
        metrics: Metrics to record into (default: the shared instance,
            resolved on each call so ``LookupMetrics.reset`` is honored).

    Returns:
        Applier for ``bind``.
    """

    def applier(transform: _Transform) -> _Transform:
        @wraps(transform)
        def measured(v: VRaw) -> V[Any]:
            target = metrics if metrics is not None else LookupMetrics.get_instance()
            start_ns = time.perf_counter_ns()
            try:
                result = transform(v)
            except Exception as exc:
                target.record_failure(v.name, _error_class(exc), _elapsed_ms(start_ns))
                raise
            target.record_lookup(result.name, _elapsed_ms(start_ns), secret=result.secret)
            return result

        return measured

    return applier


def compose_appliers(*appliers: Applier) -> Applier:
    """Combine appliers into one; the first given is the outermost.

    Args:
        *appliers: Appliers to combine.

    Returns:
        Applier wrapping a transform with every given applier.
    """

    def applier(transform: _Transform) -> _Transform:
        wrapped = transform
        for inner in reversed(appliers):
            wrapped = inner(wrapped)
        return wrapped

    return applier
