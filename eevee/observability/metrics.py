"""Metrics collection for lookups."""

from collections import Counter
from dataclasses import dataclass, field
from threading import Lock

from eevee.errors import LookupErrorClass


_metrics_instance: "LookupMetrics | None" = None
_metrics_lock: Lock = Lock()


@dataclass
class LookupMetrics:
    """Thread-safe metrics for lookups.

    Tracks lookups and failures per key. Use get_instance() for
    singleton access.
    """

    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    lookups_by_name: Counter[str] = field(default_factory=Counter)

    # Per-key failure counts by error class
    failures_by_name_error: Counter[tuple[str, str]] = field(default_factory=Counter)

    # Last transform duration per key, in milliseconds
    duration_by_name: dict[str, float] = field(default_factory=dict)

    total_lookups: int = 0
    total_failures: int = 0
    secret_lookups: int = 0

    @classmethod
    def get_instance(cls) -> "LookupMetrics":
        """Get the singleton instance (thread-safe).

        Returns:
            The shared LookupMetrics instance.
        """
        global _metrics_instance  # noqa: PLW0603
        if _metrics_instance is None:
            with _metrics_lock:
                if _metrics_instance is None:
                    _metrics_instance = cls()
        return _metrics_instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        global _metrics_instance  # noqa: PLW0603
        with _metrics_lock:
            _metrics_instance = None

    def record_lookup(self, name: str, duration_ms: float, *, secret: bool) -> None:
        """Record a completed lookup.

        Args:
            name: Key that was looked up.
            duration_ms: Time spent in the transform.
            secret: Whether the resulting value is secret.
        """
        with self._lock:
            self.lookups_by_name[name] += 1
            self.duration_by_name[name] = duration_ms
            self.total_lookups += 1
            if secret:
                self.secret_lookups += 1

    def record_failure(
        self, name: str, error_class: LookupErrorClass | str, duration_ms: float
    ) -> None:
        """Record a failed lookup.

        Failed lookups count towards the lookup totals too.

        Args:
            name: Key that was looked up.
            error_class: Classification of the failure, or the exception
                type name for errors outside the lookup taxonomy.
            duration_ms: Time spent before the failure.
        """
        if isinstance(error_class, LookupErrorClass):
            error_class = error_class.value
        with self._lock:
            self.lookups_by_name[name] += 1
            self.failures_by_name_error[(name, error_class)] += 1
            self.duration_by_name[name] = duration_ms
            self.total_lookups += 1
            self.total_failures += 1

    def get_failure_count(self, name: str) -> int:
        """Get total failures for a key across error classes."""
        with self._lock:
            return sum(
                count
                for (key, _), count in self.failures_by_name_error.items()
                if key == name
            )

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        with self._lock:
            return {
                "total_lookups": self.total_lookups,
                "total_failures": self.total_failures,
                "secret_lookups": self.secret_lookups,
                "lookups_by_name": dict(self.lookups_by_name),
                "failures_by_name_error": {
                    f"{name}:{error_class}": count
                    for (name, error_class), count in self.failures_by_name_error.items()
                },
                "duration_by_name": dict(self.duration_by_name),
            }
