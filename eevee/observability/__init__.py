"""Observability module for logging and metrics."""

from eevee.observability.appliers import (
    compose_appliers,
    logging_applier,
    metrics_applier,
)
from eevee.observability.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
)
from eevee.observability.metrics import LookupMetrics


__all__ = [
    "LookupMetrics",
    "compose_appliers",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "logging_applier",
    "metrics_applier",
]
