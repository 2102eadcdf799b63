"""Unit tests for lookup metrics."""

import pytest

from eevee.errors import LookupErrorClass
from eevee.observability.metrics import LookupMetrics


class TestLookupMetrics:
    """Tests for LookupMetrics class."""

    @pytest.fixture(autouse=True)
    def reset_metrics(self) -> None:
        """Reset metrics singleton before each test."""
        LookupMetrics.reset()

    def test_singleton_pattern(self) -> None:
        """get_instance should return same instance."""
        assert LookupMetrics.get_instance() is LookupMetrics.get_instance()

    def test_reset_creates_new_instance(self) -> None:
        """reset should create a new instance."""
        m1 = LookupMetrics.get_instance()
        LookupMetrics.reset()
        assert LookupMetrics.get_instance() is not m1

    def test_initial_values(self) -> None:
        """Initial metric values should be zero."""
        m = LookupMetrics.get_instance()
        assert m.total_lookups == 0
        assert m.total_failures == 0
        assert m.secret_lookups == 0
        assert m.duration_by_name == {}

    def test_record_lookup(self) -> None:
        m = LookupMetrics.get_instance()
        m.record_lookup("PORT", 0.5, secret=False)
        m.record_lookup("TOKEN", 0.25, secret=True)
        m.record_lookup("PORT", 0.75, secret=False)
        assert m.total_lookups == 3
        assert m.secret_lookups == 1
        assert m.lookups_by_name["PORT"] == 2
        assert m.duration_by_name["PORT"] == 0.75

    def test_record_failure(self) -> None:
        m = LookupMetrics.get_instance()
        m.record_failure("PORT", LookupErrorClass.FORMAT, 0.1)
        m.record_failure("PORT", LookupErrorClass.MISSING, 0.1)
        m.record_failure("PORT", "RuntimeError", 0.1)
        assert m.total_failures == 3
        assert m.total_lookups == 3
        assert m.get_failure_count("PORT") == 3
        assert m.get_failure_count("OTHER") == 0
        assert m.failures_by_name_error[("PORT", "FORMAT")] == 1

    def test_to_dict(self) -> None:
        m = LookupMetrics.get_instance()
        m.record_lookup("A", 1.0, secret=False)
        m.record_failure("B", LookupErrorClass.MISSING, 2.0)
        d = m.to_dict()
        assert d["total_lookups"] == 2
        assert d["total_failures"] == 1
        assert d["lookups_by_name"] == {"A": 1, "B": 1}
        assert d["failures_by_name_error"] == {"B:MISSING": 1}
        assert d["duration_by_name"] == {"A": 1.0, "B": 2.0}
