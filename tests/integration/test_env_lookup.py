"""Integration tests reading typed settings from the process environment."""

import os
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import partial

import pytest
from structlog.testing import capture_logs

from eevee import (
    EeveeError,
    Pipeline,
    as_bool,
    as_duration,
    as_int,
    as_iso_date,
    bind,
    must,
    pipe,
    secret,
)
from eevee.error_hints import format_lookup_error
from eevee.observability import LookupMetrics, compose_appliers, logging_applier, metrics_applier


@dataclass(frozen=True)
class ServiceConfig:
    """Example application config assembled from lookups."""

    database_url: str
    api_token: str
    port: int
    debug: bool
    request_timeout_ms: int
    launch_at: datetime


def load_service_config() -> ServiceConfig:
    env = bind(os.environ, compose_appliers(logging_applier(include_values=True), metrics_applier()))
    return ServiceConfig(
        database_url=env("SVC_DATABASE_URL", must),
        api_token=env("SVC_API_TOKEN", pipe(must, secret)),
        port=env("SVC_PORT", partial(as_int, default=8080)),
        debug=env("SVC_DEBUG", as_bool),
        request_timeout_ms=env("SVC_TIMEOUT", partial(as_duration, default=30_000)),
        launch_at=env("SVC_LAUNCH_AT", Pipeline().then(must).then(as_iso_date)),
    )


@pytest.fixture
def service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SVC_DATABASE_URL", "postgres://db/app")
    monkeypatch.setenv("SVC_API_TOKEN", "tok-123456")
    monkeypatch.setenv("SVC_DEBUG", "On")
    monkeypatch.setenv("SVC_TIMEOUT", "1m30s")
    monkeypatch.setenv("SVC_LAUNCH_AT", "2025-03-01T09:00:00.000Z")
    monkeypatch.delenv("SVC_PORT", raising=False)


@pytest.fixture(autouse=True)
def reset_metrics() -> None:
    LookupMetrics.reset()


class TestServiceConfig:
    """Tests assembling a config object from the environment."""

    @pytest.mark.integration
    def test_loads_typed_config(self, service_env: None) -> None:
        with capture_logs() as logs:
            config = load_service_config()

        assert config == ServiceConfig(
            database_url="postgres://db/app",
            api_token="tok-123456",
            port=8080,
            debug=True,
            request_timeout_ms=90_000,
            launch_at=datetime(2025, 3, 1, 9, tzinfo=UTC),
        )
        assert [e["name"] for e in logs] == [
            "SVC_DATABASE_URL",
            "SVC_API_TOKEN",
            "SVC_PORT",
            "SVC_DEBUG",
            "SVC_TIMEOUT",
            "SVC_LAUNCH_AT",
        ]
        assert "tok-123456" not in repr(logs)
        assert LookupMetrics.get_instance().total_lookups == 6
        assert LookupMetrics.get_instance().secret_lookups == 1

    @pytest.mark.integration
    def test_malformed_value_names_the_key(
        self, service_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SVC_TIMEOUT", "ninety seconds")

        with capture_logs() as logs, pytest.raises(EeveeError) as exc_info:
            load_service_config()

        assert str(exc_info.value) == "SVC_TIMEOUT is not a valid duration"
        assert "Hint:" in format_lookup_error(exc_info.value)
        assert logs[-1]["event"] == "lookup_failed"
        assert LookupMetrics.get_instance().get_failure_count("SVC_TIMEOUT") == 1

    @pytest.mark.integration
    def test_missing_required_value(
        self, service_env: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("SVC_DATABASE_URL")

        with capture_logs(), pytest.raises(EeveeError, match="SVC_DATABASE_URL is not defined"):
            load_service_config()

    @pytest.mark.integration
    def test_raw_lookup_returns_string(self, service_env: None) -> None:
        env = bind(os.environ)
        assert env("SVC_DEBUG") == "On"
        assert env("SVC_PORT") is None
