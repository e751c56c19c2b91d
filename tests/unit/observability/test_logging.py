"""Unit tests for observability logging — structlog wiring and engine events."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from mp_featuring.application.feature_flags import FeatureRegistry, FeatureState
from mp_featuring.config import FeatureFlagSettings
from mp_featuring.observability.logging import JsonLoggerFactory, get_logger
from mp_featuring.testing import RecordingFeatureFlagAdapter


@dataclasses.dataclass(eq=False)
class User:
    id: int


REGISTRY = FeatureRegistry.declare("beta", "gamma")


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# get_logger / JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="flags").info("hello", extra=1)
        assert logs == [{"event": "hello", "component": "flags", "extra": 1, "log_level": "info"}]


class TestJsonLoggerFactory:
    def test_configures_root_logger(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_accepts_level_name(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_rejects_unknown_level(self, restore_logging: None) -> None:
        with pytest.raises(ValueError):
            JsonLoggerFactory.configure("loud")

    def test_configure_from_settings(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure_from(FeatureFlagSettings(log_level="error"))
        assert logging.getLogger().level == logging.ERROR


# ---------------------------------------------------------------------------
# FeatureState events
# ---------------------------------------------------------------------------


class TestFeatureStateEvents:
    def test_logs_fetch_and_create(self) -> None:
        with capture_logs() as logs:
            state = FeatureState(User(1), REGISTRY, RecordingFeatureFlagAdapter())
            _run(state.enable("beta"))

        events = [entry["event"] for entry in logs]
        assert events == ["feature_flags.fetched", "feature_flags.created"]
        created = logs[1]
        assert created["features"] == ["beta"]
        assert created["flaggable_type"] == "User"
        assert created["flaggable_id"] == 1
        assert created["log_level"] == "info"

    def test_logs_update_and_replace(self) -> None:
        user = User(2)
        adapter = RecordingFeatureFlagAdapter().seed(user, {"gamma": True})
        with capture_logs() as logs:
            state = FeatureState(user, REGISTRY, adapter)

            async def run() -> None:
                await state.enable("beta")
                await state.reset("gamma")

            _run(run())

        events = [entry["event"] for entry in logs]
        assert events == ["feature_flags.fetched", "feature_flags.updated", "feature_flags.replaced"]

    def test_logs_write_failure(self) -> None:
        adapter = RecordingFeatureFlagAdapter().fail_next("create", RuntimeError("down"))
        with capture_logs() as logs:
            state = FeatureState(User(3), REGISTRY, adapter)
            with pytest.raises(RuntimeError):
                _run(state.enable("beta"))

        failure = logs[-1]
        assert failure["event"] == "feature_flags.write_failed"
        assert failure["log_level"] == "warning"
        assert failure["operation"] == "create"
        assert "down" in failure["error"]

    def test_binds_adapter_id_attribute(self) -> None:
        @dataclasses.dataclass
        class Account:
            account_no: str

        adapter = RecordingFeatureFlagAdapter(id_attribute="account_no")
        with capture_logs() as logs:
            state = FeatureState(Account("A-9"), REGISTRY, adapter)
            _run(state.enable("beta"))

        assert [entry["flaggable_id"] for entry in logs] == ["A-9", "A-9"]
        assert logs[0]["flaggable_type"] == "Account"
