"""Unit tests for the recording adapter fake."""

from __future__ import annotations

import asyncio
import dataclasses

import pytest

from mp_featuring.testing.fakes import AdapterCall, RecordingFeatureFlagAdapter


@dataclasses.dataclass(eq=False)
class User:
    id: int


def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


class TestRecordingFeatureFlagAdapter:
    def test_records_every_call(self) -> None:
        user = User(1)
        adapter = RecordingFeatureFlagAdapter()

        async def run() -> None:
            await adapter.fetch(user)
            await adapter.create(user, {"a": True})
            await adapter.update(user, {"b": False})
            await adapter.replace(user, {"c": True})

        _run(run())
        assert adapter.calls == [
            AdapterCall("fetch", user),
            AdapterCall("create", user, {"a": True}),
            AdapterCall("update", user, {"b": False}),
            AdapterCall("replace", user, {"c": True}),
        ]
        assert [c.operation for c in adapter.writes()] == ["create", "update", "replace"]
        assert adapter.stored(user) == {"c": True}

    def test_seed_is_not_recorded(self) -> None:
        user = User(1)
        adapter = RecordingFeatureFlagAdapter().seed(user, {"a": True})
        assert adapter.calls == []
        assert _run(adapter.fetch(user)) == {"a": True}

    def test_fail_next_raises_once(self) -> None:
        user = User(1)
        adapter = RecordingFeatureFlagAdapter().fail_next("create", RuntimeError("boom"))
        with pytest.raises(RuntimeError):
            _run(adapter.create(user, {"a": True}))
        assert adapter.stored(user) is None
        _run(adapter.create(user, {"a": True}))
        assert adapter.stored(user) == {"a": True}

    def test_clear_calls(self) -> None:
        adapter = RecordingFeatureFlagAdapter()
        _run(adapter.fetch(User(1)))
        adapter.clear_calls()
        assert adapter.calls == []
