"""Application feature flags – InMemoryFeatureFlagAdapter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_featuring.application.feature_flags.adapter import FeatureFlagAdapter
from mp_featuring.kernel.errors import FeatureFlagConflictError
from mp_featuring.kernel.types import FlaggableRef


class InMemoryFeatureFlagAdapter(FeatureFlagAdapter):
    """Dict-backed adapter keyed by :class:`FlaggableRef`.

    Useful for tests and for processes that never need flags to survive a
    restart. ``update``/``replace`` on an entity without a record create one.
    """

    def __init__(self, id_attribute: str = "id") -> None:
        self.id_attribute = id_attribute
        self._records: dict[FlaggableRef, dict[str, bool]] = {}

    def _ref(self, target: Any) -> FlaggableRef:
        return FlaggableRef.of(target, self.id_attribute)

    async def fetch(self, target: Any) -> dict[str, bool] | None:
        record = self._records.get(self._ref(target))
        return dict(record) if record is not None else None

    async def create(self, target: Any, flags: Mapping[str, bool]) -> None:
        ref = self._ref(target)
        if ref in self._records:
            raise FeatureFlagConflictError(ref)
        self._records[ref] = dict(flags)

    async def update(self, target: Any, flags: Mapping[str, bool]) -> None:
        self._records.setdefault(self._ref(target), {}).update(flags)

    async def replace(self, target: Any, flags: Mapping[str, bool]) -> None:
        self._records[self._ref(target)] = dict(flags)

    def records(self) -> dict[FlaggableRef, dict[str, bool]]:
        return {ref: dict(flags) for ref, flags in self._records.items()}


__all__ = ["InMemoryFeatureFlagAdapter"]
