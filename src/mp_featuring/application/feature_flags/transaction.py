"""Application feature flags – FeatureTransaction."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_featuring.kernel.errors import TransactionClosedError

if TYPE_CHECKING:
    from mp_featuring.application.feature_flags.state import FeatureState


class FeatureTransaction:
    """Collects flag mutations and writes them with one adapter call.

    Intents are kept as a map, so the last intent for a name wins. Leaving
    the ``async with`` block normally commits; an exception discards every
    intent and nothing is written.

    Usage::

        async with user.features.transaction() as tx:
            tx.enable("beta")
            tx.set("dark_mode", False)
            await tx.persist("colorway", "dark")
            tx.reset("legacy_nav")
    """

    def __init__(self, state: "FeatureState") -> None:
        self._state = state
        self._values: dict[str, bool] = {}
        self._resets: set[str] = set()
        self._closed = False

    @property
    def values(self) -> dict[str, bool]:
        return dict(self._values)

    @property
    def resets(self) -> frozenset[str]:
        return frozenset(self._resets)

    @property
    def closed(self) -> bool:
        return self._closed

    def set(self, feature: Any, value: Any) -> None:
        key = self._key(feature)
        self._values[key] = bool(value)
        self._resets.discard(key)

    def enable(self, feature: Any) -> None:
        self.set(feature, True)

    def disable(self, feature: Any) -> None:
        self.set(feature, False)

    def reset(self, feature: Any) -> None:
        key = self._key(feature)
        self._values.pop(key, None)
        self._resets.add(key)

    async def persist(self, feature: Any, *args: Any) -> None:
        """Record the current effective value, as read from the persisted state."""
        key = self._key(feature)
        self.set(key, await self._state.is_enabled(key, *args))

    async def commit(self) -> None:
        self._ensure_open()
        self._closed = True
        await self._state.commit_transaction(self._values, self._resets)

    def discard(self) -> None:
        self._closed = True
        self._values.clear()
        self._resets.clear()

    async def __aenter__(self) -> "FeatureTransaction":
        self._ensure_open()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is None:
            await self.commit()
        else:
            self.discard()

    def _key(self, feature: Any) -> str:
        self._ensure_open()
        return self._state.registry.lookup(feature).name

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransactionClosedError()


__all__ = ["FeatureTransaction"]
