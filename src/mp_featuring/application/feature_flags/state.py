"""Application feature flags – FeatureState.

One :class:`FeatureState` belongs to one entity instance. It resolves flag
values from the :class:`FeatureRegistry` and the overrides persisted through
a :class:`FeatureFlagAdapter`, which it caches after the first read.

Persistence status moves through three states::

    UNFETCHED ──first read──▶ ABSENT ──first write (create)──▶ PRESENT
              └─────────────▶ PRESENT
    reload() returns any state to UNFETCHED.

The cache is updated only after a successful adapter call, and always to
exactly what was written; it is never re-fetched implicitly.
"""
from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any, Final

from mp_featuring.application.feature_flags.adapter import FeatureFlagAdapter
from mp_featuring.application.feature_flags.definition import feature_key
from mp_featuring.application.feature_flags.registry import FeatureRegistry
from mp_featuring.application.feature_flags.transaction import FeatureTransaction
from mp_featuring.observability.logging import get_logger


class PersistenceStatus(str, enum.Enum):
    UNFETCHED = "unfetched"
    ABSENT = "absent"
    PRESENT = "present"


class _Sentinel:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


_UNFETCHED: Final = _Sentinel("<unfetched>")
_OMITTED: Final = _Sentinel("<omitted>")


class FeatureState:
    """Flag values and persisted overrides of a single entity.

    Not safe for concurrent use: callers sharing an entity across tasks or
    threads must serialise access themselves.

    Usage::

        state = FeatureState(user, registry, adapter)
        await state.enable("beta")
        await state.is_enabled("beta")            # True
        await state.is_enabled("colorway", "dark")

        async with state.transaction() as tx:
            tx.enable("beta")
            tx.reset("dark_mode")
    """

    def __init__(self, target: Any, registry: FeatureRegistry, adapter: FeatureFlagAdapter) -> None:
        self._target = target
        self._registry = registry
        self._adapter = adapter
        self._persisted: Any = _UNFETCHED
        self._log = get_logger(
            __name__,
            flaggable_type=type(target).__name__,
            flaggable_id=getattr(target, adapter.id_attribute, None),
        )

    @property
    def target(self) -> Any:
        return self._target

    @property
    def registry(self) -> FeatureRegistry:
        return self._registry

    @property
    def adapter(self) -> FeatureFlagAdapter:
        return self._adapter

    @property
    def status(self) -> PersistenceStatus:
        if self._persisted is _UNFETCHED:
            return PersistenceStatus.UNFETCHED
        if self._persisted is None:
            return PersistenceStatus.ABSENT
        return PersistenceStatus.PRESENT

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def is_enabled(self, feature: Any, *args: Any) -> bool:
        """Return the effective value of *feature*.

        A persisted override replaces a fixed default. For rule-backed flags
        a persisted ``False`` wins outright while a persisted ``True`` still
        requires the rule to pass for *args*.
        """
        definition = self._registry.lookup(feature)
        flags = await self._persisted_flags()
        if flags is not None and definition.name in flags:
            persisted = flags[definition.name]
            if definition.is_rule:
                return persisted and definition.evaluate(*args)
            return persisted
        return definition.evaluate(*args)

    async def is_persisted(self, feature: Any = None, value: Any = _OMITTED) -> bool:
        """Without arguments: whether anything was ever persisted for the entity.

        With *feature*: whether it has an override, optionally equal to *value*.
        """
        flags = await self._persisted_flags()
        if feature is None:
            return flags is not None
        if flags is None:
            return False
        key = feature_key(feature)
        if key not in flags:
            return False
        return value is _OMITTED or flags[key] == value

    async def snapshot(self) -> dict[str, bool] | None:
        """Return a copy of the persisted overrides (``None`` if never persisted)."""
        flags = await self._persisted_flags()
        return dict(flags) if flags is not None else None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def set(self, feature: Any, value: Any) -> None:
        await self._create_or_update({self._declared(feature): bool(value)})

    async def enable(self, feature: Any) -> None:
        await self.set(feature, True)

    async def disable(self, feature: Any) -> None:
        await self.set(feature, False)

    async def persist(self, feature: Any, *args: Any) -> None:
        """Store the current effective value of *feature* as an explicit override."""
        key = self._declared(feature)
        await self._create_or_update({key: await self.is_enabled(key, *args)})

    async def reset(self, feature: Any) -> None:
        """Drop the override for *feature* so it falls back to its declaration.

        *feature* must be declared. Stored keys whose declaration was removed
        are dropped with :meth:`reset_undeclared`.
        """
        key = self._declared(feature)
        flags = await self._persisted_flags()
        if flags is None or key not in flags:
            return
        remaining = {name: value for name, value in flags.items() if name != key}
        await self._write("replace", remaining)

    async def reset_undeclared(self) -> list[str]:
        """Drop every stored override the registry no longer declares.

        Returns the dropped names; nothing is written when there are none.
        """
        flags = await self._persisted_flags()
        if flags is None:
            return []
        stale = sorted(name for name in flags if name not in self._registry)
        if stale:
            await self._write("replace", {name: value for name, value in flags.items() if name in self._registry})
        return stale

    def reload(self) -> None:
        """Forget the cached overrides; the next read fetches them again."""
        self._persisted = _UNFETCHED

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def transaction(self) -> FeatureTransaction:
        """Open a transaction that commits all its intents as one write."""
        return FeatureTransaction(self)

    async def commit_transaction(
        self,
        values: Mapping[Any, Any],
        resets: Iterable[Any] = (),
    ) -> None:
        """Apply *values* and drop *resets* with a single adapter call.

        An entity that was never persisted gets a ``create`` with *values*.
        Otherwise the current overrides are merged with *values* (which win),
        *resets* are removed, and the result is written with ``replace``.
        """
        changes = {self._declared(name): bool(value) for name, value in values.items()}
        removed = {self._declared(name) for name in resets} - changes.keys()
        if not changes and not removed:
            return

        flags = await self._persisted_flags()
        if flags is None:
            if changes:
                await self._write("create", changes)
            return

        merged = {name: value for name, value in flags.items() if name not in removed}
        merged.update(changes)
        await self._write("replace", merged)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _declared(self, feature: Any) -> str:
        return self._registry.lookup(feature).name

    async def _persisted_flags(self) -> dict[str, bool] | None:
        if self._persisted is _UNFETCHED:
            fetched = await self._adapter.fetch(self._target)
            if fetched is None:
                self._persisted = None
            else:
                self._persisted = {feature_key(name): bool(value) for name, value in fetched.items()}
            self._log.debug("feature_flags.fetched", status=self.status.value)
        return self._persisted  # type: ignore[no-any-return]

    async def _create_or_update(self, flags: dict[str, bool]) -> None:
        if await self.is_persisted():
            await self._write("update", flags)
        else:
            await self._write("create", flags)

    async def _write(self, operation: str, flags: dict[str, bool]) -> None:
        try:
            await getattr(self._adapter, operation)(self._target, dict(flags))
        except Exception as exc:
            self._log.warning(
                "feature_flags.write_failed",
                operation=operation,
                features=sorted(flags),
                error=repr(exc),
            )
            raise

        if operation == "update":
            self._persisted.update(flags)
        else:
            self._persisted = dict(flags)
        self._log.info(f"feature_flags.{operation}d", features=sorted(flags))

    def __repr__(self) -> str:
        return f"FeatureState({type(self._target).__name__}, status={self.status.value!r})"


__all__ = ["FeatureState", "PersistenceStatus"]
