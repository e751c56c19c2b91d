"""Application feature flags – attaching a FeatureState to entity classes."""
from __future__ import annotations

from typing import Any, overload

from mp_featuring.application.feature_flags.adapter import FeatureFlagAdapter
from mp_featuring.application.feature_flags.registry import FeatureRegistry
from mp_featuring.application.feature_flags.state import FeatureState


class FeatureFlags:
    """Descriptor giving every entity instance its own :class:`FeatureState`.

    The state is created on first access and kept on the instance, so its
    cached overrides live exactly as long as the entity::

        class User(FlaggableMixin):
            features = FeatureFlags(
                FeatureRegistry.declare("beta", colorway=lambda v: v == "dark"),
                adapter,
            )

            def __init__(self, id: int) -> None:
                self.id = id

        await User(1).features.enable("beta")
    """

    def __init__(self, registry: FeatureRegistry, adapter: FeatureFlagAdapter) -> None:
        self.registry = registry
        self.adapter = adapter
        self._attribute = "_feature_state"

    def __set_name__(self, owner: type, name: str) -> None:
        self._attribute = f"_{name}_state"

    @overload
    def __get__(self, instance: None, owner: type) -> "FeatureFlags": ...

    @overload
    def __get__(self, instance: object, owner: type) -> FeatureState: ...

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is None:
            return self
        state = instance.__dict__.get(self._attribute)
        if state is None:
            state = FeatureState(instance, self.registry, self.adapter)
            instance.__dict__[self._attribute] = state
        return state

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError("feature state is managed by the FeatureFlags descriptor")


class FlaggableMixin:
    """Adds ``reload_features()`` and chains ``reload()`` to drop cached flags."""

    def reload_features(self) -> None:
        for attribute in dir(type(self)):
            if isinstance(getattr(type(self), attribute, None), FeatureFlags):
                getattr(self, attribute).reload()

    def reload(self, *args: Any, **kwargs: Any) -> Any:
        self.reload_features()
        parent = getattr(super(), "reload", None)
        if parent is not None:
            return parent(*args, **kwargs)
        return None


__all__ = ["FeatureFlags", "FlaggableMixin"]
