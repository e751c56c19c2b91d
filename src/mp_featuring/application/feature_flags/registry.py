"""Application feature flags – FeatureRegistry."""
from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Any

from mp_featuring.application.feature_flags.definition import FeatureDefinition, feature_key
from mp_featuring.kernel.errors import DuplicateFeatureError, UnknownFeatureError


class FeatureRegistry:
    """Immutable name → :class:`FeatureDefinition` mapping for one entity type.

    Built once when the entity type is defined and shared by every
    :class:`~mp_featuring.application.feature_flags.state.FeatureState` of
    that type.

    Usage::

        registry = FeatureRegistry.declare(
            "beta",                              # defaults to False
            dark_mode=True,
            colorway=lambda value: value == "dark",
        )
        registry.lookup("beta").evaluate()       # False
    """

    def __init__(self, definitions: Iterable[FeatureDefinition] = ()) -> None:
        table: dict[str, FeatureDefinition] = {}
        for definition in definitions:
            if definition.name in table:
                raise DuplicateFeatureError(definition.name)
            table[definition.name] = definition
        self._definitions = MappingProxyType(table)

    @classmethod
    def declare(cls, *names: str | enum.Enum, **defaults: Any) -> "FeatureRegistry":
        """Declare flags by name; callables become rules, other values fixed defaults."""
        definitions = [FeatureDefinition.fixed(name) for name in names]
        for name, value in defaults.items():
            if callable(value):
                definitions.append(FeatureDefinition.rule(name, value))
            else:
                definitions.append(FeatureDefinition.fixed(name, value))
        return cls(definitions)

    def lookup(self, name: str | enum.Enum) -> FeatureDefinition:
        key = feature_key(name)
        try:
            return self._definitions[key]
        except KeyError:
            raise UnknownFeatureError(key) from None

    def names(self) -> frozenset[str]:
        return frozenset(self._definitions)

    def merge(self, other: "FeatureRegistry") -> "FeatureRegistry":
        """Return a registry holding the definitions of both registries."""
        return FeatureRegistry([*self, *other])

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, enum.Enum)):
            return False
        return feature_key(name) in self._definitions

    def __iter__(self) -> Iterator[FeatureDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"FeatureRegistry({sorted(self._definitions)!r})"


__all__ = ["FeatureRegistry"]
