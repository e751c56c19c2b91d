"""Application feature flags – FeatureFlagAdapter port."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any


class FeatureFlagAdapter(abc.ABC):
    """Port: store the explicit flag overrides of one entity instance.

    ``target`` is the entity itself; implementations derive whatever
    identity they store records under (see
    :class:`~mp_featuring.kernel.types.FlaggableRef`).
    """

    #: Entity attribute holding the identifier records are keyed by.
    id_attribute: str = "id"

    @abc.abstractmethod
    async def fetch(self, target: Any) -> dict[str, bool] | None:
        """Return the persisted overrides, or ``None`` if nothing was ever stored."""

    @abc.abstractmethod
    async def create(self, target: Any, flags: Mapping[str, bool]) -> None:
        """Create the first record for *target*; conflict if one already exists."""

    @abc.abstractmethod
    async def update(self, target: Any, flags: Mapping[str, bool]) -> None:
        """Merge *flags* into the existing record, leaving other keys untouched."""

    @abc.abstractmethod
    async def replace(self, target: Any, flags: Mapping[str, bool]) -> None:
        """Overwrite the existing record with exactly *flags*."""


__all__ = ["FeatureFlagAdapter"]
