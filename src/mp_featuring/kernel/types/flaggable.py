"""Storage identity of an entity that carries feature flags."""

from __future__ import annotations

import dataclasses
from typing import Any

from mp_featuring.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class FlaggableRef:
    """Identifies the persisted flag record of one entity instance.

    ``flaggable_type`` is the entity class name and ``flaggable_id`` the
    string form of its identifier, so records for different entity types
    never collide even when their ids do.

    Examples::

        ref = FlaggableRef.of(user)                   # User / user.id
        ref = FlaggableRef.of(account, "account_no")  # custom id attribute
    """

    flaggable_type: str
    flaggable_id: str

    def __post_init__(self) -> None:
        if not self.flaggable_type:
            raise ValidationError("FlaggableRef.flaggable_type must not be empty")
        if not self.flaggable_id:
            raise ValidationError("FlaggableRef.flaggable_id must not be empty")

    @classmethod
    def of(cls, target: Any, id_attribute: str = "id") -> "FlaggableRef":
        """Derive the reference for *target* from its class and id attribute."""
        if isinstance(target, FlaggableRef):
            return target
        identifier = getattr(target, id_attribute, None)
        if identifier is None:
            raise ValidationError(
                f"{type(target).__name__}.{id_attribute} is not set; "
                "an entity must have an identifier before its flags can be stored"
            )
        return cls(type(target).__name__, str(identifier))

    def __str__(self) -> str:
        return f"{self.flaggable_type}#{self.flaggable_id}"


__all__ = ["FlaggableRef"]
