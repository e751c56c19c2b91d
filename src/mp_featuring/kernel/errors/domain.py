"""Domain errors – flag declaration and lookup failures."""

from __future__ import annotations

from typing import Any

from mp_featuring.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a feature flag rule is violated."""

    default_code = "domain_error"


class UnknownFeatureError(DomainError):
    """A flag name was used that was never declared for the entity type.

    This is a programmer error: callers should not catch and retry it.
    """

    default_code = "unknown_feature"

    def __init__(self, feature: str, **kwargs: Any) -> None:
        super().__init__(f"Feature '{feature}' is not declared", detail={"feature": feature}, **kwargs)
        self.feature = feature


class DuplicateFeatureError(DomainError):
    """The same flag name was declared twice."""

    default_code = "duplicate_feature"

    def __init__(self, feature: str, **kwargs: Any) -> None:
        super().__init__(f"Feature '{feature}' is already declared", detail={"feature": feature}, **kwargs)
        self.feature = feature


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class FeatureFlagConflictError(ConflictError):
    """A flag record already exists for an entity that looked unpersisted.

    Raised by adapters when ``create`` races another writer. Reload the
    feature state and retry the higher-level operation.
    """

    default_code = "feature_flag_conflict"

    def __init__(self, flaggable: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Feature flags for {flaggable} already exist",
            detail={"flaggable": str(flaggable)},
            **kwargs,
        )
        self.flaggable = flaggable


__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateFeatureError",
    "FeatureFlagConflictError",
    "UnknownFeatureError",
    "ValidationError",
]
