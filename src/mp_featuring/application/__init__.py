"""Application – feature flag state engine (framework-agnostic)."""

from mp_featuring.application.feature_flags import (
    FeatureDefinition,
    FeatureFlagAdapter,
    FeatureFlags,
    FeatureRegistry,
    FeatureState,
    FeatureTransaction,
    FlaggableMixin,
    InMemoryFeatureFlagAdapter,
    PersistenceStatus,
)

__all__ = [
    "FeatureDefinition",
    "FeatureFlagAdapter",
    "FeatureFlags",
    "FeatureRegistry",
    "FeatureState",
    "FeatureTransaction",
    "FlaggableMixin",
    "InMemoryFeatureFlagAdapter",
    "PersistenceStatus",
]
