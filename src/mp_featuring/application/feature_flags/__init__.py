"""Application feature flags – declarations, per-entity state and storage port."""
from mp_featuring.application.feature_flags.definition import FeatureDefinition, feature_key
from mp_featuring.application.feature_flags.registry import FeatureRegistry
from mp_featuring.application.feature_flags.adapter import FeatureFlagAdapter
from mp_featuring.application.feature_flags.transaction import FeatureTransaction
from mp_featuring.application.feature_flags.state import FeatureState, PersistenceStatus
from mp_featuring.application.feature_flags.flaggable import FeatureFlags, FlaggableMixin
from mp_featuring.application.feature_flags.in_memory import InMemoryFeatureFlagAdapter

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
    "feature_key",
]
