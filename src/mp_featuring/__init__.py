"""
mp_featuring – per-entity feature flags with persisted overrides.

Import path convention::

    from mp_featuring.application.feature_flags import FeatureRegistry, FeatureState
    from mp_featuring.adapters.sqlalchemy import SqlAlchemyFeatureFlagAdapter
    from mp_featuring.kernel.errors import UnknownFeatureError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
