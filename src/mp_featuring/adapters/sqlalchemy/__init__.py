"""SQLAlchemy adapter – JSON flag table, session factory, FeatureFlagAdapter."""
from mp_featuring.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_featuring.adapters.sqlalchemy.table import create_table, feature_flags_table
from mp_featuring.adapters.sqlalchemy.feature_flags import SqlAlchemyFeatureFlagAdapter

__all__ = [
    "SqlAlchemyFeatureFlagAdapter",
    "SqlAlchemySessionFactory",
    "create_table",
    "feature_flags_table",
]
