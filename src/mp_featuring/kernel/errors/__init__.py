"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── UnknownFeatureError
    │   ├── DuplicateFeatureError
    │   ├── ValidationError
    │   └── ConflictError
    │       └── FeatureFlagConflictError
    └── ApplicationError         (application.py)
        └── TransactionClosedError
"""

from mp_featuring.kernel.errors.application import ApplicationError, TransactionClosedError
from mp_featuring.kernel.errors.base import BaseError
from mp_featuring.kernel.errors.domain import (
    ConflictError,
    DomainError,
    DuplicateFeatureError,
    FeatureFlagConflictError,
    UnknownFeatureError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "DuplicateFeatureError",
    "FeatureFlagConflictError",
    "TransactionClosedError",
    "UnknownFeatureError",
    "ValidationError",
]
