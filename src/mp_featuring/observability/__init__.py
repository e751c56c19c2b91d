"""Observability – structured logging for the feature flag engine."""
from mp_featuring.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
