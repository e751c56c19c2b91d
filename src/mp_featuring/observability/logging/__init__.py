"""Observability – structlog configuration and logger helper."""
from mp_featuring.observability.logging.factory import JsonLoggerFactory
from mp_featuring.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
