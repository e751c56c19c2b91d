"""Application-layer errors – misuse of the state engine API."""

from __future__ import annotations

from mp_featuring.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class TransactionClosedError(ApplicationError):
    """A feature transaction was used after it committed or failed."""

    default_code = "transaction_closed"

    def __init__(self, message: str = "Feature transaction is already closed") -> None:
        super().__init__(message)


__all__ = ["ApplicationError", "TransactionClosedError"]
