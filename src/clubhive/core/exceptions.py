from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field`` names the offending draft field when there is one, so the
    presentation layer can attach the message to the right input.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AuthorizationError(DomainError):
    """Raised when an identity lacks permission for an action."""


class StoreError(Exception):
    """Raised when a storage backend fails in a way that is not just bad data."""
