from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Identity role used for visibility and access checks."""

    STUDENT = "student"
    ADMIN = "admin"


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
