from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Domain entity: a user who can sign in.

    Note: Plain data object (no storage access).
    """

    id: str
    email: str
    name: str
    role: Role
    department: Optional[str] = None
    year: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
