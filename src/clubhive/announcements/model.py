from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Announcement:
    """Read-only notice posted by a club."""

    id: str
    club_id: str
    title: str
    content: str
    created_at: Optional[datetime] = None
