from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Club:
    """Domain entity: a student club owned by an admin identity."""

    id: str
    name: str
    description: str
    owner_id: str
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Membership:
    """Join relation between an identity and a club."""

    id: str
    club_id: str
    user_id: str
    joined_at: datetime


@dataclass(frozen=True)
class ClubDraft:
    """Input for creating a club (admin form)."""

    name: str
    description: str = ""
    image_url: Optional[str] = None
