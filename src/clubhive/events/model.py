from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional


@dataclass(frozen=True)
class Event:
    """Domain entity: a club event people register for.

    ``capacity`` of None means unbounded.
    """

    id: str
    club_id: str
    title: str
    description: str
    date: date
    time: Optional[time]
    location: str
    capacity: Optional[int]
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.time or time.min)

    def is_past(self, now: datetime) -> bool:
        return self.date < now.date()


@dataclass(frozen=True)
class Registration:
    """Join relation between an identity and an event, carrying the entry pass."""

    id: str
    event_id: str
    user_id: str
    registered_at: datetime
    pass_token: str
    attended: bool = False


@dataclass(frozen=True)
class EventDraft:
    """Raw admin form input; EventService.create validates it."""

    club_id: str
    title: str
    date: Any
    location: str
    description: str = ""
    time: Any = None
    capacity: Any = None
    image_url: Optional[str] = None
