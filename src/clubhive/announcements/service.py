from __future__ import annotations

from typing import Optional, Sequence

from .model import Announcement
from .repository import AnnouncementRepository


class AnnouncementService:
    def __init__(self, announcements: AnnouncementRepository):
        self._announcements = announcements

    def list_for(self, club_id: Optional[str] = None) -> Sequence[Announcement]:
        if club_id:
            return self._announcements.list_for_club(club_id)
        return self._announcements.list_all()
