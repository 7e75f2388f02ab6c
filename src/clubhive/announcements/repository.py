from __future__ import annotations

from typing import Protocol, Sequence

from .model import Announcement


class AnnouncementRepository(Protocol):
    def list_all(self) -> Sequence[Announcement]:
        raise NotImplementedError

    def list_for_club(self, club_id: str) -> Sequence[Announcement]:
        raise NotImplementedError
