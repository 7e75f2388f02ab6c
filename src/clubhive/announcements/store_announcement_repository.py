from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import parse_timestamp
from ..storage import keys
from ..storage.store import CollectionStore, Record, parse_records, read_records
from .model import Announcement
from .repository import AnnouncementRepository


def _announcement_from_record(r: Record) -> Announcement:
    return Announcement(
        id=str(r["id"]),
        club_id=str(r["club_id"]),
        title=str(r["title"]),
        content=str(r.get("content") or ""),
        created_at=parse_timestamp(r.get("created_at")),
    )


class StoreAnnouncementRepository(AnnouncementRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Announcement]:
        records = read_records(self._store, keys.ANNOUNCEMENTS) or []
        return parse_records(records, _announcement_from_record, keys.ANNOUNCEMENTS)

    def list_for_club(self, club_id: str) -> Sequence[Announcement]:
        return [a for a in self.list_all() if a.club_id == club_id]
