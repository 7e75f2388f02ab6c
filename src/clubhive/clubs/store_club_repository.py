from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp, require_timestamp
from ..storage import keys
from ..storage.store import CollectionStore, Record, parse_records, read_records
from .model import Club, Membership
from .repository import ClubRepository, MembershipRepository


def _club_from_record(r: Record) -> Club:
    return Club(
        id=str(r["id"]),
        name=str(r["name"]),
        description=str(r.get("description") or ""),
        owner_id=str(r["owner_id"]),
        image_url=r.get("image_url") or None,
        created_at=parse_timestamp(r.get("created_at")),
    )


def _club_to_record(club: Club) -> Record:
    return {
        "id": club.id,
        "name": club.name,
        "description": club.description,
        "owner_id": club.owner_id,
        "image_url": club.image_url,
        "created_at": club.created_at.isoformat() if club.created_at else None,
    }


def _membership_from_record(r: Record) -> Membership:
    return Membership(
        id=str(r["id"]),
        club_id=str(r["club_id"]),
        user_id=str(r["user_id"]),
        joined_at=require_timestamp(r.get("joined_at"), "joined_at"),
    )


def _membership_to_record(m: Membership) -> Record:
    return {
        "id": m.id,
        "club_id": m.club_id,
        "user_id": m.user_id,
        "joined_at": m.joined_at.isoformat(),
    }


class StoreClubRepository(ClubRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Club]:
        records = read_records(self._store, keys.CLUBS) or []
        return parse_records(records, _club_from_record, keys.CLUBS)

    def get_by_id(self, club_id: str) -> Optional[Club]:
        return next((c for c in self.list_all() if c.id == club_id), None)

    def list_owned_by(self, owner_id: str) -> Sequence[Club]:
        return [c for c in self.list_all() if c.owner_id == owner_id]

    def add(self, club: Club) -> None:
        records = read_records(self._store, keys.CLUBS) or []
        self._store.set(keys.CLUBS, [*records, _club_to_record(club)])


class StoreMembershipRepository(MembershipRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def _all(self) -> list[Membership]:
        records = read_records(self._store, keys.MEMBERSHIPS) or []
        return parse_records(records, _membership_from_record, keys.MEMBERSHIPS)

    def list_for_user(self, user_id: str) -> Sequence[Membership]:
        return [m for m in self._all() if m.user_id == user_id]

    def get_for_club_and_user(self, *, club_id: str, user_id: str) -> Optional[Membership]:
        return next((m for m in self._all() if m.club_id == club_id and m.user_id == user_id), None)

    def count_for_club(self, club_id: str) -> int:
        return sum(1 for m in self._all() if m.club_id == club_id)

    def add(self, membership: Membership) -> None:
        records = read_records(self._store, keys.MEMBERSHIPS) or []
        self._store.set(keys.MEMBERSHIPS, [*records, _membership_to_record(membership)])
