from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import (
    format_clock_time,
    parse_clock_time,
    parse_iso_date,
    parse_timestamp,
    require_timestamp,
)
from ..storage import keys
from ..storage.store import CollectionStore, Record, parse_records, read_records
from .model import Event, Registration
from .repository import EventRepository, RegistrationRepository


def _event_from_record(r: Record) -> Event:
    capacity = r.get("capacity")
    clock = r.get("time")
    return Event(
        id=str(r["id"]),
        club_id=str(r["club_id"]),
        title=str(r["title"]),
        description=str(r.get("description") or ""),
        date=parse_iso_date(str(r["date"])[:10]),
        time=parse_clock_time(str(clock)) if clock else None,
        location=str(r.get("location") or ""),
        capacity=int(capacity) if capacity not in (None, "") else None,
        image_url=r.get("image_url") or None,
        created_at=parse_timestamp(r.get("created_at")),
    )


def _event_to_record(e: Event) -> Record:
    return {
        "id": e.id,
        "club_id": e.club_id,
        "title": e.title,
        "description": e.description,
        "date": e.date.isoformat(),
        "time": format_clock_time(e.time),
        "location": e.location,
        "capacity": e.capacity,
        "image_url": e.image_url,
        "created_at": e.created_at.isoformat() if e.created_at else None,
    }


def _registration_from_record(r: Record) -> Registration:
    return Registration(
        id=str(r["id"]),
        event_id=str(r["event_id"]),
        user_id=str(r["user_id"]),
        registered_at=require_timestamp(r.get("registered_at"), "registered_at"),
        pass_token=str(r["pass_token"]),
        attended=bool(r.get("attended", False)),
    )


def _registration_to_record(reg: Registration) -> Record:
    return {
        "id": reg.id,
        "event_id": reg.event_id,
        "user_id": reg.user_id,
        "registered_at": reg.registered_at.isoformat(),
        "attended": reg.attended,
        "pass_token": reg.pass_token,
    }


class StoreEventRepository(EventRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Event]:
        records = read_records(self._store, keys.EVENTS) or []
        return parse_records(records, _event_from_record, keys.EVENTS)

    def list_for_club(self, club_id: str) -> Sequence[Event]:
        return [e for e in self.list_all() if e.club_id == club_id]

    def get_by_id(self, event_id: str) -> Optional[Event]:
        return next((e for e in self.list_all() if e.id == event_id), None)

    def add(self, event: Event) -> None:
        records = read_records(self._store, keys.EVENTS) or []
        self._store.set(keys.EVENTS, [*records, _event_to_record(event)])


class StoreRegistrationRepository(RegistrationRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def _all(self) -> list[Registration]:
        records = read_records(self._store, keys.REGISTRATIONS) or []
        return parse_records(records, _registration_from_record, keys.REGISTRATIONS)

    def list_for_event(self, event_id: str) -> Sequence[Registration]:
        return [r for r in self._all() if r.event_id == event_id]

    def list_for_user(self, user_id: str) -> Sequence[Registration]:
        return [r for r in self._all() if r.user_id == user_id]

    def get_for_event_and_user(self, *, event_id: str, user_id: str) -> Optional[Registration]:
        return next((r for r in self._all() if r.event_id == event_id and r.user_id == user_id), None)

    def get_by_pass_token(self, pass_token: str) -> Optional[Registration]:
        return next((r for r in self._all() if r.pass_token == pass_token), None)

    def add(self, registration: Registration) -> None:
        records = read_records(self._store, keys.REGISTRATIONS) or []
        self._store.set(keys.REGISTRATIONS, [*records, _registration_to_record(registration)])

    def set_attended(self, registration_id: str, *, attended: bool) -> bool:
        records = read_records(self._store, keys.REGISTRATIONS) or []
        found = False
        for record in records:
            if record.get("id") == registration_id:
                record["attended"] = bool(attended)
                found = True
        if found:
            self._store.set(keys.REGISTRATIONS, records)
        return found
