"""Field-name adapters between the canonical schema and foreign record shapes.

Canonical records use snake_case names (``club_id``, ``owner_id``,
``pass_token``). Two foreign shapes exist in the wild: the browser build
(camelCase, ``venue`` for the location, ``qrCode`` for the pass token, the
identities stored under ``users``) and the hosted-backend rows (snake_case
but ``admin_id`` for the owner and one combined ``date`` such as
``2026-01-15T14:00``). ``MappedStore`` translates at the storage boundary so
nothing above it ever sees a foreign name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import keys
from .store import CollectionStore, Document, Record


@dataclass(frozen=True)
class RecordMapping:
    # canonical collection name -> foreign collection name
    collection_names: dict[str, str] = field(default_factory=dict)
    # canonical collection name -> {canonical field: foreign field}
    fields: dict[str, dict[str, str]] = field(default_factory=dict)
    # events carry one "date" holding both date and time
    combined_event_datetime: bool = False

    def foreign_name(self, name: str) -> str:
        return self.collection_names.get(name, name)

    def _field_map(self, name: str) -> dict[str, str]:
        # The singleton holds an identity record.
        if name == keys.CURRENT_IDENTITY:
            name = keys.IDENTITIES
        return self.fields.get(name, {})

    def to_canonical(self, name: str, record: Record) -> Record:
        inverse = {foreign: canonical for canonical, foreign in self._field_map(name).items()}
        out = {inverse.get(k, k): v for k, v in record.items()}
        if name == keys.EVENTS and self.combined_event_datetime:
            raw = out.get("date")
            if isinstance(raw, str) and "T" in raw and not out.get("time"):
                day, _, clock = raw.partition("T")
                out["date"] = day
                out["time"] = clock[:5] or None
        return out

    def to_foreign(self, name: str, record: Record) -> Record:
        record = dict(record)
        if name == keys.EVENTS and self.combined_event_datetime:
            clock = record.pop("time", None)
            if clock and record.get("date"):
                record["date"] = f"{record['date']}T{clock}"
        forward = self._field_map(name)
        return {forward.get(k, k): v for k, v in record.items()}


LEGACY_BROWSER_MAPPING = RecordMapping(
    collection_names={keys.IDENTITIES: "users", keys.CURRENT_IDENTITY: "current_user"},
    fields={
        keys.IDENTITIES: {"created_at": "createdAt"},
        keys.CLUBS: {"owner_id": "adminId", "image_url": "imageUrl", "created_at": "createdAt"},
        keys.MEMBERSHIPS: {"club_id": "clubId", "user_id": "userId", "joined_at": "joinedAt"},
        keys.EVENTS: {
            "club_id": "clubId",
            "location": "venue",
            "image_url": "imageUrl",
            "created_at": "createdAt",
        },
        keys.REGISTRATIONS: {
            "event_id": "eventId",
            "user_id": "userId",
            "registered_at": "registeredAt",
            "pass_token": "qrCode",
        },
        keys.ANNOUNCEMENTS: {"club_id": "clubId", "created_at": "createdAt"},
    },
)

HOSTED_ROWS_MAPPING = RecordMapping(
    fields={
        keys.CLUBS: {"owner_id": "admin_id"},
        keys.REGISTRATIONS: {"pass_token": "qr_code"},
    },
    combined_event_datetime=True,
)

MAPPINGS = {
    "legacy": LEGACY_BROWSER_MAPPING,
    "hosted": HOSTED_ROWS_MAPPING,
}


class MappedStore(CollectionStore):
    def __init__(self, inner: CollectionStore, mapping: RecordMapping):
        self._inner = inner
        self._mapping = mapping

    def get(self, name: str) -> Optional[Document]:
        document = self._inner.get(self._mapping.foreign_name(name))
        if isinstance(document, list):
            return [self._mapping.to_canonical(name, r) if isinstance(r, dict) else r for r in document]
        if isinstance(document, dict):
            return self._mapping.to_canonical(name, document)
        return document

    def set(self, name: str, document: Document) -> None:
        if isinstance(document, list):
            foreign: Document = [self._mapping.to_foreign(name, r) for r in document]
        else:
            foreign = self._mapping.to_foreign(name, document)
        self._inner.set(self._mapping.foreign_name(name), foreign)

    def remove(self, name: str) -> None:
        self._inner.remove(self._mapping.foreign_name(name))
