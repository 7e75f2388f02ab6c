from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..core.enums import Role
from ..storage import keys
from ..storage.store import CollectionStore, Record, parse_records, read_records
from .model import Identity
from .repository import IdentityRepository


def identity_from_record(r: Record) -> Identity:
    year = r.get("year")
    return Identity(
        id=str(r["id"]),
        email=str(r["email"]),
        name=str(r.get("name") or r["email"]),
        role=Role(r["role"]),
        department=r.get("department") or None,
        year=int(year) if year not in (None, "") else None,
        created_at=parse_timestamp(r.get("created_at")),
    )


def identity_to_record(identity: Identity) -> Record:
    return {
        "id": identity.id,
        "email": identity.email,
        "name": identity.name,
        "role": identity.role.value,
        "department": identity.department,
        "year": identity.year,
        "created_at": identity.created_at.isoformat() if identity.created_at else None,
    }


class StoreIdentityRepository(IdentityRepository):
    def __init__(self, store: CollectionStore):
        self._store = store

    def list_all(self) -> Sequence[Identity]:
        records = read_records(self._store, keys.IDENTITIES) or []
        return parse_records(records, identity_from_record, keys.IDENTITIES)

    def get_by_id(self, identity_id: str) -> Optional[Identity]:
        return next((i for i in self.list_all() if i.id == identity_id), None)

    def get_by_email(self, email: str) -> Optional[Identity]:
        wanted = (email or "").strip().lower()
        if not wanted:
            return None
        return next((i for i in self.list_all() if i.email.strip().lower() == wanted), None)

    def first_with_role(self, role: Role) -> Optional[Identity]:
        return next((i for i in self.list_all() if i.role == role), None)
