from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ..core.enums import Role, SessionState
from ..storage import keys
from ..storage.store import CollectionStore, Record
from .model import Identity
from .repository import IdentityRepository
from .store_identity_repository import identity_from_record, identity_to_record

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Who is using the app right now.

    Created once by ``SessionManager.start`` and passed by reference into
    every identity-scoped call. Only the manager mutates it.
    """

    identity: Optional[Identity] = None

    @property
    def state(self) -> SessionState:
        return SessionState.AUTHENTICATED if self.identity else SessionState.ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def is_admin(self) -> bool:
        return self.identity is not None and self.identity.is_admin


class CurrentIdentityStore(Protocol):
    """Where the signed-in identity survives a restart."""

    def load(self) -> Optional[Record]:
        raise NotImplementedError

    def save(self, record: Record) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class StoreCurrentIdentity(CurrentIdentityStore):
    """Keeps the current identity under the singleton key of the collection store."""

    def __init__(self, store: CollectionStore):
        self._store = store

    def load(self) -> Optional[Record]:
        document = self._store.get(keys.CURRENT_IDENTITY)
        return document if isinstance(document, dict) else None

    def save(self, record: Record) -> None:
        self._store.set(keys.CURRENT_IDENTITY, record)

    def clear(self) -> None:
        self._store.remove(keys.CURRENT_IDENTITY)


class SessionManager:
    """Use case: sign in by email, sign out, and the demo role switch.

    There is no credential check: any stored email signs in.
    """

    def __init__(self, identities: IdentityRepository, current: CurrentIdentityStore):
        self._identities = identities
        self._current = current

    def start(self) -> Session:
        record = self._current.load()
        if not record:
            return Session()
        try:
            return Session(identity=identity_from_record(record))
        except (KeyError, TypeError, ValueError):
            logger.warning("Persisted identity is unreadable; starting anonymous")
            self._current.clear()
            return Session()

    def login(self, session: Session, email: str, password: Optional[str] = None) -> Optional[Identity]:
        identity = self._identities.get_by_email(email)
        if not identity:
            logger.info("Login rejected for %r", email)
            return None
        self._become(session, identity)
        logger.info("Identity %s signed in", identity.id)
        return identity

    def logout(self, session: Session) -> None:
        if session.identity:
            logger.info("Identity %s signed out", session.identity.id)
        session.identity = None
        self._current.clear()

    def switch_role(self, session: Session, role: Role) -> Optional[Identity]:
        """Swap to the first identity holding ``role``.

        Demo affordance only: no re-authentication happens here.
        """
        if not session.is_authenticated:
            return None
        target = self._identities.first_with_role(Role(role))
        if not target:
            return None
        self._become(session, target)
        logger.info("Session switched to %s identity %s", target.role.value, target.id)
        return target

    def _become(self, session: Session, identity: Identity) -> None:
        session.identity = identity
        self._current.save(identity_to_record(identity))
