from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import optional_text, require_non_empty
from ..users.model import Identity
from ..users.repository import IdentityRepository
from ..users.service import Session
from .model import Club, ClubDraft, Membership
from .repository import ClubRepository, MembershipRepository

logger = logging.getLogger(__name__)


class ClubService:
    """Use cases: browse, join and create clubs.

    Role and uniqueness rules are settled here and come back as
    ``None``/existing records rather than exceptions; only malformed drafts
    raise ``ValidationError``.
    """

    def __init__(self, clubs: ClubRepository, memberships: MembershipRepository, identities: IdentityRepository):
        self._clubs = clubs
        self._memberships = memberships
        self._identities = identities

    def list_all(self) -> Sequence[Club]:
        return self._clubs.list_all()

    def get(self, club_id: str) -> Optional[Club]:
        return self._clubs.get_by_id(club_id)

    def list_mine(self, session: Session) -> Sequence[Club]:
        identity = session.identity
        if not identity:
            return []
        if identity.is_admin:
            return self._clubs.list_owned_by(identity.id)
        joined = {m.club_id for m in self._memberships.list_for_user(identity.id)}
        return [c for c in self._clubs.list_all() if c.id in joined]

    def other_clubs(self, session: Session) -> Sequence[Club]:
        """Clubs the signed-in identity has not joined yet."""
        if not session.identity:
            return self._clubs.list_all()
        joined = {m.club_id for m in self._memberships.list_for_user(session.identity.id)}
        return [c for c in self._clubs.list_all() if c.id not in joined]

    def is_member(self, club_id: str, session: Session) -> bool:
        if not session.identity:
            return False
        found = self._memberships.get_for_club_and_user(club_id=club_id, user_id=session.identity.id)
        return found is not None

    def member_count(self, club_id: str) -> int:
        return self._memberships.count_for_club(club_id)

    def join(self, club_id: str, session: Session) -> Optional[Membership]:
        identity = session.identity
        if not identity:
            return None

        existing = self._memberships.get_for_club_and_user(club_id=club_id, user_id=identity.id)
        if existing:
            return existing

        if not self._clubs.get_by_id(club_id):
            logger.info("Join ignored: club %s does not exist", club_id)
            return None
        if not self._identities.get_by_id(identity.id):
            logger.info("Join ignored: identity %s does not exist", identity.id)
            return None

        membership = Membership(
            id=new_id("mem"),
            club_id=club_id,
            user_id=identity.id,
            joined_at=now_local(),
        )
        self._memberships.add(membership)
        logger.info("Identity %s joined club %s", identity.id, club_id)
        return membership

    def create(self, draft: ClubDraft, owner: Identity) -> Optional[Club]:
        if not owner or not owner.is_admin:
            logger.warning("Club creation refused for non-admin %s", getattr(owner, "id", None))
            return None
        stored_owner = self._identities.get_by_id(owner.id)
        if not stored_owner or not stored_owner.is_admin:
            logger.warning("Club creation refused: owner %s is not a stored admin", owner.id)
            return None

        name = require_non_empty(draft.name, "name")
        club = Club(
            id=new_id("club"),
            name=name,
            description=(draft.description or "").strip(),
            owner_id=stored_owner.id,
            image_url=optional_text(draft.image_url),
            created_at=now_local(),
        )
        self._clubs.add(club)
        logger.info("Club %s created by %s", club.id, owner.id)
        return club
