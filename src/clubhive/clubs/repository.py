from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Club, Membership


class ClubRepository(Protocol):
    def list_all(self) -> Sequence[Club]:
        raise NotImplementedError

    def get_by_id(self, club_id: str) -> Optional[Club]:
        raise NotImplementedError

    def list_owned_by(self, owner_id: str) -> Sequence[Club]:
        raise NotImplementedError

    def add(self, club: Club) -> None:
        raise NotImplementedError


class MembershipRepository(Protocol):
    def list_for_user(self, user_id: str) -> Sequence[Membership]:
        raise NotImplementedError

    def get_for_club_and_user(self, *, club_id: str, user_id: str) -> Optional[Membership]:
        raise NotImplementedError

    def count_for_club(self, club_id: str) -> int:
        raise NotImplementedError

    def add(self, membership: Membership) -> None:
        raise NotImplementedError
