from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Event, Registration


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        raise NotImplementedError

    def list_for_club(self, club_id: str) -> Sequence[Event]:
        raise NotImplementedError

    def get_by_id(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def add(self, event: Event) -> None:
        raise NotImplementedError


class RegistrationRepository(Protocol):
    def list_for_event(self, event_id: str) -> Sequence[Registration]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[Registration]:
        raise NotImplementedError

    def get_for_event_and_user(self, *, event_id: str, user_id: str) -> Optional[Registration]:
        raise NotImplementedError

    def get_by_pass_token(self, pass_token: str) -> Optional[Registration]:
        raise NotImplementedError

    def add(self, registration: Registration) -> None:
        raise NotImplementedError

    def set_attended(self, registration_id: str, *, attended: bool) -> bool:
        raise NotImplementedError
