from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Any, Iterable, Optional, Sequence

from ..clubs.repository import ClubRepository
from ..common.datetime_utils import now_local, parse_clock_time, parse_iso_date
from ..common.ids import new_id, new_pass_token
from ..common.validators import optional_non_negative_int, optional_text, require_non_empty
from ..core.exceptions import ValidationError
from ..users.service import Session
from .model import Event, EventDraft, Registration
from .repository import EventRepository, RegistrationRepository

logger = logging.getLogger(__name__)


def sort_by_start(events: Iterable[Event]) -> list[Event]:
    """Earliest first; ties keep their incoming order (sorted() is stable)."""
    return sorted(events, key=lambda e: e.starts_at)


def _parse_draft_date(value: Any) -> tuple[date, Optional[time]]:
    """Accept a date, a datetime, "YYYY-MM-DD" or a datetime-local "YYYY-MM-DDTHH:MM"."""
    if isinstance(value, datetime):
        return value.date(), value.time().replace(second=0, microsecond=0)
    if isinstance(value, date):
        return value, None
    raw = require_non_empty(value, "date")
    day, _, clock = raw.partition("T")
    try:
        return parse_iso_date(day), parse_clock_time(clock) if clock else None
    except ValueError:
        raise ValidationError("date must look like YYYY-MM-DD", field="date")


def _parse_draft_time(value: Any) -> Optional[time]:
    if value is None or isinstance(value, time):
        return value
    raw = optional_text(value)
    if not raw:
        return None
    try:
        return parse_clock_time(raw)
    except ValueError:
        raise ValidationError("time must look like HH:MM", field="time")


class EventService:
    """Use cases: list, create and register for events, and pass check-in.

    Capacity is advisory unless ``enforce_capacity`` is set.
    """

    def __init__(
        self,
        events: EventRepository,
        registrations: RegistrationRepository,
        clubs: ClubRepository,
        *,
        enforce_capacity: bool = False,
    ):
        self._events = events
        self._registrations = registrations
        self._clubs = clubs
        self._enforce_capacity = bool(enforce_capacity)

    def list_all(self, club_id: Optional[str] = None) -> Sequence[Event]:
        if club_id:
            return self._events.list_for_club(club_id)
        return self._events.list_all()

    def get(self, event_id: str) -> Optional[Event]:
        return self._events.get_by_id(event_id)

    def upcoming(self, *, now: Optional[datetime] = None, club_id: Optional[str] = None) -> list[Event]:
        now = now or now_local()
        return sort_by_start(e for e in self.list_all(club_id) if not e.is_past(now))

    def list_managed_by(self, session: Session) -> Sequence[Event]:
        """Events of the clubs the signed-in admin owns."""
        if not session.is_admin:
            return []
        owned = {c.id for c in self._clubs.list_owned_by(session.identity.id)}
        return [e for e in self._events.list_all() if e.club_id in owned]

    def create(self, draft: EventDraft, session: Optional[Session] = None) -> Event:
        """Validate and store a new event. With a session, the club must be owned by that admin."""
        club_id = require_non_empty(draft.club_id, "club_id")
        title = require_non_empty(draft.title, "title")
        location = require_non_empty(draft.location, "location")
        day, clock = _parse_draft_date(draft.date)
        clock = _parse_draft_time(draft.time) or clock
        capacity = optional_non_negative_int(draft.capacity, "capacity")

        club = self._clubs.get_by_id(club_id)
        if not club:
            raise ValidationError("Club does not exist", field="club_id")
        if session is not None and not (session.is_admin and club.owner_id == session.identity.id):
            raise ValidationError("You can only add events to clubs you manage", field="club_id")

        event = Event(
            id=new_id("event"),
            club_id=club_id,
            title=title,
            description=(draft.description or "").strip(),
            date=day,
            time=clock,
            location=location,
            capacity=capacity,
            image_url=optional_text(draft.image_url),
            created_at=now_local(),
        )
        self._events.add(event)
        logger.info("Event %s created for club %s", event.id, club_id)
        return event

    def register(self, event_id: str, session: Session) -> Optional[Registration]:
        identity = session.identity
        if not identity:
            return None

        existing = self._registrations.get_for_event_and_user(event_id=event_id, user_id=identity.id)
        if existing:
            return existing

        event = self._events.get_by_id(event_id)
        if not event:
            logger.info("Registration ignored: event %s does not exist", event_id)
            return None

        if self._enforce_capacity and event.capacity is not None:
            taken = len(self._registrations.list_for_event(event_id))
            if taken >= event.capacity:
                raise ValidationError("Event is full", field="capacity")

        registration = Registration(
            id=new_id("reg"),
            event_id=event_id,
            user_id=identity.id,
            registered_at=now_local(),
            pass_token=new_pass_token(),
        )
        self._registrations.add(registration)
        logger.info("Identity %s registered for event %s", identity.id, event_id)
        return registration

    def my_registration(self, event_id: str, session: Session) -> Optional[Registration]:
        if not session.identity:
            return None
        return self._registrations.get_for_event_and_user(event_id=event_id, user_id=session.identity.id)

    def my_registrations(self, session: Session) -> Sequence[Registration]:
        if not session.identity:
            return []
        return self._registrations.list_for_user(session.identity.id)

    def registrations_for(self, event_id: str) -> Sequence[Registration]:
        return self._registrations.list_for_event(event_id)

    def check_in(self, pass_token: str) -> Optional[Registration]:
        """Mark the pass holder as attended. Scanning twice is harmless."""
        token = (pass_token or "").strip()
        if not token:
            return None
        registration = self._registrations.get_by_pass_token(token)
        if not registration:
            logger.info("Check-in with unknown pass token")
            return None
        if registration.attended:
            return registration
        if not self._registrations.set_attended(registration.id, attended=True):
            return None
        logger.info("Registration %s checked in", registration.id)
        return replace(registration, attended=True)
