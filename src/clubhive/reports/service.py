from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional

from ..clubs.repository import ClubRepository, MembershipRepository
from ..common.datetime_utils import format_clock_time
from ..core.constants import REPORT_FILE_SUFFIX
from ..events.repository import EventRepository, RegistrationRepository
from ..users.repository import IdentityRepository
from ..users.service import Session


@dataclass(frozen=True)
class ReportRow:
    name: Optional[str]
    email: Optional[str]
    department: Optional[str]
    year: Optional[int]
    registered_at: datetime
    attended: bool


@dataclass(frozen=True)
class EventReport:
    event_id: str
    title: str
    date: date
    time: Optional[time]
    location: str
    capacity: Optional[int]
    rows: list[ReportRow]

    @property
    def total_registrations(self) -> int:
        return len(self.rows)

    @property
    def attended_count(self) -> int:
        return sum(1 for r in self.rows if r.attended)

    @property
    def fill_rate(self) -> Optional[int]:
        """Whole-percent share of capacity taken, halves rounded up; None without a positive capacity."""
        if not self.capacity or self.capacity <= 0:
            return None
        return math.floor(100 * self.total_registrations / self.capacity + 0.5)

    @property
    def unbounded(self) -> bool:
        return self.capacity is None

    @property
    def export_filename(self) -> str:
        return re.sub(r"\s+", "_", self.title) + REPORT_FILE_SUFFIX

    def to_document(self) -> dict[str, Any]:
        return {
            "event": self.title,
            "date": self.date.isoformat(),
            "time": format_clock_time(self.time),
            "location": self.location,
            "totalRegistrations": self.total_registrations,
            "capacity": self.capacity,
            "fillRate": self.fill_rate,
            "attendees": [
                {
                    "name": r.name,
                    "email": r.email,
                    "department": r.department,
                    "year": r.year,
                    "registeredAt": r.registered_at.isoformat(),
                    "attended": r.attended,
                }
                for r in self.rows
            ],
        }


@dataclass(frozen=True)
class ClubSummary:
    club_id: str
    name: str
    member_count: int
    event_count: int
    total_registrations: int


class ReportService:
    """Read-only aggregation over events, registrations and identities."""

    def __init__(
        self,
        events: EventRepository,
        registrations: RegistrationRepository,
        identities: IdentityRepository,
        clubs: ClubRepository,
        memberships: MembershipRepository,
    ):
        self._events = events
        self._registrations = registrations
        self._identities = identities
        self._clubs = clubs
        self._memberships = memberships

    def _manages(self, session: Optional[Session], club_id: str) -> bool:
        if session is None:
            return True
        if not session.is_admin:
            return False
        club = self._clubs.get_by_id(club_id)
        return club is not None and club.owner_id == session.identity.id

    def build_report(self, event_id: str, session: Optional[Session] = None) -> Optional[EventReport]:
        """Attendee report for an event; with a session, only for events of clubs that admin owns."""
        event = self._events.get_by_id(event_id)
        if not event or not self._manages(session, event.club_id):
            return None

        people = {i.id: i for i in self._identities.list_all()}
        rows: list[ReportRow] = []
        for reg in self._registrations.list_for_event(event_id):
            person = people.get(reg.user_id)
            rows.append(
                ReportRow(
                    name=person.name if person else None,
                    email=person.email if person else None,
                    department=person.department if person else None,
                    year=person.year if person else None,
                    registered_at=reg.registered_at,
                    attended=reg.attended,
                )
            )

        return EventReport(
            event_id=event.id,
            title=event.title,
            date=event.date,
            time=event.time,
            location=event.location,
            capacity=event.capacity,
            rows=rows,
        )

    def club_summary(self, club_id: str, session: Optional[Session] = None) -> Optional[ClubSummary]:
        club = self._clubs.get_by_id(club_id)
        if not club or not self._manages(session, club_id):
            return None
        events = self._events.list_for_club(club_id)
        total = sum(len(self._registrations.list_for_event(e.id)) for e in events)
        return ClubSummary(
            club_id=club.id,
            name=club.name,
            member_count=self._memberships.count_for_club(club_id),
            event_count=len(events),
            total_registrations=total,
        )
