from __future__ import annotations

import pytest

from clubhive.clubs.model import ClubDraft
from clubhive.core.exceptions import ValidationError
from clubhive.users.service import Session


def test_student_joins_creative_arts(sessions, container):
    s = sessions.start()
    sessions.login(s, "student@demo.com")
    clubs = container.club_service

    assert len(clubs.list_all()) == 3
    assert {c.id for c in clubs.list_mine(s)} == {"club-1", "club-3"}

    membership = clubs.join("club-2", s)

    assert membership.club_id == "club-2"
    assert {c.id for c in clubs.list_mine(s)} == {"club-1", "club-2", "club-3"}
    assert clubs.other_clubs(s) == []


def test_join_is_idempotent(student_session, container, store):
    clubs = container.club_service

    first = clubs.join("club-2", student_session)
    second = clubs.join("club-2", student_session)

    assert first == second
    assert len(store.get("memberships")) == 3


def test_join_repeat_of_seeded_membership_returns_it(student_session, container):
    membership = container.club_service.join("club-1", student_session)
    assert membership.id == "mem-1"


def test_join_requires_identity_and_club(student_session, container):
    clubs = container.club_service

    assert clubs.join("club-2", Session()) is None
    assert clubs.join("club-404", student_session) is None


def test_admin_sees_owned_clubs(admin_session, container):
    mine = container.club_service.list_mine(admin_session)
    assert [c.id for c in mine] == ["club-1", "club-2", "club-3"]


def test_anonymous_has_no_clubs(container):
    assert container.club_service.list_mine(Session()) == []


def test_admin_creates_club(admin_session, container):
    club = container.club_service.create(ClubDraft(name="  Chess Club ", description="Openings"), admin_session.identity)

    assert club.name == "Chess Club"
    assert club.owner_id == "admin-1"
    assert club.created_at is not None
    assert container.club_service.get(club.id) == club


def test_student_cannot_create_club(student_session, container, store):
    assert container.club_service.create(ClubDraft(name="Rogue"), student_session.identity) is None
    assert len(store.get("clubs")) == 3


def test_create_club_requires_name(admin_session, container, store):
    with pytest.raises(ValidationError) as exc:
        container.club_service.create(ClubDraft(name="   "), admin_session.identity)

    assert exc.value.field == "name"
    assert len(store.get("clubs")) == 3


def test_member_count(container, student_session):
    assert container.club_service.member_count("club-1") == 1
    assert container.club_service.is_member("club-1", student_session)
    assert not container.club_service.is_member("club-2", student_session)


def test_announcements_per_club(container):
    announcements = container.announcement_service

    assert [a.id for a in announcements.list_for("club-1")] == ["ann-1"]
    assert announcements.list_for("club-2") == []
    assert len(announcements.list_for()) == 2


def test_stored_announcement_is_listed(store, container):
    store.set(
        "announcements",
        [*store.get("announcements"), {"id": "ann-3", "club_id": "club-2", "title": "Gallery opening", "content": "Friday 6pm"}],
    )

    assert [a.title for a in container.announcement_service.list_for("club-2")] == ["Gallery opening"]
