from __future__ import annotations

from datetime import date, datetime

from clubhive.core.enums import Role
from clubhive.events.model import EventDraft
from clubhive.reports.service import EventReport, ReportRow
from clubhive.users.model import Identity
from clubhive.users.service import Session


def _student(n: int) -> Session:
    return Session(identity=Identity(id=f"s-{n}", email=f"s{n}@demo.com", name=f"Student {n}", role=Role.STUDENT))


def test_fill_rate_tracks_registrations_against_capacity(container):
    events = container.event_service
    reports = container.report_service

    assert reports.build_report("event-1").fill_rate == 0

    for n in range(50):
        events.register("event-1", _student(n))
    assert reports.build_report("event-1").fill_rate == 100

    assert events.register("event-1", _student(50)) is not None
    report = reports.build_report("event-1")
    assert report.total_registrations == 51
    assert report.fill_rate == 102


def test_report_rows_join_identity_fields(student_session, container):
    container.event_service.register("event-3", student_session)

    report = container.report_service.build_report("event-3")

    assert len(report.rows) == 1
    row = report.rows[0]
    assert (row.name, row.email, row.department, row.year) == (
        "Alex Johnson",
        "student@demo.com",
        "Computer Science",
        3,
    )
    assert row.attended is False


def test_report_row_for_missing_identity_has_blank_fields(container):
    container.event_service.register("event-3", _student(7))

    row = container.report_service.build_report("event-3").rows[0]

    assert row.name is None and row.email is None


def test_report_for_unknown_event_is_none(container):
    assert container.report_service.build_report("event-404") is None


def test_unbounded_and_zero_capacity(container):
    events = container.event_service
    unbounded = events.create(EventDraft(club_id="club-2", title="Open Studio", date="2026-03-01", location="Loft"))
    closed = events.create(
        EventDraft(club_id="club-2", title="Private View", date="2026-03-02", location="Loft", capacity=0)
    )

    r1 = container.report_service.build_report(unbounded.id)
    r2 = container.report_service.build_report(closed.id)

    assert r1.unbounded and r1.fill_rate is None
    assert not r2.unbounded and r2.fill_rate is None


def test_fill_rate_rounds_to_whole_percent():
    row = ReportRow(None, None, None, None, datetime(2026, 1, 1), False)
    report = EventReport("e", "T", date(2026, 1, 1), None, "x", 3, [row])

    assert report.fill_rate == 33


def _report(registered: int, capacity: int) -> EventReport:
    rows = [ReportRow(None, None, None, None, datetime(2026, 1, 1), False) for _ in range(registered)]
    return EventReport("e", "T", date(2026, 1, 1), None, "x", capacity, rows)


def test_fill_rate_rounds_halves_up():
    assert _report(5, 200).fill_rate == 3
    assert _report(1, 8).fill_rate == 13
    assert _report(1, 200).fill_rate == 1


def test_export_document_and_filename(student_session, container):
    reg = container.event_service.register("event-1", student_session)
    container.event_service.check_in(reg.pass_token)

    report = container.report_service.build_report("event-1")
    doc = report.to_document()

    assert report.export_filename == "AI_Workshop:_Introduction_to_Machine_Learning_report.json"
    assert doc["event"] == "AI Workshop: Introduction to Machine Learning"
    assert doc["date"] == "2026-01-15"
    assert doc["time"] == "14:00"
    assert doc["totalRegistrations"] == 1
    assert doc["capacity"] == 50
    assert doc["fillRate"] == 2
    assert doc["attendees"][0]["email"] == "student@demo.com"
    assert doc["attendees"][0]["attended"] is True
    assert doc["attendees"][0]["registeredAt"] == reg.registered_at.isoformat()


def test_report_does_not_mutate_store(student_session, container, store):
    container.event_service.register("event-1", student_session)
    before = {k: store.get(k) for k in ("events", "registrations", "identities")}

    container.report_service.build_report("event-1")
    container.report_service.club_summary("club-1")

    assert {k: store.get(k) for k in ("events", "registrations", "identities")} == before


def test_club_summary_totals(student_session, container):
    container.event_service.register("event-1", student_session)
    container.event_service.register("event-2", student_session)

    summary = container.report_service.club_summary("club-1")

    assert summary.event_count == 2
    assert summary.total_registrations == 2
    assert summary.member_count == 1
    assert container.report_service.club_summary("club-404") is None


def _add_second_admin(store):
    store.set(
        "identities",
        [*store.get("identities"), {"id": "admin-2", "email": "other@demo.com", "name": "Dr. Lee", "role": "admin"}],
    )


def test_report_is_scoped_to_the_admins_own_clubs(store, sessions, admin_session, container):
    _add_second_admin(store)
    other = sessions.start()
    sessions.login(other, "other@demo.com")
    reports = container.report_service

    assert reports.build_report("event-1", admin_session) is not None
    assert reports.build_report("event-1", other) is None
    assert reports.club_summary("club-1", admin_session) is not None
    assert reports.club_summary("club-1", other) is None


def test_students_get_no_report(student_session, container):
    assert container.report_service.build_report("event-1", student_session) is None
