from __future__ import annotations

import json

import pytest

from clubhive.main import create_app


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def _login(client, email):
    return client.post("/login", json={"email": email, "password": "ignored"})


def test_me_is_anonymous_by_default(client):
    r = client.get("/me")
    assert r.status_code == 200
    assert r.json["state"] == "anonymous"
    assert r.json["identity"] is None


def test_login_and_logout(client):
    r = _login(client, "student@demo.com")
    assert r.status_code == 200
    assert r.json["identity"]["id"] == "user-1"
    assert client.get("/me").json["state"] == "authenticated"

    client.post("/logout")
    assert client.get("/me").json["identity"] is None


def test_login_unknown_email(client):
    r = _login(client, "ghost@demo.com")
    assert r.status_code == 401
    assert r.json["success"] is False
    assert r.json["field"] == "email"


def test_student_joins_club_over_http(client):
    _login(client, "student@demo.com")

    r = client.post("/clubs/club-2/join")
    assert r.status_code == 200

    mine = client.get("/clubs/mine").json["clubs"]
    assert {c["id"] for c in mine} == {"club-1", "club-2", "club-3"}


def test_protected_routes_need_login(client):
    assert client.post("/clubs/club-2/join").status_code == 401
    assert client.post("/events/event-1/register").status_code == 401


def test_admin_routes_forbid_students(client):
    _login(client, "student@demo.com")

    r = client.post("/admin/clubs", json={"name": "Rogue"})
    assert r.status_code == 403
    assert client.get("/admin/reports/event-1").status_code == 403


def test_register_pass_and_check_in(client):
    _login(client, "student@demo.com")
    r = client.post("/events/event-1/register")
    token = r.json["registration"]["pass_token"]

    png = client.get("/events/event-1/pass.png")
    assert png.status_code == 200
    assert png.mimetype == "image/png"

    client.post("/switch-role", json={"role": "admin"})
    r = client.post("/admin/checkin", json={"pass_token": token})
    assert r.status_code == 200
    assert r.json["registration"]["attended"] is True

    report = client.get("/admin/reports/event-1").json["report"]
    assert report["totalRegistrations"] == 1
    assert report["fillRate"] == 2


def test_admin_creates_event_and_gets_validation_errors(client):
    _login(client, "admin@demo.com")

    r = client.post("/admin/events", json={"club_id": "club-2", "title": "Sketch Night", "location": "Loft"})
    assert r.status_code == 400
    assert r.json["field"] == "date"

    r = client.post(
        "/admin/events",
        json={"club_id": "club-2", "title": "Sketch Night", "date": "2026-02-10T19:00", "location": "Loft", "capacity": ""},
    )
    assert r.status_code == 201
    assert r.json["event"]["time"] == "19:00"
    assert r.json["event"]["capacity"] is None


def test_report_export_is_json_attachment(client):
    _login(client, "admin@demo.com")

    r = client.get("/admin/reports/event-2/export")
    assert r.status_code == 200
    assert "Hackathon_2026_report.json" in r.headers["Content-Disposition"]
    assert json.loads(r.data)["event"] == "Hackathon 2026"


def test_missing_things_are_404_json(client):
    _login(client, "admin@demo.com")

    assert client.get("/admin/reports/event-404").status_code == 404
    assert client.get("/clubs/club-404/announcements").status_code == 404
    assert client.get("/admin/clubs/club-404/summary").status_code == 404
    assert client.get("/no/such/route").json["success"] is False


def test_announcements_and_summary(client):
    r = client.get("/clubs/club-1/announcements")
    assert [a["id"] for a in r.json["announcements"]] == ["ann-1"]

    _login(client, "admin@demo.com")
    summary = client.get("/admin/clubs/club-1/summary").json["summary"]
    assert summary["event_count"] == 2


def test_my_registrations_over_http(client):
    _login(client, "student@demo.com")
    client.post("/events/event-2/register")

    regs = client.get("/events/mine").json["registrations"]
    assert [r["event_id"] for r in regs] == ["event-2"]


def test_other_admin_cannot_reach_foreign_club_data(client):
    store = client.application.extensions["clubhive"].store
    store.set(
        "identities",
        [*store.get("identities"), {"id": "admin-2", "email": "other@demo.com", "name": "Dr. Lee", "role": "admin"}],
    )
    _login(client, "other@demo.com")

    assert client.get("/admin/reports/event-1").status_code == 404
    assert client.get("/admin/reports/event-1/export").status_code == 404
    assert client.get("/admin/clubs/club-1/summary").status_code == 404

    r = client.post(
        "/admin/events",
        json={"club_id": "club-1", "title": "Takeover", "date": "2026-02-10", "location": "Lab"},
    )
    assert r.status_code == 400
    assert r.json["field"] == "club_id"
