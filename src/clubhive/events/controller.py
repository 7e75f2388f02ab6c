from __future__ import annotations

import io
from typing import Any

from flask import Flask, request, send_file

from ..common.datetime_utils import format_clock_time
from ..common.http import fail, ok, request_payload
from ..container import Container
from ..users.web_session import current_session, make_guards
from .model import Event, EventDraft, Registration
from .pass_image import render_pass_png


def event_json(e: Event, **extra: Any) -> dict[str, Any]:
    return {
        "id": e.id,
        "club_id": e.club_id,
        "title": e.title,
        "description": e.description,
        "date": e.date.isoformat(),
        "time": format_clock_time(e.time),
        "location": e.location,
        "capacity": e.capacity,
        "image_url": e.image_url,
        "created_at": e.created_at.isoformat() if e.created_at else None,
        **extra,
    }


def registration_json(r: Registration) -> dict[str, Any]:
    return {
        "id": r.id,
        "event_id": r.event_id,
        "user_id": r.user_id,
        "registered_at": r.registered_at.isoformat(),
        "pass_token": r.pass_token,
        "attended": r.attended,
    }


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container)
    events = container.event_service

    def _listing(items):
        s = current_session(container)
        return [
            event_json(
                e,
                registered_count=len(events.registrations_for(e.id)),
                is_registered=events.my_registration(e.id, s) is not None,
            )
            for e in items
        ]

    @app.route("/events", methods=["GET"], endpoint="events")
    def list_events():
        club_id = request.args.get("club_id") or None
        return ok(events=_listing(events.list_all(club_id)))

    @app.route("/events/upcoming", methods=["GET"], endpoint="upcoming_events")
    def upcoming_events():
        club_id = request.args.get("club_id") or None
        return ok(events=_listing(events.upcoming(club_id=club_id)))

    @app.route("/events/mine", methods=["GET"], endpoint="my_events")
    @login_required
    def my_events():
        regs = events.my_registrations(current_session(container))
        return ok(registrations=[registration_json(r) for r in regs])

    @app.route("/admin/events", methods=["GET"], endpoint="managed_events")
    @admin_required
    def managed_events():
        return ok(events=_listing(events.list_managed_by(current_session(container))))

    @app.route("/admin/events", methods=["POST"], endpoint="create_event")
    @admin_required
    def create_event():
        data = request_payload()
        draft = EventDraft(
            club_id=data.get("club_id", ""),
            title=data.get("title", ""),
            date=data.get("date", ""),
            location=data.get("location", ""),
            description=data.get("description") or "",
            time=data.get("time"),
            capacity=data.get("capacity"),
            image_url=data.get("image_url"),
        )
        event = events.create(draft, current_session(container))
        return ok("Event created", 201, event=event_json(event))

    @app.route("/events/<event_id>/register", methods=["POST"], endpoint="register_event")
    @login_required
    def register_event(event_id: str):
        registration = events.register(event_id, current_session(container))
        if not registration:
            return fail("Event not found", 404)
        return ok("Registered", registration=registration_json(registration))

    @app.route("/events/<event_id>/registration", methods=["GET"], endpoint="my_registration")
    @login_required
    def my_registration(event_id: str):
        registration = events.my_registration(event_id, current_session(container))
        return ok(registration=registration_json(registration) if registration else None)

    @app.route("/events/<event_id>/pass.png", methods=["GET"], endpoint="event_pass")
    @login_required
    def event_pass(event_id: str):
        registration = events.my_registration(event_id, current_session(container))
        if not registration:
            return fail("Not registered for this event", 404)
        png = render_pass_png(registration.pass_token)
        return send_file(io.BytesIO(png), mimetype="image/png")

    @app.route("/admin/checkin", methods=["POST"], endpoint="check_in")
    @admin_required
    def check_in():
        token = str(request_payload().get("pass_token", ""))
        registration = events.check_in(token)
        if not registration:
            return fail("Unknown pass", 404, field="pass_token")
        return ok("Checked in", registration=registration_json(registration))
