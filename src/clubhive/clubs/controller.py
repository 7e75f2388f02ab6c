from __future__ import annotations

from typing import Any

from flask import Flask

from ..announcements.model import Announcement
from ..common.http import fail, ok, request_payload
from ..container import Container
from ..users.web_session import current_session, make_guards
from .model import Club, ClubDraft, Membership


def club_json(club: Club, **extra: Any) -> dict[str, Any]:
    return {
        "id": club.id,
        "name": club.name,
        "description": club.description,
        "owner_id": club.owner_id,
        "image_url": club.image_url,
        "created_at": club.created_at.isoformat() if club.created_at else None,
        **extra,
    }


def membership_json(m: Membership) -> dict[str, Any]:
    return {"id": m.id, "club_id": m.club_id, "user_id": m.user_id, "joined_at": m.joined_at.isoformat()}


def announcement_json(a: Announcement) -> dict[str, Any]:
    return {
        "id": a.id,
        "club_id": a.club_id,
        "title": a.title,
        "content": a.content,
        "created_at": a.created_at.isoformat() if a.created_at else None,
    }


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container)
    clubs = container.club_service

    @app.route("/clubs", methods=["GET"], endpoint="clubs")
    def list_clubs():
        s = current_session(container)
        items = [
            club_json(c, member_count=clubs.member_count(c.id), is_member=clubs.is_member(c.id, s))
            for c in clubs.list_all()
        ]
        return ok(clubs=items)

    @app.route("/clubs/mine", methods=["GET"], endpoint="my_clubs")
    @login_required
    def my_clubs():
        s = current_session(container)
        return ok(
            clubs=[club_json(c) for c in clubs.list_mine(s)],
            other_clubs=[club_json(c) for c in clubs.other_clubs(s)],
        )

    @app.route("/clubs/<club_id>/join", methods=["POST"], endpoint="join_club")
    @login_required
    def join_club(club_id: str):
        membership = clubs.join(club_id, current_session(container))
        if not membership:
            return fail("Club not found", 404)
        return ok("Joined club", membership=membership_json(membership))

    @app.route("/admin/clubs", methods=["POST"], endpoint="create_club")
    @admin_required
    def create_club():
        data = request_payload()
        draft = ClubDraft(
            name=data.get("name", ""),
            description=data.get("description") or "",
            image_url=data.get("image_url"),
        )
        club = clubs.create(draft, current_session(container).identity)
        if not club:
            return fail("Only a registered admin can create clubs", 403)
        return ok("Club created", 201, club=club_json(club))

    @app.route("/clubs/<club_id>/announcements", methods=["GET"], endpoint="club_announcements")
    def club_announcements(club_id: str):
        if not clubs.get(club_id):
            return fail("Club not found", 404)
        items = container.announcement_service.list_for(club_id)
        return ok(announcements=[announcement_json(a) for a in items])
