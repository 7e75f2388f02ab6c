from __future__ import annotations

import io
import json

from flask import Flask, send_file

from ..common.http import fail, ok
from ..container import Container
from ..users.web_session import current_session, make_guards


def register(app: Flask, container: Container) -> None:
    _, admin_required = make_guards(container)
    reports = container.report_service

    @app.route("/admin/reports/<event_id>", methods=["GET"], endpoint="event_report")
    @admin_required
    def event_report(event_id: str):
        report = reports.build_report(event_id, current_session(container))
        if not report:
            return fail("Event not found", 404)
        document = report.to_document()
        return ok(
            report=document,
            attended=report.attended_count,
            unbounded=report.unbounded,
            filename=report.export_filename,
        )

    @app.route("/admin/reports/<event_id>/export", methods=["GET"], endpoint="export_report")
    @admin_required
    def export_report(event_id: str):
        report = reports.build_report(event_id, current_session(container))
        if not report:
            return fail("Event not found", 404)
        data = json.dumps(report.to_document(), indent=2, ensure_ascii=False).encode("utf-8")
        return send_file(
            io.BytesIO(data),
            mimetype="application/json",
            as_attachment=True,
            download_name=report.export_filename,
            max_age=0,
        )

    @app.route("/admin/clubs/<club_id>/summary", methods=["GET"], endpoint="club_summary")
    @admin_required
    def club_summary(club_id: str):
        summary = reports.club_summary(club_id, current_session(container))
        if not summary:
            return fail("Club not found", 404)
        return ok(
            summary={
                "club_id": summary.club_id,
                "name": summary.name,
                "member_count": summary.member_count,
                "event_count": summary.event_count,
                "total_registrations": summary.total_registrations,
            }
        )
