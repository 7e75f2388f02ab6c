from __future__ import annotations

from typing import Any, Optional

from flask import Flask

from ..common.http import fail, ok, request_payload
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import Identity
from .web_session import current_session, make_guards, session_manager


def identity_json(identity: Optional[Identity]) -> Optional[dict[str, Any]]:
    if not identity:
        return None
    return {
        "id": identity.id,
        "email": identity.email,
        "name": identity.name,
        "role": identity.role.value,
        "department": identity.department,
        "year": identity.year,
    }


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_payload()
        s = current_session(container)
        identity = session_manager(container).login(s, data.get("email", ""), data.get("password"))
        if not identity:
            return fail("No account found for that email", 401, field="email")
        return ok("Signed in", identity=identity_json(identity))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session_manager(container).logout(current_session(container))
        return ok("Signed out")

    @app.route("/switch-role", methods=["POST"], endpoint="switch_role")
    @login_required
    def switch_role():
        raw = str(request_payload().get("role", "")).strip().lower()
        try:
            role = Role(raw)
        except ValueError:
            raise ValidationError("role must be student or admin", field="role")

        identity = session_manager(container).switch_role(current_session(container), role)
        if not identity:
            return fail(f"No {role.value} account to switch to", 404)
        return ok("Role switched", identity=identity_json(identity))

    @app.route("/me", methods=["GET"], endpoint="me")
    def me():
        s = current_session(container)
        return ok(state=s.state.value, identity=identity_json(s.identity))
