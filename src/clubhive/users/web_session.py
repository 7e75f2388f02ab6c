from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, session

from ..common.http import fail
from ..core.exceptions import AuthorizationError
from ..storage.store import Record
from .service import CurrentIdentityStore, Session, SessionManager

SESSION_KEY = "current_identity"


class FlaskCurrentIdentity(CurrentIdentityStore):
    """Keeps the signed-in identity in the signed Flask session cookie, one per browser."""

    def load(self) -> Optional[Record]:
        record = session.get(SESSION_KEY)
        return record if isinstance(record, dict) else None

    def save(self, record: Record) -> None:
        session[SESSION_KEY] = record

    def clear(self) -> None:
        session.pop(SESSION_KEY, None)


def session_manager(container) -> SessionManager:
    return container.sessions(FlaskCurrentIdentity())


def current_session(container) -> Session:
    """The request's Session, started once and cached on ``g``."""
    if "clubhive_session" not in g:
        g.clubhive_session = session_manager(container).start()
    return g.clubhive_session


def make_guards(container):
    """Build the ``login_required``/``admin_required`` view decorators for ``container``."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not current_session(container).is_authenticated:
                return fail("Please sign in to continue", 401)
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            s = current_session(container)
            if not s.is_authenticated:
                return fail("Please sign in to continue", 401)
            if not s.is_admin:
                raise AuthorizationError("Admin access required")
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required
