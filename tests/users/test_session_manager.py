from __future__ import annotations

from clubhive.core.enums import Role, SessionState
from clubhive.users.service import StoreCurrentIdentity


def test_login_matches_email_case_insensitively(sessions):
    s = sessions.start()

    identity = sessions.login(s, "  Student@Demo.com ", "anything")

    assert identity.id == "user-1"
    assert s.state == SessionState.AUTHENTICATED
    assert s.identity.name == "Alex Johnson"


def test_login_with_unknown_email_stays_anonymous(sessions, store):
    s = sessions.start()

    assert sessions.login(s, "nobody@demo.com") is None
    assert s.state == SessionState.ANONYMOUS
    assert len(store.get("identities")) == 2


def test_identity_survives_restart(sessions, container, store):
    s = sessions.start()
    sessions.login(s, "admin@demo.com")

    restarted = container.sessions(StoreCurrentIdentity(store)).start()

    assert restarted.is_admin
    assert restarted.identity.id == "admin-1"


def test_logout_clears_persisted_identity(sessions, store):
    s = sessions.start()
    sessions.login(s, "student@demo.com")

    sessions.logout(s)

    assert not s.is_authenticated
    assert store.get("current_identity") is None
    assert not sessions.start().is_authenticated


def test_unreadable_persisted_identity_starts_anonymous(sessions, store):
    store.set("current_identity", {"id": "user-1"})

    s = sessions.start()

    assert not s.is_authenticated
    assert store.get("current_identity") is None


def test_switch_role_swaps_to_first_identity_with_role(student_session, sessions):
    identity = sessions.switch_role(student_session, Role.ADMIN)

    assert identity.id == "admin-1"
    assert student_session.is_admin


def test_switch_role_is_noop_when_anonymous(sessions):
    s = sessions.start()

    assert sessions.switch_role(s, Role.ADMIN) is None
    assert not s.is_authenticated


def test_switch_role_without_target_identity(store, sessions):
    store.set("identities", [r for r in store.get("identities") if r["role"] != "admin"])
    s = sessions.start()
    sessions.login(s, "student@demo.com")

    assert sessions.switch_role(s, Role.ADMIN) is None
    assert s.identity.id == "user-1"
