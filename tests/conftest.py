from __future__ import annotations

import pytest

from clubhive.container import build_container
from clubhive.database.seed import seed_store
from clubhive.storage.memory_store import InMemoryStore
from clubhive.users.service import SessionManager, StoreCurrentIdentity


@pytest.fixture()
def store():
    s = InMemoryStore()
    seed_store(s)
    return s


@pytest.fixture()
def container(store):
    return build_container(store)


@pytest.fixture()
def sessions(container, store) -> SessionManager:
    return container.sessions(StoreCurrentIdentity(store))


@pytest.fixture()
def student_session(sessions):
    s = sessions.start()
    sessions.login(s, "student@demo.com")
    return s


@pytest.fixture()
def admin_session(sessions):
    s = sessions.start()
    sessions.login(s, "admin@demo.com")
    return s
