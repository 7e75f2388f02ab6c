from __future__ import annotations

import logging
from typing import Any

from ..storage import keys
from ..storage.store import CollectionStore, Record

logger = logging.getLogger(__name__)

_SEEDED_AT = "2025-09-01T09:00:00"

DEMO_IDENTITIES: list[Record] = [
    {
        "id": "user-1",
        "email": "student@demo.com",
        "name": "Alex Johnson",
        "role": "student",
        "department": "Computer Science",
        "year": 3,
        "created_at": _SEEDED_AT,
    },
    {
        "id": "admin-1",
        "email": "admin@demo.com",
        "name": "Dr. Sarah Chen",
        "role": "admin",
        "department": "Student Affairs",
        "year": None,
        "created_at": _SEEDED_AT,
    },
]

DEMO_CLUBS: list[Record] = [
    {
        "id": "club-1",
        "name": "Tech Innovators",
        "description": (
            "A club for technology enthusiasts to explore cutting-edge innovations, "
            "build projects, and network with industry professionals."
        ),
        "owner_id": "admin-1",
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
    {
        "id": "club-2",
        "name": "Creative Arts Society",
        "description": (
            "Express yourself through various art forms including painting, "
            "photography, digital art, and more."
        ),
        "owner_id": "admin-1",
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
    {
        "id": "club-3",
        "name": "Entrepreneurship Cell",
        "description": (
            "Building the next generation of entrepreneurs through workshops, "
            "mentorship, and startup competitions."
        ),
        "owner_id": "admin-1",
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
]

DEMO_MEMBERSHIPS: list[Record] = [
    {"id": "mem-1", "club_id": "club-1", "user_id": "user-1", "joined_at": _SEEDED_AT},
    {"id": "mem-2", "club_id": "club-3", "user_id": "user-1", "joined_at": _SEEDED_AT},
]

DEMO_EVENTS: list[Record] = [
    {
        "id": "event-1",
        "club_id": "club-1",
        "title": "AI Workshop: Introduction to Machine Learning",
        "description": (
            "Learn the fundamentals of machine learning with hands-on exercises "
            "using Python and TensorFlow."
        ),
        "date": "2026-01-15",
        "time": "14:00",
        "location": "Tech Lab 101",
        "capacity": 50,
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
    {
        "id": "event-2",
        "club_id": "club-1",
        "title": "Hackathon 2026",
        "description": "24-hour coding competition with amazing prizes and networking opportunities.",
        "date": "2026-01-25",
        "time": "09:00",
        "location": "Main Auditorium",
        "capacity": 200,
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
    {
        "id": "event-3",
        "club_id": "club-3",
        "title": "Startup Pitch Night",
        "description": "Present your startup ideas to a panel of investors and mentors.",
        "date": "2026-01-20",
        "time": "18:00",
        "location": "Business School Hall",
        "capacity": 100,
        "image_url": None,
        "created_at": _SEEDED_AT,
    },
]

DEMO_ANNOUNCEMENTS: list[Record] = [
    {
        "id": "ann-1",
        "club_id": "club-1",
        "title": "Welcome to Spring Semester!",
        "content": "Exciting events planned for this semester. Stay tuned for updates!",
        "created_at": _SEEDED_AT,
    },
    {
        "id": "ann-2",
        "club_id": "club-3",
        "title": "New Partnership with Local Incubator",
        "content": "We are thrilled to announce our partnership with TechStart Incubator for mentorship programs.",
        "created_at": _SEEDED_AT,
    },
]

STARTER_DATA: dict[str, list[Record]] = {
    keys.IDENTITIES: DEMO_IDENTITIES,
    keys.CLUBS: DEMO_CLUBS,
    keys.MEMBERSHIPS: DEMO_MEMBERSHIPS,
    keys.EVENTS: DEMO_EVENTS,
    keys.REGISTRATIONS: [],
    keys.ANNOUNCEMENTS: DEMO_ANNOUNCEMENTS,
}


def _copy(records: list[Record]) -> list[dict[str, Any]]:
    return [dict(r) for r in records]


def seed_store(store: CollectionStore) -> list[str]:
    """Write the starter dataset into every collection that is absent.

    Collections that already exist, even empty ones, are left alone, so a
    second run seeds nothing. Returns the names of the collections written.
    """
    seeded: list[str] = []
    for name in keys.COLLECTIONS:
        if store.get(name) is not None:
            continue
        store.set(name, _copy(STARTER_DATA[name]))
        seeded.append(name)

    if seeded:
        logger.info("Seeded collections: %s", ", ".join(seeded))
    return seeded
