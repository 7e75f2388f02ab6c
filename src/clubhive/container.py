from __future__ import annotations

from dataclasses import dataclass

from .announcements.service import AnnouncementService
from .announcements.store_announcement_repository import StoreAnnouncementRepository
from .clubs.service import ClubService
from .clubs.store_club_repository import StoreClubRepository, StoreMembershipRepository
from .events.service import EventService
from .events.store_event_repository import StoreEventRepository, StoreRegistrationRepository
from .reports.service import ReportService
from .storage.store import CollectionStore
from .users.service import CurrentIdentityStore, SessionManager
from .users.store_identity_repository import StoreIdentityRepository


@dataclass(frozen=True)
class Container:
    store: CollectionStore

    identities_repo: StoreIdentityRepository
    clubs_repo: StoreClubRepository
    memberships_repo: StoreMembershipRepository
    events_repo: StoreEventRepository
    registrations_repo: StoreRegistrationRepository
    announcements_repo: StoreAnnouncementRepository

    club_service: ClubService
    event_service: EventService
    announcement_service: AnnouncementService
    report_service: ReportService

    def sessions(self, current: CurrentIdentityStore) -> SessionManager:
        """Session manager persisting the signed-in identity through ``current``."""
        return SessionManager(self.identities_repo, current)


def build_container(store: CollectionStore, *, enforce_capacity: bool = False) -> Container:
    identities_repo = StoreIdentityRepository(store)
    clubs_repo = StoreClubRepository(store)
    memberships_repo = StoreMembershipRepository(store)
    events_repo = StoreEventRepository(store)
    registrations_repo = StoreRegistrationRepository(store)
    announcements_repo = StoreAnnouncementRepository(store)

    club_service = ClubService(clubs_repo, memberships_repo, identities_repo)
    event_service = EventService(
        events_repo,
        registrations_repo,
        clubs_repo,
        enforce_capacity=enforce_capacity,
    )
    announcement_service = AnnouncementService(announcements_repo)
    report_service = ReportService(
        events_repo,
        registrations_repo,
        identities_repo,
        clubs_repo,
        memberships_repo,
    )

    return Container(
        store=store,
        identities_repo=identities_repo,
        clubs_repo=clubs_repo,
        memberships_repo=memberships_repo,
        events_repo=events_repo,
        registrations_repo=registrations_repo,
        announcements_repo=announcements_repo,
        club_service=club_service,
        event_service=event_service,
        announcement_service=announcement_service,
        report_service=report_service,
    )
