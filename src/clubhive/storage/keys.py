"""Names of the persisted documents."""

IDENTITIES = "identities"
CLUBS = "clubs"
MEMBERSHIPS = "memberships"
EVENTS = "events"
REGISTRATIONS = "registrations"
ANNOUNCEMENTS = "announcements"

CURRENT_IDENTITY = "current_identity"

COLLECTIONS = (IDENTITIES, CLUBS, MEMBERSHIPS, EVENTS, REGISTRATIONS, ANNOUNCEMENTS)
