"""Key-value document storage for the ClubHive collections."""

from .factory import build_store
from .store import CollectionStore

__all__ = ["CollectionStore", "build_store"]
