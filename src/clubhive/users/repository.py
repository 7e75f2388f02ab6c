from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Identity


class IdentityRepository(Protocol):
    """Identity lookups.

    Note: services depend on this interface, never on a concrete store.
    """

    def list_all(self) -> Sequence[Identity]:
        raise NotImplementedError

    def get_by_id(self, identity_id: str) -> Optional[Identity]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Identity]:
        raise NotImplementedError

    def first_with_role(self, role: Role) -> Optional[Identity]:
        raise NotImplementedError
