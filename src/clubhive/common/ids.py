from __future__ import annotations

from uuid import uuid4

from ..core.constants import PASS_TOKEN_PREFIX


def new_id(prefix: str) -> str:
    """Opaque record id such as ``event-3f2a9c1d0b7e``."""
    return f"{prefix}-{uuid4().hex[:12]}"


def new_pass_token() -> str:
    return f"{PASS_TOKEN_PREFIX}-{uuid4().hex}"
