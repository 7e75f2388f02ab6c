from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def optional_non_negative_int(value: Any, field_name: str) -> Optional[int]:
    """Parse an optional integer >= 0; empty input means "not set"."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number", field=field_name)
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number", field=field_name)
    if isinstance(value, float) and parsed != value:
        raise ValidationError(f"{field_name} must be a whole number", field=field_name)
    if parsed < 0:
        raise ValidationError(f"{field_name} cannot be negative", field=field_name)
    return parsed
