from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty", field=field_name)
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Strip free text; blank strings collapse to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_positive_id(value: int, field_name: str) -> int:
    if int(value) <= 0:
        raise ValidationError(f"{field_name} must be a positive integer", field=field_name)
    return int(value)
