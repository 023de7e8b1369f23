from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(:([0-5]\d))?$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_time_string(value: Any, field_name: str) -> str:
    """Accept ``HH:MM`` or ``HH:MM:SS`` and return it unchanged."""
    if not isinstance(value, str) or not _TIME_RE.match(value.strip()):
        raise ValidationError(f"{field_name} must be a time in HH:MM format")
    return value.strip()


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name} value")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name} value")
    if number < 0:
        raise ValidationError(f"Invalid {field_name} value")
    return number


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)
