from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or number in (float("inf"), float("-inf")):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_latitude(value: Any) -> float:
    lat = require_number(value, "Latitude")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError("Latitude must be between -90 and 90")
    return lat


def require_longitude(value: Any) -> float:
    lng = require_number(value, "Longitude")
    if not -180.0 <= lng <= 180.0:
        raise ValidationError("Longitude must be between -180 and 180")
    return lng
