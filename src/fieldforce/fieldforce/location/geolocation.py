"""Boundary with the browser's geolocation API.

The browser script requests a fix with the options below and posts either
``{"lat": .., "lng": ..}`` or ``{"error": "..."}``. A failed or garbled fix
raises ``LocationUnavailableError``; there is no substitute coordinate, since
a made-up ``0, 0`` punch cannot be told apart from a real one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_latitude, require_longitude
from ..core.constants import GEO_MAXIMUM_AGE_MS, GEO_TIMEOUT_MS
from ..core.exceptions import LocationUnavailableError, ValidationError
from .model import GeoPoint


@dataclass(frozen=True)
class GeolocationOptions:
    enable_high_accuracy: bool = True
    timeout_ms: int = GEO_TIMEOUT_MS
    maximum_age_ms: int = GEO_MAXIMUM_AGE_MS

    def as_browser_options(self) -> dict:
        return {
            "enableHighAccuracy": self.enable_high_accuracy,
            "timeout": self.timeout_ms,
            "maximumAge": self.maximum_age_ms,
        }


def _pick(payload: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    return None


def parse_fix(payload: Optional[Mapping[str, Any]]) -> GeoPoint:
    if not payload:
        raise LocationUnavailableError("No location received")
    if not isinstance(payload, Mapping):
        raise LocationUnavailableError("Location fix must be an object with lat and lng")

    error = payload.get("error")
    if error:
        raise LocationUnavailableError(f"Location unavailable: {error}")

    lat = _pick(payload, "lat", "latitude")
    lng = _pick(payload, "lng", "longitude")
    if lat is None or lng is None:
        raise LocationUnavailableError("Location fix is missing coordinates")

    try:
        return GeoPoint(lat=require_latitude(lat), lng=require_longitude(lng))
    except ValidationError as e:
        raise LocationUnavailableError(str(e)) from e
