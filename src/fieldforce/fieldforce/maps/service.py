from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..core.constants import DEFAULT_MAP_CENTER, DEFAULT_MAP_ZOOM
from ..users.model import User


@dataclass(frozen=True)
class MapMarker:
    user_id: str
    name: str
    lat: float
    lng: float
    timestamp: datetime
    details: Optional[str] = None
    online: bool = False


@dataclass(frozen=True)
class MapView:
    center: tuple[float, float]
    zoom: int
    markers: Sequence[MapMarker]

    def to_dict(self) -> dict:
        return {
            "center": {"lat": self.center[0], "lng": self.center[1]},
            "zoom": self.zoom,
            "markers": [
                {**asdict(m), "timestamp": m.timestamp.isoformat()}
                for m in self.markers
            ],
        }


def build_map_view(
    users: Sequence[User],
    *,
    default_center: tuple[float, float] = DEFAULT_MAP_CENTER,
    zoom: int = DEFAULT_MAP_ZOOM,
    is_online: Callable[[str], bool] | None = None,
) -> MapView:
    """One marker per user with a known location, centered on the first one."""
    markers = [
        MapMarker(
            user_id=u.id,
            name=u.name,
            lat=u.last_location.lat,
            lng=u.last_location.lng,
            timestamp=u.last_location.timestamp,
            details=u.details,
            online=bool(is_online(u.id)) if is_online else False,
        )
        for u in users
        if u.last_location is not None
    ]
    center = (markers[0].lat, markers[0].lng) if markers else tuple(default_center)
    return MapView(center=center, zoom=zoom, markers=markers)
