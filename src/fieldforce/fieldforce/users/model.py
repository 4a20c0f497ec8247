from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class LastLocation:
    lat: float
    lng: float
    timestamp: datetime


@dataclass(frozen=True)
class User:
    """Roster entry.

    The phone number doubles as the login identifier. ``last_location`` is
    the only field that changes after seeding.
    """

    id: str
    name: str
    role: Role
    phone: str
    last_location: Optional[LastLocation] = None
    details: Optional[str] = None

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else ""
