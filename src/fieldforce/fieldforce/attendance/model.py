from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, DayState
from ..location.model import GeoPoint


@dataclass(frozen=True)
class PunchEvent:
    timestamp: datetime
    location: GeoPoint


@dataclass(frozen=True)
class AttendanceRecord:
    """One user's attendance on one calendar day (``date`` is YYYY-MM-DD)."""

    id: str
    user_id: str
    date: str
    punch_in: Optional[PunchEvent]
    punch_out: Optional[PunchEvent]
    status: AttendanceStatus = AttendanceStatus.PRESENT

    @property
    def day_state(self) -> DayState:
        if self.punch_out is not None:
            return DayState.PUNCHED_OUT
        return DayState.PUNCHED_IN

    @property
    def is_open(self) -> bool:
        return self.punch_in is not None and self.punch_out is None

    @property
    def worked_hours(self) -> Optional[float]:
        if not self.punch_in or not self.punch_out:
            return None
        seconds = (self.punch_out.timestamp - self.punch_in.timestamp).total_seconds()
        return seconds / 3600
