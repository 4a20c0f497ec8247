from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import iso_date
from ..common.logging import get_logger
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, DayState
from ..core.exceptions import ValidationError
from ..location.model import GeoPoint
from ..state.app_state import AppState
from ..users.model import User
from ..users.service import AuthService
from .model import AttendanceRecord, PunchEvent

logger = get_logger(__name__)


class AttendanceService:
    """Use case: punch in / punch out for the acting user.

    Per user and day the record moves NO_RECORD -> PUNCHED_IN -> PUNCHED_OUT
    and never back. A punch that does not fit the current state raises
    ``ValidationError`` and changes nothing.
    """

    def __init__(self, state: AppState, auth: AuthService):
        self._state = state
        self._auth = auth

    def _today(self) -> str:
        return iso_date(self._state.today())

    def today_record(self, user_id: str) -> Optional[AttendanceRecord]:
        today = self._today()
        return next((a for a in self._state.attendance if a.user_id == user_id and a.date == today), None)

    def day_state(self, user_id: str) -> DayState:
        record = self.today_record(user_id)
        return record.day_state if record else DayState.NO_RECORD

    def punch_in(self, location: GeoPoint, *, user: Optional[User] = None) -> AttendanceRecord:
        with self._state.lock:
            user = self._auth.require_user(user)
            if self.today_record(user.id):
                raise ValidationError("You have already punched in today")

            record = AttendanceRecord(
                id=self._state.ids.next_id(a.id for a in self._state.attendance),
                user_id=user.id,
                date=self._today(),
                punch_in=PunchEvent(timestamp=self._state.now(), location=location),
                punch_out=None,
                status=AttendanceStatus.PRESENT,
            )
            self._state.commit(attendance=[*self._state.attendance, record])
        logger.info("Punch in: user=%s date=%s", user.id, record.date)
        return record

    def punch_out(self, location: GeoPoint, *, user: Optional[User] = None) -> AttendanceRecord:
        with self._state.lock:
            user = self._auth.require_user(user)
            record = self.today_record(user.id)
            if not record:
                raise ValidationError("You have not punched in today")
            if not record.is_open:
                raise ValidationError("You have already punched out today")

            closed = replace(record, punch_out=PunchEvent(timestamp=self._state.now(), location=location))
            self._state.commit(attendance=[closed if a.id == record.id else a for a in self._state.attendance])
        logger.info("Punch out: user=%s date=%s", user.id, record.date)
        return closed

    def is_online(self, user_id: str) -> bool:
        record = self.today_record(user_id)
        return bool(record and record.is_open)

    def active_count(self) -> int:
        today = self._today()
        return sum(1 for a in self._state.attendance if a.date == today and a.punch_out is None)

    def history(self, user_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        rows = [a for a in self._state.attendance if a.user_id == user_id]
        rows.sort(key=lambda a: a.date, reverse=True)
        return rows[:limit]

    def get_today_ui(self, user_id: str) -> dict:
        record = self.today_record(user_id)
        state = record.day_state if record else DayState.NO_RECORD

        label, hint = {
            DayState.NO_RECORD: ("Start Day", "Record your entry time."),
            DayState.PUNCHED_IN: ("On Duty", "Tracking visit locations."),
            DayState.PUNCHED_OUT: ("Shift Done", "Syncing data to admin."),
        }[state]

        hours = record.worked_hours if record else None
        return {
            "state": state.value,
            "label": label,
            "hint": hint,
            "entry_time": record.punch_in.timestamp.strftime("%H:%M") if record and record.punch_in else "--:--",
            "hours": f"{hours:.1f}h" if hours is not None else "--",
        }
