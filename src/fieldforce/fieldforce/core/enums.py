from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roster role, also the login selector."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class AttendanceStatus(str, Enum):
    """Status stored on an attendance record.

    Only PRESENT is assigned today; the other values are kept for data
    written by future leave/absence flows.
    """

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    ON_LEAVE = "ON_LEAVE"


class TaskStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


class DayState(str, Enum):
    """Derived attendance state of one user on one day."""

    NO_RECORD = "NO_RECORD"
    PUNCHED_IN = "PUNCHED_IN"
    PUNCHED_OUT = "PUNCHED_OUT"
