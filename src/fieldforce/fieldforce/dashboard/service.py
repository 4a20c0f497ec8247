from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..attendance.service import AttendanceService
from ..core.constants import DEFAULT_MAP_CENTER
from ..maps.service import MapView, build_map_view
from ..tasks.service import TaskService
from ..users.service import UserService


@dataclass(frozen=True)
class DashboardStats:
    total: int
    active: int
    tasks_done: int


class AdminDashboardService:
    """Read model for the admin dashboard: counts, field team, live map."""

    def __init__(
        self,
        users: UserService,
        attendance: AttendanceService,
        tasks: TaskService,
        *,
        default_center: tuple[float, float] = DEFAULT_MAP_CENTER,
    ):
        self._users = users
        self._attendance = attendance
        self._tasks = tasks
        self._default_center = default_center

    @property
    def default_center(self) -> tuple[float, float]:
        return self._default_center

    def stats(self) -> DashboardStats:
        return DashboardStats(
            total=len(self._users.employees()),
            active=self._attendance.active_count(),
            tasks_done=self._tasks.completed_count(),
        )

    def field_team(self) -> Sequence[dict]:
        return [
            {"id": u.id, "name": u.name, "details": u.details or "", "online": self._attendance.is_online(u.id)}
            for u in self._users.employees()
        ]

    def map_view(self) -> MapView:
        return build_map_view(
            self._users.employees(),
            default_center=self._default_center,
            is_online=self._attendance.is_online,
        )
