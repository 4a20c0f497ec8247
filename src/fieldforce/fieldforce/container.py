from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.service import AttendanceService
from .common.datetime_utils import Clock
from .core.constants import DEFAULT_MAP_CENTER, STORAGE_KEY
from .dashboard.service import AdminDashboardService
from .database.connection import DatabaseConnection, DBConfig
from .location.geolocation import GeolocationOptions
from .state.app_state import AppState
from .storage.json_file_store import JsonFileSnapshotStore
from .storage.mysql_snapshot_store import MySQLSnapshotStore
from .storage.repository import SnapshotStore
from .tasks.service import TaskService
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: SnapshotStore
    state: AppState

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    task_service: TaskService
    dashboard_service: AdminDashboardService

    geo_options: GeolocationOptions


def build_store(
    *,
    backend: str = "file",
    store_path: str | Path = "instance/fieldforce_store.json",
    storage_key: str = STORAGE_KEY,
    db_config: dict | None = None,
) -> SnapshotStore:
    backend = (backend or "file").lower()
    if backend == "file":
        return JsonFileSnapshotStore(store_path, key=storage_key)
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        return MySQLSnapshotStore(conn, key=storage_key)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(
    *,
    store: SnapshotStore,
    clock: Clock | None = None,
    geo_options: GeolocationOptions | None = None,
    map_default_center: tuple[float, float] = DEFAULT_MAP_CENTER,
) -> Container:
    state = AppState(store, clock=clock)

    auth_service = AuthService(state)
    user_service = UserService(state)
    attendance_service = AttendanceService(state, auth_service)
    task_service = TaskService(state, auth_service)
    dashboard_service = AdminDashboardService(
        user_service,
        attendance_service,
        task_service,
        default_center=map_default_center,
    )

    return Container(
        store=store,
        state=state,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        task_service=task_service,
        dashboard_service=dashboard_service,
        geo_options=geo_options or GeolocationOptions(),
    )
