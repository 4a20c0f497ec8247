"""Example: drive the service layer without Flask.

Controllers are a thin layer; the attendance and task rules live in services.
"""

import tempfile
from pathlib import Path

from src.fieldforce.fieldforce.container import build_container
from src.fieldforce.fieldforce.core.enums import Role
from src.fieldforce.fieldforce.location.model import GeoPoint
from src.fieldforce.fieldforce.storage.json_file_store import JsonFileSnapshotStore
from src.fieldforce.fieldforce.tasks.model import TaskDraft, TaskLocation


def main():
    store = JsonFileSnapshotStore(Path(tempfile.mkdtemp()) / "store.json")
    c = build_container(store=store)

    c.auth_service.login("9999999999", Role.ADMIN)
    task = c.task_service.assign_task(
        TaskDraft(assigned_to="u2", title="Site survey", location=TaskLocation(12.95, 77.6, "Indiranagar"))
    )

    c.auth_service.login("8888888888", Role.EMPLOYEE)
    c.attendance_service.punch_in(GeoPoint(12.9, 77.5))
    c.task_service.complete_task(task.id, location=GeoPoint(12.95, 77.6), note="Surveyed")
    c.attendance_service.punch_out(GeoPoint(12.91, 77.51))

    print(c.attendance_service.get_today_ui("u2"))
    print(c.task_service.list_admin_view())


if __name__ == "__main__":
    main()
