from __future__ import annotations

import json

import pytest

from src.fieldforce.fieldforce.core.enums import Role, TaskStatus
from src.fieldforce.fieldforce.core.exceptions import SnapshotError
from src.fieldforce.fieldforce.location.model import GeoPoint
from src.fieldforce.fieldforce.state import snapshot as codec
from src.fieldforce.fieldforce.tasks.model import TaskDraft, TaskLocation


def _busy_state(container, clock):
    c = container
    c.auth_service.login("9999999999", Role.ADMIN)
    task = c.task_service.assign_task(
        TaskDraft(assigned_to="u3", title="Audit", description="Stock audit", location=TaskLocation(12.93, 77.62, "HSR"))
    )
    c.auth_service.login("8888888888", Role.EMPLOYEE)
    c.auth_service.update_location(12.971234, 77.594567)
    c.attendance_service.punch_in(GeoPoint(12.9, 77.5))
    clock.advance(hours=3, milliseconds=250)
    c.attendance_service.punch_out(GeoPoint(12.91, 77.51))
    c.task_service.complete_task(task.id, location=GeoPoint(12.93, 77.62), note="ok", photo_url="x.png")
    return c.state.snapshot()


def test_round_trip_is_exact(container, clock):
    snap = _busy_state(container, clock)

    restored = codec.loads(codec.dumps(snap))

    assert restored == snap


def test_wire_layout_uses_camel_case_and_epoch_ms(container, clock):
    snap = _busy_state(container, clock)
    data = json.loads(codec.dumps(snap))

    assert set(data) == {"users", "tasks", "attendance"}
    rec = data["attendance"][0]
    assert rec["userId"] == "u2"
    assert isinstance(rec["punchIn"]["timestamp"], int)
    assert rec["punchOut"]["timestamp"] - rec["punchIn"]["timestamp"] == 3 * 3600 * 1000 + 250
    rohan = next(u for u in data["users"] if u["id"] == "u2")
    assert rohan["lastLocation"]["lat"] == 12.971234
    done = next(t for t in data["tasks"] if t["status"] == TaskStatus.COMPLETED.value)
    assert done["assignedTo"] == "u3"
    assert done["proof"]["photoUrl"] == "x.png"


def test_missing_collections_decode_as_none():
    snap = codec.loads(json.dumps({"users": []}))
    assert snap.users == ()
    assert snap.tasks is None
    assert snap.attendance is None


@pytest.mark.parametrize(
    "blob",
    [
        "not json",
        "[]",
        json.dumps({"users": {"id": "u1"}}),
        json.dumps({"users": [{"id": "u1"}]}),
        json.dumps({"tasks": [{"id": "t1", "assignedTo": "u2", "title": "x", "location": {}, "status": "PENDING"}]}),
        json.dumps({"attendance": [{"id": "a", "userId": "u2", "date": "2026-02-02", "status": "LATE"}]}),
        json.dumps(
            {"users": [{"id": "u2", "name": "R", "role": "EMPLOYEE", "phone": "8", "lastLocation": {"lat": 1, "lng": 2, "timestamp": 10**20}}]}
        ),
    ],
)
def test_malformed_blobs_raise_snapshot_error(blob):
    with pytest.raises(SnapshotError):
        codec.loads(blob)
