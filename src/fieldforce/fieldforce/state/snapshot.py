"""Snapshot codec.

The whole application state is persisted as one JSON object::

    {"users": [...], "tasks": [...], "attendance": [...]}

Field names are camelCase and times are epoch milliseconds, which keeps the
blob readable by the browser build of the app that shares the same key.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from ..attendance.model import AttendanceRecord, PunchEvent
from ..common.datetime_utils import from_epoch_ms, to_epoch_ms
from ..core.enums import AttendanceStatus, Role, TaskStatus
from ..core.exceptions import SnapshotError
from ..location.model import GeoPoint
from ..tasks.model import Task, TaskLocation, TaskProof
from ..users.model import LastLocation, User


@dataclass(frozen=True)
class AppSnapshot:
    """Users, tasks and attendance in stored order.

    A decoded snapshot may carry ``None`` for a collection the blob did not
    contain; the state core fills those from seed data.
    """

    users: Optional[tuple[User, ...]]
    tasks: Optional[tuple[Task, ...]]
    attendance: Optional[tuple[AttendanceRecord, ...]]


def _point_to_dict(p: GeoPoint) -> dict:
    return {"lat": p.lat, "lng": p.lng}


def _point_from_dict(d: dict) -> GeoPoint:
    return GeoPoint(lat=float(d["lat"]), lng=float(d["lng"]))


def _punch_to_dict(e: Optional[PunchEvent]) -> Optional[dict]:
    if e is None:
        return None
    return {"timestamp": to_epoch_ms(e.timestamp), "location": _point_to_dict(e.location)}


def _punch_from_dict(d: Optional[dict]) -> Optional[PunchEvent]:
    if not d:
        return None
    return PunchEvent(timestamp=from_epoch_ms(d["timestamp"]), location=_point_from_dict(d["location"]))


def user_to_dict(u: User) -> dict:
    out: dict[str, Any] = {"id": u.id, "name": u.name, "role": u.role.value, "phone": u.phone}
    if u.last_location is not None:
        out["lastLocation"] = {
            "lat": u.last_location.lat,
            "lng": u.last_location.lng,
            "timestamp": to_epoch_ms(u.last_location.timestamp),
        }
    if u.details is not None:
        out["details"] = u.details
    return out


def user_from_dict(d: dict) -> User:
    loc = d.get("lastLocation")
    return User(
        id=str(d["id"]),
        name=d["name"],
        role=Role(d["role"]),
        phone=str(d["phone"]),
        last_location=(
            LastLocation(lat=float(loc["lat"]), lng=float(loc["lng"]), timestamp=from_epoch_ms(loc["timestamp"]))
            if loc
            else None
        ),
        details=d.get("details"),
    )


def attendance_to_dict(r: AttendanceRecord) -> dict:
    out: dict[str, Any] = {"id": r.id, "userId": r.user_id, "date": r.date, "status": r.status.value}
    if r.punch_in is not None:
        out["punchIn"] = _punch_to_dict(r.punch_in)
    if r.punch_out is not None:
        out["punchOut"] = _punch_to_dict(r.punch_out)
    return out


def attendance_from_dict(d: dict) -> AttendanceRecord:
    return AttendanceRecord(
        id=str(d["id"]),
        user_id=str(d["userId"]),
        date=d["date"],
        punch_in=_punch_from_dict(d.get("punchIn")),
        punch_out=_punch_from_dict(d.get("punchOut")),
        status=AttendanceStatus(d.get("status", AttendanceStatus.PRESENT.value)),
    )


def task_to_dict(t: Task) -> dict:
    out: dict[str, Any] = {
        "id": t.id,
        "assignedTo": t.assigned_to,
        "title": t.title,
        "description": t.description,
        "location": {"lat": t.location.lat, "lng": t.location.lng, "address": t.location.address},
        "status": t.status.value,
    }
    if t.due_date is not None:
        out["dueDate"] = t.due_date
    if t.proof is not None:
        out["proof"] = {
            "note": t.proof.note,
            "photoUrl": t.proof.photo_url,
            "timestamp": to_epoch_ms(t.proof.timestamp),
            "location": _point_to_dict(t.proof.location),
        }
    return out


def task_from_dict(d: dict) -> Task:
    loc = d["location"]
    proof = d.get("proof")
    return Task(
        id=str(d["id"]),
        assigned_to=str(d["assignedTo"]),
        title=d["title"],
        description=d.get("description") or "",
        location=TaskLocation(lat=float(loc["lat"]), lng=float(loc["lng"]), address=loc.get("address") or ""),
        status=TaskStatus(d["status"]),
        due_date=d.get("dueDate"),
        proof=(
            TaskProof(
                timestamp=from_epoch_ms(proof["timestamp"]),
                location=_point_from_dict(proof["location"]),
                note=proof.get("note"),
                photo_url=proof.get("photoUrl"),
            )
            if proof
            else None
        ),
    )


def snapshot_to_dict(snapshot: AppSnapshot) -> dict:
    return {
        "users": [user_to_dict(u) for u in snapshot.users or ()],
        "tasks": [task_to_dict(t) for t in snapshot.tasks or ()],
        "attendance": [attendance_to_dict(r) for r in snapshot.attendance or ()],
    }


def snapshot_from_dict(data: Any) -> AppSnapshot:
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    def _collection(name: str, decode):
        raw = data.get(name)
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise SnapshotError(f"Snapshot field {name!r} must be a list")
        return tuple(decode(item) for item in raw)

    try:
        return AppSnapshot(
            users=_collection("users", user_from_dict),
            tasks=_collection("tasks", task_from_dict),
            attendance=_collection("attendance", attendance_from_dict),
        )
    except SnapshotError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotError(f"Malformed snapshot: {e}") from e


def dumps(snapshot: AppSnapshot) -> str:
    return json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False)


def loads(blob: str) -> AppSnapshot:
    try:
        data = json.loads(blob)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Snapshot is not valid JSON: {e}") from e
    return snapshot_from_dict(data)
