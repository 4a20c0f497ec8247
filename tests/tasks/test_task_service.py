from __future__ import annotations

import pytest

from src.fieldforce.fieldforce.core.enums import Role, TaskStatus
from src.fieldforce.fieldforce.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    TaskAlreadyCompletedError,
    ValidationError,
)
from src.fieldforce.fieldforce.location.model import GeoPoint
from src.fieldforce.fieldforce.tasks.model import TaskDraft, TaskLocation

MG_ROAD = TaskLocation(lat=12.9716, lng=77.5946, address="MG Road")


@pytest.fixture
def admin(container):
    assert container.auth_service.login("9999999999", Role.ADMIN)
    return container.auth_service.current_user()


def test_assign_then_complete(container, clock, admin):
    svc = container.task_service
    prior_ids = {t.id for t in container.state.tasks}

    task = svc.assign_task(TaskDraft(assigned_to="u2", title="X", location=MG_ROAD))

    assert task.id not in prior_ids
    assert task.status == TaskStatus.PENDING
    assert task.proof is None
    assert task.due_date == "2026-02-02"

    clock.advance(minutes=30)
    done = svc.complete_task(task.id, location=GeoPoint(12.97, 77.59), note="done", photo_url="p.jpg")

    assert done.status == TaskStatus.COMPLETED
    assert done.proof.note == "done"
    assert done.proof.photo_url == "p.jpg"
    assert done.proof.timestamp == clock.now()
    assert done.proof.location == GeoPoint(12.97, 77.59)
    assert done.assigned_to == "u2"
    assert svc.get(task.id) == done


def test_assigned_ids_are_unique_within_same_millisecond(container, admin):
    svc = container.task_service
    a = svc.assign_task(TaskDraft(assigned_to="u2", title="A", location=MG_ROAD))
    b = svc.assign_task(TaskDraft(assigned_to="u3", title="B", location=MG_ROAD))

    assert a.id != b.id
    assert int(b.id) > int(a.id)


@pytest.mark.parametrize(
    "assigned_to,title",
    [("", "X"), ("u2", ""), ("u2", "   ")],
)
def test_assign_requires_assignee_and_title(container, store, admin, assigned_to, title):
    with pytest.raises(ValidationError):
        container.task_service.assign_task(TaskDraft(assigned_to=assigned_to, title=title, location=MG_ROAD))
    assert store.saves == 0


def test_assign_rejects_unknown_or_admin_assignee(container, admin):
    with pytest.raises(ValidationError):
        container.task_service.assign_task(TaskDraft(assigned_to="u99", title="X", location=MG_ROAD))
    with pytest.raises(ValidationError):
        container.task_service.assign_task(TaskDraft(assigned_to="u1", title="X", location=MG_ROAD))


def test_only_admins_assign(container):
    container.auth_service.login("8888888888", Role.EMPLOYEE)
    with pytest.raises(AuthorizationError):
        container.task_service.assign_task(TaskDraft(assigned_to="u3", title="X", location=MG_ROAD))


def test_complete_unknown_task(container):
    with pytest.raises(NotFoundError):
        container.task_service.complete_task("missing", location=GeoPoint(0.5, 0.5))


def test_complete_twice_keeps_first_proof(container, clock):
    svc = container.task_service
    first = svc.complete_task("t1", location=GeoPoint(12.97, 77.59), note="first")

    clock.advance(hours=1)
    with pytest.raises(TaskAlreadyCompletedError):
        svc.complete_task("t1", location=GeoPoint(1.0, 1.0), note="second")

    assert svc.get("t1") == first


def test_blank_note_gets_default(container):
    done = container.task_service.complete_task("t2", location=GeoPoint(12.93, 77.62), note="  ")
    assert done.proof.note == "Task completed"


def test_proof_present_iff_completed(container, admin):
    svc = container.task_service
    svc.assign_task(TaskDraft(assigned_to="u2", title="Y", location=MG_ROAD))
    svc.complete_task("t1", location=GeoPoint(12.97, 77.59))

    for t in container.state.tasks:
        assert (t.proof is not None) == (t.status == TaskStatus.COMPLETED)


def test_tasks_for_user_and_admin_view(container):
    svc = container.task_service
    svc.complete_task("t1", location=GeoPoint(12.97, 77.59), note="visited")

    mine = svc.tasks_for("u2")
    assert [t.id for t in mine.completed] == ["t1"]
    assert mine.pending == []
    assert svc.completed_count() == 1

    rows = {r["id"]: r for r in svc.list_admin_view()}
    assert rows["t1"]["assignee"] == "Rohan (Field)"
    assert rows["t1"]["proof"] == "visited"
    assert rows["t2"]["proof"] == "-"


def test_any_signed_in_user_may_complete_a_pending_task(container):
    container.auth_service.login("7777777777", Role.EMPLOYEE)

    done = container.task_service.complete_task("t1", location=GeoPoint(12.97, 77.59), note="covered for Rohan")

    assert done.assigned_to == "u2"
    assert done.status == TaskStatus.COMPLETED


def test_assign_task_with_explicit_admin_ignores_core_session(container):
    admin = container.user_service.get("u1")
    container.auth_service.login("8888888888", Role.EMPLOYEE)

    task = container.task_service.assign_task(TaskDraft(assigned_to="u3", title="Z", location=MG_ROAD), user=admin)

    assert task.assigned_to == "u3"
    assert container.auth_service.current_user().id == "u2"
