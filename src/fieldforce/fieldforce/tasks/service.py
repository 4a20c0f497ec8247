from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from ..common.datetime_utils import iso_date
from ..common.logging import get_logger
from ..common.validators import require_latitude, require_longitude, require_non_empty
from ..core.constants import DEFAULT_PROOF_NOTE
from ..core.enums import Role, TaskStatus
from ..core.exceptions import AuthorizationError, NotFoundError, TaskAlreadyCompletedError, ValidationError
from ..location.model import GeoPoint
from ..state.app_state import AppState
from ..users.model import User
from ..users.service import AuthService
from .model import Task, TaskDraft, TaskLocation, TaskProof

logger = get_logger(__name__)


@dataclass(frozen=True)
class UserTasks:
    pending: Sequence[Task]
    completed: Sequence[Task]


class TaskService:
    """Use case: admins assign location-bound tasks, assignees complete them.

    PENDING -> COMPLETED is the only transition; the proof is attached in the
    same step and never changes afterwards.
    """

    def __init__(self, state: AppState, auth: AuthService):
        self._state = state
        self._auth = auth

    def assign_task(self, draft: TaskDraft, *, user: Optional[User] = None) -> Task:
        current = self._auth.require_user(user)
        if current.role != Role.ADMIN:
            raise AuthorizationError("Only admins can assign tasks")

        assigned_to = require_non_empty(draft.assigned_to, "Assignee")
        title = require_non_empty(draft.title, "Title")

        location = TaskLocation(
            lat=require_latitude(draft.location.lat),
            lng=require_longitude(draft.location.lng),
            address=(draft.location.address or "").strip(),
        )

        with self._state.lock:
            assignee = self._state.get_user(assigned_to)
            if not assignee:
                raise ValidationError("Assignee does not exist")
            if assignee.role != Role.EMPLOYEE:
                raise ValidationError("Tasks can only be assigned to employees")

            task = Task(
                id=self._state.ids.next_id(t.id for t in self._state.tasks),
                assigned_to=assignee.id,
                title=title,
                description=(draft.description or "").strip(),
                location=location,
                status=TaskStatus.PENDING,
                due_date=draft.due_date or iso_date(self._state.today()),
            )
            self._state.commit(tasks=[*self._state.tasks, task])
        logger.info("Task assigned: task=%s to=%s", task.id, task.assigned_to)
        return task

    def complete_task(
        self,
        task_id: str,
        *,
        location: GeoPoint,
        note: Optional[str] = None,
        photo_url: Optional[str] = None,
    ) -> Task:
        """Attach proof and mark the task done.

        Who completes it is not checked: any signed-in user may close any
        pending task.
        """
        with self._state.lock:
            task = self._state.get_task(task_id)
            if not task:
                raise NotFoundError("Task does not exist")
            if task.status == TaskStatus.COMPLETED:
                raise TaskAlreadyCompletedError("Task is already completed")
            if task.status != TaskStatus.PENDING:
                raise ValidationError(f"Task is {task.status.value.lower()} and cannot be completed")

            proof = TaskProof(
                timestamp=self._state.now(),
                location=location,
                note=(note or "").strip() or DEFAULT_PROOF_NOTE,
                photo_url=photo_url,
            )
            done = replace(task, status=TaskStatus.COMPLETED, proof=proof)
            self._state.commit(tasks=[done if t.id == task.id else t for t in self._state.tasks])
        logger.info("Task completed: task=%s", task.id)
        return done

    def get(self, task_id: str) -> Optional[Task]:
        return self._state.get_task(task_id)

    def tasks_for(self, user_id: str) -> UserTasks:
        mine = [t for t in self._state.tasks if t.assigned_to == user_id]
        return UserTasks(
            pending=[t for t in mine if t.status == TaskStatus.PENDING],
            completed=[t for t in mine if t.status == TaskStatus.COMPLETED],
        )

    def completed_count(self) -> int:
        return sum(1 for t in self._state.tasks if t.status == TaskStatus.COMPLETED)

    def list_admin_view(self) -> Sequence[dict]:
        rows = []
        for t in self._state.tasks:
            assignee = self._state.get_user(t.assigned_to)
            rows.append(
                {
                    "id": t.id,
                    "title": t.title,
                    "assignee": assignee.name if assignee else "Unknown",
                    "status": t.status.value,
                    "proof": (t.proof.note if t.proof and t.proof.note else "-"),
                }
            )
        return rows
