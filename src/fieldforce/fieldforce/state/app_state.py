from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import Clock, SystemClock
from ..common.ids import IdGenerator
from ..common.logging import get_logger
from ..core.exceptions import SnapshotError
from ..storage.repository import SnapshotStore
from ..tasks.model import Task
from ..users.model import User
from .seed import SEED_USERS, seed_tasks
from .snapshot import AppSnapshot

logger = get_logger(__name__)


class AppState:
    """The single owner of session identity and the three collections.

    Built once per process by the container and handed to services and
    controllers. The snapshot is loaded at construction; every mutation goes
    through ``commit``, which writes the whole snapshot before the in-memory
    collections are swapped, so a failed write leaves state untouched.
    Services hold ``lock`` while they read, check and commit.
    """

    def __init__(self, store: SnapshotStore, *, clock: Clock | None = None, ids: IdGenerator | None = None):
        self._store = store
        self._clock = clock or SystemClock()
        self.ids = ids or IdGenerator(self._clock)
        self._current_user_id: Optional[str] = None
        self.lock = threading.RLock()

        self._users: tuple[User, ...] = ()
        self._tasks: tuple[Task, ...] = ()
        self._attendance: tuple[AttendanceRecord, ...] = ()
        self._load()

    def _load(self) -> None:
        try:
            snap = self._store.load()
        except SnapshotError as e:
            logger.warning("Stored snapshot unreadable, starting from seed data: %s", e)
            snap = None

        if snap is None:
            logger.info("No stored snapshot, using seed data")
            snap = AppSnapshot(users=None, tasks=None, attendance=None)

        self._users = snap.users if snap.users is not None else SEED_USERS
        self._tasks = snap.tasks if snap.tasks is not None else seed_tasks(self.today())
        self._attendance = snap.attendance if snap.attendance is not None else ()
        logger.info(
            "State loaded: users=%d tasks=%d attendance=%d",
            len(self._users),
            len(self._tasks),
            len(self._attendance),
        )

    # -- clock -------------------------------------------------------------

    def now(self) -> datetime:
        return self._clock.now()

    def today(self) -> date:
        return self._clock.now().date()

    # -- session -----------------------------------------------------------

    @property
    def current_user(self) -> Optional[User]:
        if self._current_user_id is None:
            return None
        return self.get_user(self._current_user_id)

    def set_current_user(self, user_id: Optional[str]) -> None:
        self._current_user_id = user_id

    # -- collections -------------------------------------------------------

    @property
    def users(self) -> tuple[User, ...]:
        return self._users

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def attendance(self) -> tuple[AttendanceRecord, ...]:
        return self._attendance

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_task(self, task_id: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def snapshot(self) -> AppSnapshot:
        return AppSnapshot(users=self._users, tasks=self._tasks, attendance=self._attendance)

    def commit(
        self,
        *,
        users: Sequence[User] | None = None,
        tasks: Sequence[Task] | None = None,
        attendance: Sequence[AttendanceRecord] | None = None,
    ) -> None:
        """Persist the next state, then make it current."""
        with self.lock:
            nxt = AppSnapshot(
                users=tuple(users) if users is not None else self._users,
                tasks=tuple(tasks) if tasks is not None else self._tasks,
                attendance=tuple(attendance) if attendance is not None else self._attendance,
            )
            self._store.save(nxt)
            self._users, self._tasks, self._attendance = nxt.users, nxt.tasks, nxt.attendance

    def reset_to_seed(self) -> None:
        self.commit(users=SEED_USERS, tasks=seed_tasks(self.today()), attendance=())
