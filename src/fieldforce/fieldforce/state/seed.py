from __future__ import annotations

from datetime import date

from ..common.datetime_utils import iso_date
from ..core.enums import Role, TaskStatus
from ..tasks.model import Task, TaskLocation
from ..users.model import User

SEED_USERS: tuple[User, ...] = (
    User(id="u1", name="Naitik (Admin)", role=Role.ADMIN, phone="9999999999"),
    User(id="u2", name="Rohan (Field)", role=Role.EMPLOYEE, phone="8888888888", details="Sales Executive"),
    User(id="u3", name="Amit (Field)", role=Role.EMPLOYEE, phone="7777777777", details="Service Engineer"),
)


def seed_tasks(today: date) -> tuple[Task, ...]:
    """Demo tasks, due on the day the store is first initialized."""
    due = iso_date(today)
    return (
        Task(
            id="t1",
            assigned_to="u2",
            title="Visit Tech Park Client",
            description="Verify server installation requirements.",
            location=TaskLocation(lat=12.9716, lng=77.5946, address="MG Road, Bangalore"),
            status=TaskStatus.PENDING,
            due_date=due,
        ),
        Task(
            id="t2",
            assigned_to="u3",
            title="Delivery @ Koramangala",
            description="Deliver spare parts package.",
            location=TaskLocation(lat=12.9352, lng=77.6245, address="Koramangala 4th Block"),
            status=TaskStatus.PENDING,
            due_date=due,
        ),
    )
