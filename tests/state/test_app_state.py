from __future__ import annotations

import json

import pytest

from src.fieldforce.fieldforce.core.enums import Role, TaskStatus
from src.fieldforce.fieldforce.location.model import GeoPoint
from src.fieldforce.fieldforce.state.app_state import AppState
from src.fieldforce.fieldforce.state.seed import SEED_USERS


class BrokenStore:
    def load(self):
        return None

    def save(self, snapshot):
        raise OSError("disk full")


def test_empty_store_falls_back_to_seed(store, clock):
    state = AppState(store, clock=clock)

    assert state.users == SEED_USERS
    assert [t.id for t in state.tasks] == ["t1", "t2"]
    assert all(t.status == TaskStatus.PENDING and t.due_date == "2026-02-02" for t in state.tasks)
    assert state.attendance == ()
    assert state.current_user is None


def test_corrupt_store_falls_back_to_seed_and_logs(store, clock, caplog):
    store.blob = "{broken"

    with caplog.at_level("WARNING"):
        state = AppState(store, clock=clock)

    assert state.users == SEED_USERS
    assert "unreadable" in caplog.text


def test_partial_snapshot_fills_missing_collections(store, clock):
    store.blob = json.dumps({"users": [{"id": "u9", "name": "Solo", "role": "ADMIN", "phone": "1"}]})

    state = AppState(store, clock=clock)

    assert [u.id for u in state.users] == ["u9"]
    assert [t.id for t in state.tasks] == ["t1", "t2"]
    assert state.attendance == ()


def test_reload_restores_saved_state(container, store, clock):
    container.auth_service.login("8888888888", Role.EMPLOYEE)
    container.attendance_service.punch_in(GeoPoint(12.9, 77.5))

    reloaded = AppState(store, clock=clock)

    assert reloaded.snapshot() == container.state.snapshot()
    assert reloaded.current_user is None


def test_failed_save_leaves_state_untouched(clock):
    state = AppState(BrokenStore(), clock=clock)
    before = state.snapshot()

    with pytest.raises(OSError):
        state.commit(users=[])

    assert state.snapshot() == before


def test_reset_to_seed_clears_attendance(container, store, clock):
    container.auth_service.login("8888888888", Role.EMPLOYEE)
    container.attendance_service.punch_in(GeoPoint(12.9, 77.5))

    container.state.reset_to_seed()

    assert container.state.attendance == ()
    assert AppState(store, clock=clock).attendance == ()


def test_out_of_range_timestamp_falls_back_to_seed(store, clock, caplog):
    store.blob = json.dumps(
        {
            "users": [
                {
                    "id": "u2",
                    "name": "Rohan (Field)",
                    "role": "EMPLOYEE",
                    "phone": "8888888888",
                    "lastLocation": {"lat": 12.9, "lng": 77.5, "timestamp": 10**20},
                }
            ]
        }
    )

    with caplog.at_level("WARNING"):
        state = AppState(store, clock=clock)

    assert state.users == SEED_USERS
    assert "unreadable" in caplog.text
