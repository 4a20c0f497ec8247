from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from src.fieldforce.fieldforce.container import build_container
from src.fieldforce.fieldforce.state import snapshot as codec
from src.fieldforce.fieldforce.state.snapshot import AppSnapshot

IST = timezone(timedelta(hours=5, minutes=30))


class FixedClock:
    """Clock that only moves when a test says so."""

    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now = self._now + timedelta(**kwargs)

    def set(self, now: datetime) -> None:
        self._now = now


class InMemorySnapshotStore:
    """Keeps the encoded blob, so every save goes through the real codec."""

    def __init__(self, blob: Optional[str] = None):
        self.blob = blob
        self.saves = 0

    def load(self) -> Optional[AppSnapshot]:
        if self.blob is None:
            return None
        return codec.loads(self.blob)

    def save(self, snapshot: AppSnapshot) -> None:
        self.blob = codec.dumps(snapshot)
        self.saves += 1


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 15, 0, tzinfo=IST)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture
def container(store, clock):
    return build_container(store=store, clock=clock)
