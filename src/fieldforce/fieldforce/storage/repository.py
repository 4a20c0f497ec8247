from __future__ import annotations

from typing import Optional, Protocol

from ..state.snapshot import AppSnapshot


class SnapshotStore(Protocol):
    """Persistence port for the whole-state snapshot.

    ``load`` returns None when nothing was stored yet and raises
    ``SnapshotError`` when the stored blob cannot be decoded. ``save`` replaces
    the previous snapshot in one write.
    """

    def load(self) -> Optional[AppSnapshot]:
        raise NotImplementedError

    def save(self, snapshot: AppSnapshot) -> None:
        raise NotImplementedError
