from __future__ import annotations

from typing import Iterable

from .datetime_utils import Clock, to_epoch_ms


class IdGenerator:
    """Epoch-millisecond identifiers, strictly increasing within a process.

    Two calls in the same millisecond still get distinct ids, and an id that
    already exists in the target collection is skipped.
    """

    def __init__(self, clock: Clock):
        self._clock = clock
        self._last = 0

    def next_id(self, existing: Iterable[str] = ()) -> str:
        taken = set(existing)
        candidate = max(to_epoch_ms(self._clock.now()), self._last + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last = candidate
        return str(candidate)
