from __future__ import annotations

from src.fieldforce.fieldforce.common.datetime_utils import to_epoch_ms
from src.fieldforce.fieldforce.common.ids import IdGenerator


def test_ids_are_epoch_ms_and_strictly_increasing(clock):
    ids = IdGenerator(clock)
    first = ids.next_id()
    second = ids.next_id()

    assert first == str(to_epoch_ms(clock.now()))
    assert int(second) == int(first) + 1


def test_existing_ids_are_skipped(clock):
    ms = to_epoch_ms(clock.now())
    ids = IdGenerator(clock)

    assert ids.next_id([str(ms), str(ms + 1)]) == str(ms + 2)


def test_clock_moving_back_does_not_reuse_ids(clock):
    ids = IdGenerator(clock)
    first = ids.next_id()
    clock.advance(seconds=-5)

    assert int(ids.next_id()) > int(first)
