from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision so times survive the epoch-ms wire format."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def now_local() -> datetime:
    """Current local time, timezone-aware, millisecond precision."""
    return truncate_to_millis(datetime.now().astimezone())


class SystemClock:
    """Wall clock. Tests inject a fixed clock instead."""

    def now(self) -> datetime:
        return now_local()


def to_epoch_ms(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.astimezone()
    return int(round(value.timestamp() * 1000))


def from_epoch_ms(value: int) -> datetime:
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc).astimezone()
    except (OverflowError, OSError) as e:
        raise ValueError(f"Epoch milliseconds out of range: {value!r}") from e


def iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()
