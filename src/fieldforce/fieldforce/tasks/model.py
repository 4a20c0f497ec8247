from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TaskStatus
from ..location.model import GeoPoint


@dataclass(frozen=True)
class TaskLocation:
    lat: float
    lng: float
    address: str


@dataclass(frozen=True)
class TaskProof:
    """Proof of completion, attached exactly once when the task completes."""

    timestamp: datetime
    location: GeoPoint
    note: Optional[str] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class Task:
    id: str
    assigned_to: str
    title: str
    description: str
    location: TaskLocation
    status: TaskStatus
    due_date: Optional[str] = None
    proof: Optional[TaskProof] = None


@dataclass(frozen=True)
class TaskDraft:
    """Admin input for a new task: everything but id and status."""

    assigned_to: str
    title: str
    location: TaskLocation
    description: str = ""
    due_date: Optional[str] = None
