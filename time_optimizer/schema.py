"""Core value types shared by the scheduler, analytics and store."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from enum import Enum
from functools import total_ordering
from typing import Optional


@total_ordering
class Priority(Enum):
    """Task priority, ordered low < medium < high < urgent."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return _PRIORITY_RANK[self] < _PRIORITY_RANK[other]

    @property
    def color(self) -> str:
        return PRIORITY_COLORS[self]


_PRIORITY_RANK = {Priority.LOW: 1, Priority.MEDIUM: 2, Priority.HIGH: 3, Priority.URGENT: 4}

PRIORITY_COLORS = {
    Priority.URGENT: "#EF4444",
    Priority.HIGH: "#F97316",
    Priority.MEDIUM: "#3B82F6",
    Priority.LOW: "#10B981",
}


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    OVERDUE = "overdue"
    SKIPPED = "skipped"


class BlockType(Enum):
    TASK = "task"
    BREAK = "break"
    DEEP_WORK = "deep-work"
    BUFFER = "buffer"


@dataclass(frozen=True)
class Task:
    """Snapshot of a user task as handed over by the task store."""

    id: str
    title: str
    duration: int
    priority: Priority
    category: str
    created_at: datetime
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    completed: bool = False
    status: TaskStatus = TaskStatus.PENDING
    scheduled_start: Optional[datetime] = None
    scheduled_end: Optional[datetime] = None
    actual_start: Optional[datetime] = None
    actual_end: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        """True when the task still wants a slot in a schedule."""
        return not self.completed and self.status is not TaskStatus.SKIPPED


@dataclass(frozen=True)
class ScheduleBlock:
    """A placed interval of a generated daily timeline."""

    id: str
    type: BlockType
    title: str
    start: datetime
    duration: int
    color: str
    task_id: Optional[str] = None

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "task_id": self.task_id,
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "duration": self.duration,
            "color": self.color,
        }


@dataclass(frozen=True)
class ScheduleConfig:
    """Work-day window and spacing policy, all durations in minutes."""

    work_day_start: int = 9
    work_day_end: int = 18
    break_duration: int = 15
    deep_work_threshold: int = 90
    buffer_time: int = 10

    def __post_init__(self) -> None:
        for name in ("work_day_start", "work_day_end"):
            if not 0 <= getattr(self, name) <= 24:
                raise ValueError(f"{name} must be an hour between 0 and 24")
        if self.work_day_start > self.work_day_end:
            raise ValueError("work_day_start must not be after work_day_end")
        for name in ("break_duration", "deep_work_threshold", "buffer_time"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")


@dataclass(frozen=True)
class CategoryTime:
    category: str
    time: int
    color: str


@dataclass(frozen=True)
class DayProgress:
    day: str
    completed: float
    scheduled: float


@dataclass(frozen=True)
class PriorityCount:
    priority: str
    count: int
    color: str


@dataclass(frozen=True)
class Analytics:
    """Aggregate metrics over one task snapshot."""

    total_tasks: int
    completed_tasks: int
    total_time_scheduled: int
    total_time_completed: int
    productivity_score: int
    categories: tuple[CategoryTime, ...] = ()
    weekly_progress: tuple[DayProgress, ...] = ()
    priority_distribution: tuple[PriorityCount, ...] = ()

    def as_dict(self) -> dict:
        data = asdict(self)
        for key in ("categories", "weekly_progress", "priority_distribution"):
            data[key] = list(data[key])
        return data
