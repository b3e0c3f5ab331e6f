"""Productivity analytics over a task snapshot."""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from datetime import date, timedelta
from typing import Iterable, Optional

from time_optimizer.schema import (
    PRIORITY_COLORS,
    Analytics,
    CategoryTime,
    DayProgress,
    Priority,
    PriorityCount,
    Task,
)

CATEGORY_PALETTE = ("#3B82F6", "#10B981", "#F97316", "#EF4444", "#8B5CF6", "#F59E0B")
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_PRIORITY_ORDER = (Priority.URGENT, Priority.HIGH, Priority.MEDIUM, Priority.LOW)


def productivity_score(completed_minutes: int, scheduled_minutes: int) -> int:
    """Completed share of scheduled time as a 0-100 integer."""

    # half-up rounding, not banker's rounding
    return int(math.floor(completed_minutes / max(scheduled_minutes, 1) * 100 + 0.5))


def category_breakdown(tasks: Iterable[Task]) -> list[CategoryTime]:
    totals: dict[str, int] = defaultdict(int)
    for task in tasks:
        if task.completed:
            totals[task.category] += task.duration

    # zero-time categories are omitted, never zero-filled
    nonzero = [(category, time) for category, time in totals.items() if time > 0]
    return [
        CategoryTime(category=category, time=time, color=CATEGORY_PALETTE[index % len(CATEGORY_PALETTE)])
        for index, (category, time) in enumerate(nonzero)
    ]


def weekly_progress(tasks: Iterable[Task], today: Optional[date] = None) -> list[DayProgress]:
    """Scheduled and completed hours per creation day of the current Mon-Sun week."""

    today = today or date.today()
    week_start = today - timedelta(days=today.weekday())

    scheduled = [0] * 7
    completed = [0] * 7
    for task in tasks:
        offset = (task.created_at.date() - week_start).days
        if 0 <= offset < 7:
            scheduled[offset] += task.duration
            if task.completed:
                completed[offset] += task.duration

    return [
        DayProgress(day=day, completed=completed[i] / 60, scheduled=scheduled[i] / 60)
        for i, day in enumerate(WEEKDAYS)
    ]


def priority_distribution(tasks: Iterable[Task]) -> list[PriorityCount]:
    counts = Counter(task.priority for task in tasks)
    return [
        PriorityCount(priority=priority.value.capitalize(), count=counts[priority], color=PRIORITY_COLORS[priority])
        for priority in _PRIORITY_ORDER
    ]


def generate_analytics(tasks: Iterable[Task], today: Optional[date] = None) -> Analytics:
    """Compute completion counts, time sums and breakdowns for ``tasks``."""

    tasks = list(tasks)
    done = [task for task in tasks if task.completed]
    total_time = sum(task.duration for task in tasks)
    done_time = sum(task.duration for task in done)

    return Analytics(
        total_tasks=len(tasks),
        completed_tasks=len(done),
        total_time_scheduled=total_time,
        total_time_completed=done_time,
        productivity_score=productivity_score(done_time, total_time),
        categories=tuple(category_breakdown(tasks)),
        weekly_progress=tuple(weekly_progress(tasks, today)),
        priority_distribution=tuple(priority_distribution(tasks)),
    )
