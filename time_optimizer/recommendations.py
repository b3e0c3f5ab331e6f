"""Rule-based productivity suggestions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from time_optimizer.schema import Analytics, Priority, Task

HEAVY_WORKLOAD_MINUTES = 480
LOW_PRODUCTIVITY_SCORE = 70


@dataclass(frozen=True)
class _Context:
    tasks: Sequence[Task]
    analytics: Analytics
    now: datetime


def _urgent_open(ctx: _Context) -> int:
    return sum(1 for task in ctx.tasks if task.priority is Priority.URGENT and not task.completed)


def _overdue(ctx: _Context) -> int:
    return sum(1 for task in ctx.tasks if not task.completed and task.deadline is not None and task.deadline < ctx.now)


# (predicate, message) pairs, evaluated in order; a predicate returns a falsy
# value to skip or a count that is formatted into the message.
RULES: tuple[tuple[Callable[[_Context], object], str], ...] = (
    (
        lambda ctx: ctx.analytics.productivity_score < LOW_PRODUCTIVITY_SCORE,
        "Consider breaking large tasks into smaller, manageable chunks",
    ),
    (_urgent_open, "You have {0} urgent task(s) pending. Focus on these first."),
    (_overdue, "{0} task(s) are overdue. Consider rescheduling or reassessing priorities."),
    (
        lambda ctx: ctx.analytics.total_time_scheduled > HEAVY_WORKLOAD_MINUTES,
        "You have a heavy workload today. Consider scheduling breaks between intensive tasks.",
    ),
)


def get_recommendations(tasks: Sequence[Task], analytics: Analytics, now: Optional[datetime] = None) -> list[str]:
    """Return the message of every rule that matches, in rule order."""

    ctx = _Context(tasks=tuple(tasks), analytics=analytics, now=now or datetime.now())
    recommendations = []
    for predicate, message in RULES:
        result = predicate(ctx)
        if result:
            recommendations.append(message.format(result))
    return recommendations
