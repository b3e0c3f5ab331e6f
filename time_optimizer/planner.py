"""One-shot planning report combining schedule, analytics and suggestions."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from time_optimizer.analytics import generate_analytics
from time_optimizer.recommendations import get_recommendations
from time_optimizer.scheduling import BlockIdFactory, generate_schedule, unscheduled_task_ids
from time_optimizer.schema import ScheduleConfig, Task


def plan_day(
    tasks: Sequence[Task],
    reference: Optional[datetime] = None,
    now: Optional[datetime] = None,
    config: Optional[ScheduleConfig] = None,
    block_ids: Optional[BlockIdFactory] = None,
) -> dict:
    """Build a JSON-ready report for the day of ``reference``."""

    now = now or datetime.now()
    reference = reference or now
    schedule = generate_schedule(tasks, reference=reference, config=config, block_ids=block_ids)
    analytics = generate_analytics(tasks, today=now.date())

    return {
        "date": reference.date().isoformat(),
        "schedule": [block.as_dict() for block in schedule],
        "unscheduled": unscheduled_task_ids(tasks, schedule),
        "analytics": analytics.as_dict(),
        "recommendations": get_recommendations(tasks, analytics, now=now),
    }
