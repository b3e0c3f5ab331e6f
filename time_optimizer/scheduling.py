"""Greedy daily schedule generation and rescheduling."""

from __future__ import annotations

import itertools
import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional

from time_optimizer.schema import BlockType, Priority, ScheduleBlock, ScheduleConfig, Task

logger = logging.getLogger(__name__)

BlockIdFactory = Callable[[BlockType], str]

_PRIORITY_WEIGHTS = {Priority.URGENT: 4, Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}

BREAK_COLOR = "#10B981"
BUFFER_COLOR = "#6B7280"


def uuid_block_ids(block_type: BlockType) -> str:
    return f"{block_type.value}-{uuid.uuid4().hex}"


def sequential_block_ids(start: int = 1) -> BlockIdFactory:
    """Return a counter-backed id factory: ``task-1``, ``buffer-2``, ..."""

    counter = itertools.count(start)

    def _next(block_type: BlockType) -> str:
        return f"{block_type.value}-{next(counter)}"

    return _next


def priority_weight(priority: Priority) -> int:
    return _PRIORITY_WEIGHTS[priority]


def deadline_urgency(task: Task, reference: datetime) -> int:
    """Stepped urgency from the hours left until the task deadline."""

    if task.deadline is None:
        return 1
    hours = (task.deadline - reference).total_seconds() / 3600.0
    if hours <= 24:
        return 4
    if hours <= 72:
        return 3
    if hours <= 168:
        return 2
    return 1


def task_score(task: Task, reference: datetime) -> float:
    return priority_weight(task.priority) * 0.6 + deadline_urgency(task, reference) * 0.4


def prioritize_tasks(tasks: Iterable[Task], reference: datetime) -> list[Task]:
    """Order tasks by composite score, highest first.

    Equal scores keep snapshot order, then fall back to the task id.
    """

    indexed = list(enumerate(tasks))
    ranked = sorted(indexed, key=lambda item: (-task_score(item[1], reference), item[0], item[1].id))
    return [task for _, task in ranked]


def work_day_window(reference: datetime, config: ScheduleConfig) -> tuple[datetime, datetime]:
    day = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    return day + timedelta(hours=config.work_day_start), day + timedelta(hours=config.work_day_end)


def _block(block_ids: BlockIdFactory, block_type: BlockType, title: str, start: datetime, duration: int, color: str,
           task_id: Optional[str] = None) -> ScheduleBlock:
    return ScheduleBlock(
        id=block_ids(block_type),
        type=block_type,
        title=title,
        start=start,
        duration=duration,
        color=color,
        task_id=task_id,
    )


def generate_schedule(
    tasks: Iterable[Task],
    reference: Optional[datetime] = None,
    config: Optional[ScheduleConfig] = None,
    block_ids: Optional[BlockIdFactory] = None,
    not_before: Optional[datetime] = None,
) -> list[ScheduleBlock]:
    """Place open tasks into the work-day window of ``reference``.

    One pass over the prioritized tasks: a buffer precedes every block but the
    first, long tasks are followed by a break, and a task that does not fit
    before the window end is left out. ``not_before`` moves the first slot
    later than the window start.
    """

    reference = reference or datetime.now()
    config = config or ScheduleConfig()
    block_ids = block_ids or uuid_block_ids

    window_start, window_end = work_day_window(reference, config)
    cursor = window_start if not_before is None else max(window_start, not_before)
    schedule: list[ScheduleBlock] = []

    for task in prioritize_tasks([t for t in tasks if t.is_open], reference):
        buffer = config.buffer_time if schedule else 0
        task_start = cursor + timedelta(minutes=buffer)
        if task_start + timedelta(minutes=task.duration) > window_end:
            logger.debug("Task %s (%d min) does not fit before %s, dropped", task.id, task.duration, window_end)
            continue

        if buffer:
            schedule.append(_block(block_ids, BlockType.BUFFER, "Buffer Time", cursor, buffer, BUFFER_COLOR))
        schedule.append(
            _block(block_ids, BlockType.TASK, task.title, task_start, task.duration, task.priority.color, task.id)
        )
        cursor = task_start + timedelta(minutes=task.duration)

        if task.duration >= config.deep_work_threshold:
            break_end = cursor + timedelta(minutes=config.break_duration)
            if break_end <= window_end and config.break_duration > 0:
                schedule.append(_block(block_ids, BlockType.BREAK, "Break", cursor, config.break_duration, BREAK_COLOR))
                cursor = break_end

    logger.debug("Generated %d blocks for %s", len(schedule), window_start.date())
    return schedule


def reschedule(
    current_schedule: Iterable[ScheduleBlock],
    now: datetime,
    updated_tasks: Iterable[Task],
    config: Optional[ScheduleConfig] = None,
    block_ids: Optional[BlockIdFactory] = None,
) -> list[ScheduleBlock]:
    """Keep elapsed blocks as they are and replan the rest of the day from ``now``."""

    past = [block for block in current_schedule if block.end <= now]
    remaining = [task for task in updated_tasks if task.is_open]
    future = generate_schedule(remaining, reference=now, config=config, block_ids=block_ids, not_before=now)
    logger.debug("Rescheduled at %s: kept %d past blocks, planned %d", now, len(past), len(future))
    return past + future


def unscheduled_task_ids(tasks: Iterable[Task], schedule: Iterable[ScheduleBlock]) -> list[str]:
    """Ids of open tasks that got no task block in ``schedule``."""

    placed = {block.task_id for block in schedule if block.type is BlockType.TASK}
    return [task.id for task in tasks if task.is_open and task.id not in placed]
