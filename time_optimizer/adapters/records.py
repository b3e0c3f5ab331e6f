"""Field parsing shared by the CSV and JSON snapshot adapters."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from time_optimizer.schema import Priority, Task, TaskStatus

REQUIRED_FIELDS = ("id", "title", "duration")
_TRUE = {"1", "true", "yes", "y"}
_FALSE = {"0", "false", "no", "n", ""}


def _timestamp(raw, label: str, name: str) -> Optional[datetime]:
    if raw in (None, ""):
        return None
    try:
        value = datetime.fromisoformat(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"{label}: malformed {name}") from exc
    # offsets are folded into local wall-clock time
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def _duration(raw, label: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{label}: invalid duration")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"{label}: duration must be a whole number of minutes")
        raw = int(raw)
    try:
        duration = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label}: invalid duration") from exc
    if duration <= 0:
        raise ValueError(f"{label}: duration must be positive")
    return duration


def _flag(raw, label: str) -> bool:
    if isinstance(raw, bool):
        return raw
    value = "" if raw is None else str(raw).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{label}: invalid completed flag '{raw}'")


def parse_task(record: dict, label: str, now: datetime) -> Task:
    """Turn one raw record into a ``Task``; ``label`` prefixes error messages."""

    if not isinstance(record, dict):
        raise ValueError(f"{label}: expected an object")

    missing = [name for name in REQUIRED_FIELDS if record.get(name) in (None, "")]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    duration = _duration(record["duration"], label)

    priority_raw = str(record.get("priority") or "medium").strip().lower()
    try:
        priority = Priority(priority_raw)
    except ValueError as exc:
        raise ValueError(f"{label}: invalid priority '{priority_raw}'") from exc

    completed = _flag(record.get("completed"), label)
    status_raw = str(record.get("status") or "").strip().lower()
    if status_raw:
        try:
            status = TaskStatus(status_raw)
        except ValueError as exc:
            raise ValueError(f"{label}: invalid status '{status_raw}'") from exc
    else:
        status = TaskStatus.COMPLETED if completed else TaskStatus.PENDING

    description = record.get("description")
    category = str(record.get("category") or "").strip()

    return Task(
        id=str(record["id"]).strip(),
        title=str(record["title"]).strip(),
        duration=duration,
        priority=priority,
        category=category or "general",
        created_at=_timestamp(record.get("created_at"), label, "created_at") or now,
        description=str(description).strip() if description else None,
        deadline=_timestamp(record.get("deadline"), label, "deadline"),
        completed=completed,
        status=status,
        scheduled_start=_timestamp(record.get("scheduled_start"), label, "scheduled_start"),
        scheduled_end=_timestamp(record.get("scheduled_end"), label, "scheduled_end"),
        actual_start=_timestamp(record.get("actual_start"), label, "actual_start"),
        actual_end=_timestamp(record.get("actual_end"), label, "actual_end"),
    )


def parse_tasks(records: Iterable[tuple[str, dict]], now: datetime) -> list[Task]:
    """Parse ``(label, record)`` pairs, rejecting a task id seen earlier."""

    tasks: list[Task] = []
    seen: set[str] = set()
    for label, record in records:
        task = parse_task(record, label, now)
        if task.id in seen:
            raise ValueError(f"{label}: duplicate id '{task.id}'")
        seen.add(task.id)
        tasks.append(task)
    return tasks
