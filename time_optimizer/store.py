"""In-memory task store handing out immutable snapshots."""

from __future__ import annotations

import logging
import uuid
from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from time_optimizer.schema import Priority, Task, TaskStatus

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """Ordered task collection.

    Every mutation swaps in a new ``Task`` value, so snapshots taken earlier
    are never affected by later changes.
    """

    def __init__(
        self,
        tasks: tuple[Task, ...] = (),
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: list[Task] = list(tasks)
        counts = Counter(task.id for task in self._tasks)
        duplicates = sorted(task_id for task_id, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"duplicate task ids {duplicates}")
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        return len(self._tasks)

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task:
        return self._tasks[self._index(task_id)]

    def add(
        self,
        title: str,
        duration: int,
        priority: Priority = Priority.MEDIUM,
        category: str = "general",
        description: Optional[str] = None,
        deadline: Optional[datetime] = None,
    ) -> Task:
        task = Task(
            id=self._id_factory(),
            title=title,
            duration=duration,
            priority=priority,
            category=category,
            created_at=self._clock(),
            description=description,
            deadline=deadline,
        )
        self._tasks.append(task)
        logger.debug("Added task %s (%s)", task.id, title)
        return task

    def update(self, task_id: str, **changes) -> Task:
        index = self._index(task_id)
        new_id = changes.get("id", task_id)
        if new_id != task_id and any(task.id == new_id for task in self._tasks):
            raise ValueError(f"task id '{new_id}' is already taken")
        task = replace(self._tasks[index], **changes)
        self._tasks[index] = task
        return task

    def delete(self, task_id: str) -> None:
        self._tasks = [task for task in self._tasks if task.id != task_id]

    def toggle_complete(self, task_id: str) -> Task:
        task = self.get(task_id)
        if task.completed:
            return self.update(task_id, completed=False, status=TaskStatus.PENDING, actual_end=None)
        return self.update(task_id, completed=True, status=TaskStatus.COMPLETED, actual_end=self._clock())

    def mark_in_progress(self, task_id: str) -> Task:
        return self.update(task_id, status=TaskStatus.IN_PROGRESS, actual_start=self._clock())

    def _index(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise KeyError(task_id)
