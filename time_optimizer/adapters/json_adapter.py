"""JSON adapter for task snapshots."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from time_optimizer.adapters.records import parse_tasks
from time_optimizer.schema import Task


def parse(file_path: str, now: Optional[datetime] = None) -> list[Task]:
    """Parse JSON file into tasks."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    items = ((f"Item {index}", item) for index, item in enumerate(payload, start=1))
    return parse_tasks(items, now or datetime.now())
