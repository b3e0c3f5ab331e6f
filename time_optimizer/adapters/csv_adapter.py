"""CSV adapter for task snapshots."""

from __future__ import annotations

import csv
from datetime import datetime
from typing import Optional

from time_optimizer.adapters.records import parse_tasks
from time_optimizer.schema import Task


def parse(file_path: str, now: Optional[datetime] = None) -> list[Task]:
    """Parse CSV file into a list of tasks."""

    now = now or datetime.now()
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        rows = ((f"Row {row_number}", row) for row_number, row in enumerate(reader, start=2))
        return parse_tasks(rows, now)
