"""Pick a snapshot adapter from the file suffix."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from time_optimizer.adapters import csv_adapter, json_adapter
from time_optimizer.schema import Task


def load_tasks(path: str | Path, now: Optional[datetime] = None) -> list[Task]:
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path), now=now)
    if suffix == ".json":
        return json_adapter.parse(str(path), now=now)
    raise ValueError("Unsupported input format, expected .csv or .json")
