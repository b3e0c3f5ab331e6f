"""Demo script for time-optimizer."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_optimizer.adapters.json_adapter import parse
from time_optimizer.analytics import generate_analytics
from time_optimizer.recommendations import get_recommendations
from time_optimizer.scheduling import generate_schedule, reschedule
from time_optimizer.store import TaskStore

SAMPLE_PATH = Path(__file__).resolve().parent / "sample_tasks.json"


def _print_schedule(title: str, schedule) -> None:
    print(title)
    for block in schedule:
        print(f"  {block.start:%H:%M}-{block.end:%H:%M}  {block.type.value:<8} {block.title}")


def main() -> None:
    store = TaskStore(tasks=tuple(parse(str(SAMPLE_PATH))))
    morning = datetime.now().replace(hour=8, minute=0, second=0, microsecond=0)
    schedule = generate_schedule(store.snapshot(), reference=morning)
    _print_schedule("Morning plan:", schedule)

    first = next(block for block in schedule if block.task_id)
    store.toggle_complete(first.task_id)
    midday = morning.replace(hour=12)
    _print_schedule("Replanned at noon:", reschedule(schedule, midday, store.snapshot()))

    analytics = generate_analytics(store.snapshot())
    print("Analytics:", analytics.as_dict())
    print("Recommendations:", get_recommendations(store.snapshot(), analytics))


if __name__ == "__main__":
    main()
