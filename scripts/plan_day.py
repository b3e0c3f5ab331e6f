"""Plan a work day from a CSV/JSON task snapshot."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_optimizer.adapters.loader import load_tasks
from time_optimizer.config import load_schedule_config, log_level
from time_optimizer.logging_setup import setup_logging
from time_optimizer.planner import plan_day

logger = logging.getLogger("time_optimizer.scripts.plan_day")


def _parse_datetime(raw: str | None) -> datetime | None:
    if not raw:
        return None
    value = datetime.fromisoformat(raw)
    return value.astimezone().replace(tzinfo=None) if value.tzinfo else value


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a daily schedule and productivity report")
    parser.add_argument("--tasks", required=True, help="Path to CSV/JSON task snapshot")
    parser.add_argument("--date", help="Day to plan (ISO datetime), defaults to now")
    parser.add_argument("--now", help="Reference 'now' for analytics and overdue checks (ISO datetime)")
    parser.add_argument("--output", help="Optional path to also write the JSON report to")
    args = parser.parse_args()

    setup_logging(log_level())

    try:
        now = _parse_datetime(args.now) or datetime.now()
        reference = _parse_datetime(args.date) or now
        tasks = load_tasks(Path(args.tasks), now=now)
        config = load_schedule_config()
    except ValueError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        sys.exit(2)

    logger.info("Loaded %d tasks from %s", len(tasks), args.tasks)
    report = plan_day(tasks, reference=reference, now=now, config=config)
    print(json.dumps(report, indent=2))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        logger.info("Saved report to %s", out_path)


if __name__ == "__main__":
    main()
