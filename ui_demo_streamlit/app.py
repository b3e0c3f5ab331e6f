"""Streamlit demo UI for time-optimizer."""

from __future__ import annotations

import tempfile
from datetime import datetime, time
from pathlib import Path
from typing import Any

from time_optimizer.adapters.loader import load_tasks
from time_optimizer.config import load_schedule_config
from time_optimizer.logging_setup import setup_logging
from time_optimizer.planner import plan_day

DEMO_PATH = "examples/sample_tasks.json"


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return load_tasks(temp_path)


def _fmt_minutes(minutes: int) -> str:
    hours, rest = divmod(int(minutes), 60)
    return f"{hours}h {rest}m" if hours else f"{rest}m"


def _schedule_rows(report: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        {
            "start": block["start"][11:16],
            "end": block["end"][11:16],
            "type": block["type"],
            "title": block["title"],
            "minutes": block["duration"],
        }
        for block in report["schedule"]
    ]


def main() -> None:
    import streamlit as st

    setup_logging()
    st.set_page_config(page_title="Time Optimizer Demo", layout="wide")
    st.title("Time Optimizer — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload task snapshot", type=["csv", "json"])
        use_demo = st.checkbox("Load demo tasks", value=True)
        plan_date = st.date_input("Day to plan", value=datetime.now().date())
        work_day = st.slider("Work day", min_value=0, max_value=24, value=(9, 18))
        break_duration = st.number_input("Break (min)", min_value=0, max_value=60, value=15, step=5)
        threshold = st.number_input("Deep-work threshold (min)", min_value=15, max_value=240, value=90, step=15)
        buffer_time = st.number_input("Buffer (min)", min_value=0, max_value=30, value=10, step=5)
        run = st.button("Plan day", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Plan day**.")
        return

    try:
        if use_demo:
            tasks = load_tasks(DEMO_PATH)
        elif uploaded is not None:
            tasks = _parse_uploaded(uploaded)
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo tasks'.")
            return

        config = load_schedule_config(
            {
                "work_day_start": int(work_day[0]),
                "work_day_end": int(work_day[1]),
                "break_duration": int(break_duration),
                "deep_work_threshold": int(threshold),
                "buffer_time": int(buffer_time),
            }
        )
        report = plan_day(tasks, reference=datetime.combine(plan_date, time(0, 0)), config=config)

        st.subheader("A) Schedule")
        st.table(_schedule_rows(report))
        if report["unscheduled"]:
            st.warning(f"Did not fit today: {', '.join(report['unscheduled'])}")

        st.subheader("B) Analytics")
        analytics = report["analytics"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Tasks done", f"{analytics['completed_tasks']}/{analytics['total_tasks']}")
        c2.metric("Time completed", _fmt_minutes(analytics["total_time_completed"]))
        c3.metric("Productivity", f"{analytics['productivity_score']}%")
        c4.metric("Time scheduled", _fmt_minutes(analytics["total_time_scheduled"]))
        st.bar_chart({d["day"]: d["scheduled"] for d in analytics["weekly_progress"]})
        st.table(analytics["categories"] or [{"category": "-", "time": 0}])
        st.table(analytics["priority_distribution"])

        st.subheader("C) Recommendations")
        for text in report["recommendations"] or ["Nothing to flag today."]:
            st.write(f"- {text}")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
