from datetime import datetime, timedelta

from time_optimizer.analytics import generate_analytics
from time_optimizer.recommendations import get_recommendations
from time_optimizer.schema import Analytics, Priority, Task

NOW = datetime(2025, 1, 8, 12, 0)


def _task(task_id, duration=30, priority=Priority.MEDIUM, completed=False, deadline=None):
    return Task(
        id=task_id,
        title=task_id,
        duration=duration,
        priority=priority,
        category="work",
        created_at=NOW,
        completed=completed,
        deadline=deadline,
    )


def _analytics(score=100, scheduled=60):
    return Analytics(
        total_tasks=1,
        completed_tasks=1,
        total_time_scheduled=scheduled,
        total_time_completed=scheduled,
        productivity_score=score,
    )


def test_no_rule_matches():
    assert get_recommendations([_task("a", completed=True)], _analytics(), now=NOW) == []


def test_heavy_workload_threshold():
    heavy = get_recommendations([], _analytics(scheduled=500), now=NOW)
    light = get_recommendations([], _analytics(scheduled=400), now=NOW)
    assert heavy == ["You have a heavy workload today. Consider scheduling breaks between intensive tasks."]
    assert light == []
    assert get_recommendations([], _analytics(scheduled=480), now=NOW) == []


def test_low_score_suggests_smaller_tasks():
    assert get_recommendations([], _analytics(score=69), now=NOW) == [
        "Consider breaking large tasks into smaller, manageable chunks"
    ]
    assert get_recommendations([], _analytics(score=70), now=NOW) == []


def test_urgent_and_overdue_counts_ignore_completed_tasks():
    tasks = [
        _task("u1", priority=Priority.URGENT),
        _task("u2", priority=Priority.URGENT),
        _task("u3", priority=Priority.URGENT, completed=True),
        _task("late", deadline=NOW - timedelta(hours=1)),
        _task("late-done", deadline=NOW - timedelta(days=2), completed=True),
        _task("future", deadline=NOW + timedelta(hours=1)),
    ]
    assert get_recommendations(tasks, _analytics(), now=NOW) == [
        "You have 2 urgent task(s) pending. Focus on these first.",
        "1 task(s) are overdue. Consider rescheduling or reassessing priorities.",
    ]


def test_all_rules_fire_in_order():
    tasks = [
        _task("big", duration=400, priority=Priority.URGENT, deadline=NOW - timedelta(days=1)),
        _task("done", duration=100, completed=True),
    ]
    analytics = generate_analytics(tasks, today=NOW.date())
    messages = get_recommendations(tasks, analytics, now=NOW)

    assert analytics.productivity_score == 20
    assert len(messages) == 4
    assert messages[0].startswith("Consider breaking")
    assert messages[1].startswith("You have 1 urgent")
    assert messages[2].startswith("1 task(s) are overdue")
    assert messages[3].startswith("You have a heavy workload")
