# meetings/services/next_actions.py
"""
Due-date helpers, sorting, filtering and dashboard stats for next actions.
Kept small & testable: inputs are duck-typed (status, due_date, user_id, one_on_one_id).
"""
import math
from datetime import datetime, timedelta
from typing import Iterable, Optional

from django.utils import timezone

from base.utils import percent

from ..models.next_action import NextActionStatus

SECONDS_PER_DAY = 24 * 60 * 60

PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else timezone.now()


def _local_date(value: datetime):
    if timezone.is_aware(value):
        return timezone.localtime(value).date()
    return value.date()


# ============================================================
# Due-date helpers
# ============================================================

def days_until_due(due_date: datetime, now: Optional[datetime] = None) -> int:
    """Whole days left, rounded up (1 hour left → 1, 1 hour late → 0, 25 hours late → -1)."""
    delta = due_date - _now(now)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def is_overdue(due_date: datetime, now: Optional[datetime] = None) -> bool:
    return due_date < _now(now)


def is_due_today(due_date: datetime, now: Optional[datetime] = None) -> bool:
    return _local_date(due_date) == _local_date(_now(now))


def is_due_tomorrow(due_date: datetime, now: Optional[datetime] = None) -> bool:
    return _local_date(due_date) == _local_date(_now(now)) + timedelta(days=1)


def get_priority(due_date: datetime, now: Optional[datetime] = None) -> str:
    days = days_until_due(due_date, now)
    if days <= 1:
        return "high"
    if days <= 7:
        return "medium"
    return "low"


def priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, "gray")


def due_date_display(due_date: datetime, now: Optional[datetime] = None) -> str:
    days = days_until_due(due_date, now)
    if days < 0:
        return f"{abs(days)} day{'s' if abs(days) != 1 else ''} overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    return f"In {days} days"


def is_due_this_week(action, now: Optional[datetime] = None) -> bool:
    days = days_until_due(action.due_date, now)
    return 0 <= days <= 7


# ============================================================
# Sort / filter / stats
# ============================================================

def sort_next_actions(actions: Iterable) -> list:
    """Open items first, then by due date ascending. Stable for equal keys."""
    return sorted(actions, key=lambda a: (a.status == NextActionStatus.COMPLETED, a.due_date))


def filter_next_actions(
    actions: Iterable,
    *,
    status: Optional[str] = None,
    overdue: bool = False,
    due_this_week: bool = False,
    user_id=None,
    one_on_one_id=None,
    now: Optional[datetime] = None,
) -> list:
    now = _now(now)
    result = []
    for action in actions:
        if status and action.status != status:
            continue
        if overdue and not is_overdue(action.due_date, now):
            continue
        if due_this_week and not is_due_this_week(action, now):
            continue
        if user_id is not None and action.user_id != user_id:
            continue
        if one_on_one_id is not None and action.one_on_one_id != one_on_one_id:
            continue
        result.append(action)
    return result


def get_next_action_stats(actions: Iterable, now: Optional[datetime] = None) -> dict:
    now = _now(now)
    items = list(actions)
    open_items = [a for a in items if a.status != NextActionStatus.COMPLETED]
    completed = len(items) - len(open_items)

    return {
        "total": len(items),
        "completed": completed,
        "in_progress": sum(1 for a in items if a.status == NextActionStatus.IN_PROGRESS),
        "pending": sum(1 for a in items if a.status == NextActionStatus.PENDING),
        "overdue": sum(1 for a in open_items if is_overdue(a.due_date, now)),
        "due_this_week": sum(1 for a in open_items if is_due_this_week(a, now)),
        "completion_rate": percent(completed, len(items)),
    }
