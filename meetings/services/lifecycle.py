# meetings/services/lifecycle.py
# ------------------------------------------------------------
# OneOnOne:   SCHEDULED ──▶ COMPLETED | CANCELLED   (both terminal)
# NextAction: PENDING / IN_PROGRESS / COMPLETED, any value at any time
# ------------------------------------------------------------
from typing import Optional

from ..models.next_action import NextActionStatus
from ..models.one_on_one import OneOnOneStatus

ONE_ON_ONE_TRANSITIONS: dict[str, frozenset] = {
    OneOnOneStatus.SCHEDULED: frozenset({OneOnOneStatus.COMPLETED, OneOnOneStatus.CANCELLED}),
}

TERMINAL_STATUSES = frozenset({OneOnOneStatus.COMPLETED, OneOnOneStatus.CANCELLED})

ONE_ON_ONE_COLORS = {
    OneOnOneStatus.SCHEDULED: "blue",
    OneOnOneStatus.COMPLETED: "green",
    OneOnOneStatus.CANCELLED: "gray",
}

NEXT_ACTION_COLORS = {
    NextActionStatus.PENDING: "yellow",
    NextActionStatus.IN_PROGRESS: "blue",
    NextActionStatus.COMPLETED: "green",
}


def is_terminal(status: Optional[str]) -> bool:
    return status in TERMINAL_STATUSES


def can_transition_one_on_one(current: str, new: str) -> bool:
    if new not in OneOnOneStatus.values:
        return False
    if current == new:
        return True
    return new in ONE_ON_ONE_TRANSITIONS.get(current, frozenset())


def can_transition_next_action(current: str, new: str) -> bool:
    # حقل حالة مسطّح: أي قيمة صالحة مسموحة من أي حالة
    return new in NextActionStatus.values


def get_one_on_one_status_display(status: Optional[str]) -> str:
    if status in OneOnOneStatus.values:
        return str(OneOnOneStatus(status).label)
    return status or ""


def get_one_on_one_status_color(status: Optional[str]) -> str:
    return ONE_ON_ONE_COLORS.get(status, "gray")


def get_next_action_status_display(status: Optional[str]) -> str:
    if status in NextActionStatus.values:
        return str(NextActionStatus(status).label)
    return status or ""


def get_next_action_status_color(status: Optional[str]) -> str:
    return NEXT_ACTION_COLORS.get(status, "gray")
