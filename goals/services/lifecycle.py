# goals/services/lifecycle.py
# ------------------------------------------------------------
# Goal status lifecycle
#
#   DRAFT ──submit──▶ PENDING_APPROVAL ──approve──▶ ACTIVE ──▶ COMPLETED
#     ▲                  │        ▲                    └──────▶ CANCELLED
#     └─(create)         reject   └── resubmit ── REJECTED
# ------------------------------------------------------------
from typing import Optional

from ..models.goal import GoalStatus

# انتقالات المالك (تعديل الهدف)
OWNER_TRANSITIONS: dict[str, frozenset] = {
    GoalStatus.DRAFT: frozenset({GoalStatus.PENDING_APPROVAL}),
    GoalStatus.REJECTED: frozenset({GoalStatus.PENDING_APPROVAL}),
    GoalStatus.ACTIVE: frozenset({GoalStatus.COMPLETED, GoalStatus.CANCELLED}),
}

# انتقالات المعتمِد (approve endpoint)
APPROVER_TRANSITIONS: dict[str, frozenset] = {
    GoalStatus.PENDING_APPROVAL: frozenset({GoalStatus.ACTIVE, GoalStatus.REJECTED}),
}

INITIAL_STATUSES = frozenset({GoalStatus.DRAFT, GoalStatus.PENDING_APPROVAL})

APPROVAL_DECISIONS = APPROVER_TRANSITIONS[GoalStatus.PENDING_APPROVAL]

STATUS_COLORS: dict[str, str] = {
    GoalStatus.DRAFT: "gray",
    GoalStatus.PENDING_APPROVAL: "yellow",
    GoalStatus.REJECTED: "red",
    GoalStatus.ACTIVE: "blue",
    GoalStatus.COMPLETED: "green",
    GoalStatus.CANCELLED: "gray",
}


def is_valid_status(status: Optional[str]) -> bool:
    return status in GoalStatus.values


def can_transition_goal(current: str, new: str, as_approver: bool = False) -> bool:
    if not is_valid_status(new):
        return False
    if current == new:
        return True
    table = APPROVER_TRANSITIONS if as_approver else OWNER_TRANSITIONS
    return new in table.get(current, frozenset())


def get_goal_status_display(status: Optional[str]) -> str:
    if is_valid_status(status):
        return str(GoalStatus(status).label)
    return status or ""


def get_goal_status_color(status: Optional[str]) -> str:
    return STATUS_COLORS.get(status, "gray")
