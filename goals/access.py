# goals/access.py
# ------------------------------------------------------------
# High-level business rules for Goals
# ------------------------------------------------------------
#   - Pure predicates: (actor, goal) → bool, never raise.
#   - The owner edits/deletes; MANAGER and above may also view.
#   - Approval: MANAGER and above, never on one's own goal.
# ------------------------------------------------------------

from __future__ import annotations

from base.acl_service import rule
from base.roles import Role, has_permission

from .models.goal import GoalStatus


def is_goal_owner(user, goal) -> bool:
    user_id = getattr(user, "id", None)
    return user_id is not None and user_id == getattr(goal, "user_id", None)


# ============================================================
# 1) Goal rules
# ============================================================

def can_view_goal(user, goal) -> bool:
    return is_goal_owner(user, goal) or has_permission(getattr(user, "role", None), Role.MANAGER)


def can_edit_goal(user, goal) -> bool:
    return is_goal_owner(user, goal)


def can_delete_goal(user, goal) -> bool:
    return is_goal_owner(user, goal)


def can_update_progress(user, goal) -> bool:
    return is_goal_owner(user, goal) and getattr(goal, "status", None) == GoalStatus.ACTIVE


def can_approve_goal(user, goal) -> bool:
    return has_permission(getattr(user, "role", None), Role.MANAGER) and not is_goal_owner(user, goal)


def can_view_user_goals(user, owner_id) -> bool:
    """قائمة أهداف مستخدم آخر (?user_id=) تتطلب MANAGER فما فوق."""
    if owner_id is None or owner_id == getattr(user, "id", None):
        return True
    return has_permission(getattr(user, "role", None), Role.MANAGER)


def goal_permissions(user, goal) -> dict:
    """خريطة الصلاحيات التي تُرفق مع كل هدف في الاستجابة."""
    return {
        "can_edit": can_edit_goal(user, goal),
        "can_delete": can_delete_goal(user, goal),
        "can_update_progress": can_update_progress(user, goal),
        "can_approve": can_approve_goal(user, goal) and goal.status == GoalStatus.PENDING_APPROVAL,
    }


# ============================================================
# ACL registrations
# ============================================================

@rule("goals.goal", "view")
def _view_goal(user, goal) -> bool:
    return can_view_goal(user, goal)


@rule("goals.goal", "change")
def _change_goal(user, goal) -> bool:
    return can_edit_goal(user, goal)


@rule("goals.goal", "delete")
def _delete_goal(user, goal) -> bool:
    return can_delete_goal(user, goal)


@rule("goals.goal", "approve")
def _approve_goal(user, goal) -> bool:
    return can_approve_goal(user, goal)


@rule("goals.goal", "progress")
def _progress_goal(user, goal) -> bool:
    # المالك فقط؛ حالة ACTIVE تُفحص في الـ view (400 وليس 403)
    return is_goal_owner(user, goal)
