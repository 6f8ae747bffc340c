# meetings/access.py
# ------------------------------------------------------------
# High-level business rules for one-on-ones and next actions
# ------------------------------------------------------------
#   - Pure predicates: (actor, object) → bool, never raise.
#   - Time-based rules delegate to services.availability (now is re-read per call).
# ------------------------------------------------------------

from __future__ import annotations

from base.acl_service import rule
from base.roles import Role, has_permission

from .services.availability import actions_for


def _user_id(user):
    return getattr(user, "id", None)


def _is_manager(user) -> bool:
    return has_permission(getattr(user, "role", None), Role.MANAGER)


# ============================================================
# 1) One-on-one rules
# ============================================================

def is_participant(user, one_on_one) -> bool:
    return one_on_one.has_participant(_user_id(user))


def can_view_one_on_one(user, one_on_one) -> bool:
    return is_participant(user, one_on_one) or _is_manager(user)


def can_participate(user, one_on_one) -> bool:
    """الإضافة إلى جدول الأعمال/المحضر/المهام: للمشاركين فقط."""
    return is_participant(user, one_on_one)


def can_edit_one_on_one(user, one_on_one, now=None) -> bool:
    return actions_for(one_on_one, user, now).can_edit


def can_cancel_one_on_one(user, one_on_one, now=None) -> bool:
    return actions_for(one_on_one, user, now).can_cancel


def can_conduct_one_on_one(user, one_on_one, now=None) -> bool:
    return actions_for(one_on_one, user, now).can_conduct


def can_complete_one_on_one(user, one_on_one, now=None) -> bool:
    return actions_for(one_on_one, user, now).can_complete


def can_export_one_on_one(user, one_on_one) -> bool:
    return can_view_one_on_one(user, one_on_one) and actions_for(one_on_one, user).can_export_pdf


# ============================================================
# 2) Next action rules
# ============================================================

def _is_assignee_or_participant(user, action) -> bool:
    user_id = _user_id(user)
    if user_id is not None and action.user_id == user_id:
        return True
    return action.one_on_one.has_participant(user_id)


def can_view_next_action(user, action) -> bool:
    return _is_assignee_or_participant(user, action) or _is_manager(user)


def can_edit_next_action(user, action) -> bool:
    return _is_assignee_or_participant(user, action)


def can_delete_next_action(user, action) -> bool:
    return _is_assignee_or_participant(user, action)


def can_view_user_actions(user, user_id) -> bool:
    """قائمة مهام مستخدم آخر (?user_id=) تتطلب MANAGER فما فوق."""
    if user_id is None or user_id == _user_id(user):
        return True
    return _is_manager(user)


# ============================================================
# ACL registrations
# ============================================================

@rule("meetings.oneonone", "view")
def _view_one_on_one(user, obj) -> bool:
    return can_view_one_on_one(user, obj)


@rule("meetings.oneonone", "participate")
def _participate(user, obj) -> bool:
    return can_participate(user, obj)


@rule("meetings.oneonone", "change")
def _change_one_on_one(user, obj) -> bool:
    return can_edit_one_on_one(user, obj)


@rule("meetings.oneonone", "cancel")
def _cancel_one_on_one(user, obj) -> bool:
    return can_cancel_one_on_one(user, obj)


@rule("meetings.oneonone", "conduct")
def _conduct_one_on_one(user, obj) -> bool:
    return can_conduct_one_on_one(user, obj)


@rule("meetings.oneonone", "complete")
def _complete_one_on_one(user, obj) -> bool:
    return can_complete_one_on_one(user, obj)


@rule("meetings.oneonone", "export")
def _export_one_on_one(user, obj) -> bool:
    return can_export_one_on_one(user, obj)


@rule("meetings.nextaction", "view")
def _view_next_action(user, obj) -> bool:
    return can_view_next_action(user, obj)


@rule("meetings.nextaction", "change")
def _change_next_action(user, obj) -> bool:
    return can_edit_next_action(user, obj)


@rule("meetings.nextaction", "delete")
def _delete_next_action(user, obj) -> bool:
    return can_delete_next_action(user, obj)
