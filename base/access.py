# file: base/access.py
# ------------------------------------------------------------
# User-level business rules (pure predicates)
# ------------------------------------------------------------
# - كل دالة تعيد bool ولا ترفع استثناءات.
# - الـ actor أي كائن يملك: id, role, department_id (User أو SimpleNamespace).
# - التسجيل في base.acl_service يتم في أسفل الملف.
# ------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from .acl_service import rule
from .roles import Role, has_permission, is_senior_to


def _id(obj) -> Optional[int]:
    return getattr(obj, "id", None)


def is_same_user(actor, target) -> bool:
    actor_id = _id(actor)
    return actor_id is not None and actor_id == _id(target)


# ============================================================
# 1) Visibility
# ============================================================

def can_view_user(viewer, target) -> bool:
    """
    - نفسه: دائمًا
    - GENERAL: لا يرى غيره
    - LEADER / MANAGER: نفس القسم، أو الهدف بلا قسم (department_id is None)
    - DIRECTOR / EXECUTIVE: الجميع
    """
    if viewer is None or target is None:
        return False

    if is_same_user(viewer, target):
        return True

    role = getattr(viewer, "role", None)
    if has_permission(role, Role.DIRECTOR):
        return True

    if has_permission(role, Role.LEADER):
        target_dept = getattr(target, "department_id", None)
        # مستخدم بلا قسم يبقى مرئيًا للقادة والمدراء
        if target_dept is None:
            return True
        return target_dept == getattr(viewer, "department_id", None)

    return False


# ============================================================
# 2) Edit / Delete / Role change
# ============================================================

def can_edit_user(editor, target) -> bool:
    # تعديل الذات مسموح؛ منع تغيير الدور للذات مسؤولية الـ view
    if is_same_user(editor, target):
        return True
    return is_senior_to(getattr(editor, "role", None), getattr(target, "role", None))


def can_delete_user(deleter, target) -> bool:
    # حذف الذات يُرفض في الـ view برسالة 400 قبل الوصول هنا
    role = getattr(deleter, "role", None)
    return has_permission(role, Role.DIRECTOR) and is_senior_to(role, getattr(target, "role", None))


def can_change_role(changer, target, new_role: Optional[str]) -> bool:
    role = getattr(changer, "role", None)
    return (
        has_permission(role, Role.EXECUTIVE)
        and is_senior_to(role, getattr(target, "role", None))
        and has_permission(role, new_role)
    )


# ============================================================
# 3) Administration
# ============================================================

def can_manage_users(actor) -> bool:
    """قائمة المستخدمين، إنشاء مستخدم، إنشاء قسم."""
    return actor is not None and has_permission(getattr(actor, "role", None), Role.MANAGER)


def can_assign_role(creator, role: Optional[str]) -> bool:
    # لا يُنشئ أحد مستخدمًا أعلى منه
    return can_manage_users(creator) and has_permission(getattr(creator, "role", None), role)


# ============================================================
# ACL registrations
# ============================================================

@rule("base.user", "view")
def _view_user(user, obj) -> bool:
    return can_view_user(user, obj)


@rule("base.user", "change")
def _change_user(user, obj) -> bool:
    return can_edit_user(user, obj)


@rule("base.user", "delete")
def _delete_user(user, obj) -> bool:
    return can_delete_user(user, obj)
