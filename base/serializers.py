# base/serializers.py
# تحويل النماذج إلى dict قابل لـ JSON (بدون passwordHash)
from __future__ import annotations

from typing import Optional


def serialize_department_ref(department) -> Optional[dict]:
    if department is None:
        return None
    return {"id": department.pk, "name": department.name}


def serialize_user_ref(user) -> Optional[dict]:
    """النسخة المختصرة المستعملة داخل الاجتماعات والأهداف."""
    if user is None:
        return None
    return {
        "id": user.pk,
        "name": user.name,
        "email": user.email,
        "role": user.role,
    }


def serialize_user(user) -> dict:
    return {
        "id": user.pk,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "role_display": user.role_display,
        "department_id": user.department_id,
        "department": serialize_department_ref(user.department),
        "client_company_name": user.client_company_name,
        "is_active": user.is_active,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def serialize_supervisor(user) -> dict:
    return {
        "id": user.pk,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "client_company_name": user.client_company_name,
    }
