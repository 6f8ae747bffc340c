# base/backends.py
from __future__ import annotations

from django.contrib.auth.backends import BaseBackend

from . import acl_service


class RolePermissionBackend(BaseBackend):
    """
    يربط user.has_perm("goals.approve_goal", goal) بقواعد base.acl_service.

    الصيغة: "<app_label>.<action>_<model_name>".
    بدون obj لا يمنح شيئًا (صلاحيات النموذج العامة تبقى لـ ModelBackend).
    """

    def authenticate(self, request, **credentials):
        return None

    def has_perm(self, user_obj, perm, obj=None):
        if obj is None or not user_obj or not user_obj.is_active:
            return False

        try:
            app_label, codename = perm.split(".", 1)
        except ValueError:
            return False

        meta = obj._meta
        if app_label != meta.app_label:
            return False

        suffix = f"_{meta.model_name}"
        if not codename.endswith(suffix):
            return False

        action = codename[: -len(suffix)]
        return acl_service.has_perm(obj, user_obj, action)
