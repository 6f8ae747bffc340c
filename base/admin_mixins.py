# base/admin_mixins.py
# ميكسنات عامة قابلة لإعادة الاستخدام في كل التطبيقات
from typing import Sequence
from django.contrib import admin


class ReadonlyAuditFieldsMixin:
    """
    يجعل حقول الأثر (created_at/updated_at) للقراءة فقط إن وُجدت على الموديل.
    """
    AUDIT_FIELDS: Sequence[str] = ("created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        ro = list(super().get_readonly_fields(request, obj) or [])
        names = {fld.name for fld in self.model._meta.get_fields()}
        present = [f for f in self.AUDIT_FIELDS if f in names and f not in ro]
        return ro + present


class AppAdmin(ReadonlyAuditFieldsMixin, admin.ModelAdmin):
    pass
