# hr/admin.py
from __future__ import annotations

from django.contrib import admin
from django.db.models import Count

from base.admin_mixins import AppAdmin
from . import models


@admin.register(models.Department)
class DepartmentAdmin(AppAdmin):
    list_display = ("name", "member_count", "created_at")
    search_fields = ("name",)
    ordering = ("name",)

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_member_count=Count("members"))

    @admin.display(description="Members", ordering="_member_count")
    def member_count(self, obj):
        return obj._member_count
