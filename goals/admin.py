from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import Goal, KeyResult


class KeyResultInline(admin.TabularInline):
    model = KeyResult
    extra = 0
    fields = ("title", "current_value", "target_value", "unit", "description")


@admin.register(Goal)
class GoalAdmin(AppAdmin):
    list_display = ("title", "user", "status", "start_date", "end_date", "progress")
    list_filter = ("status",)
    search_fields = ("title", "description", "user__name", "user__email")
    list_select_related = ("user",)
    autocomplete_fields = ("user",)
    inlines = [KeyResultInline]

    @admin.display(description="Progress (%)")
    def progress(self, obj):
        return obj.progress


@admin.register(KeyResult)
class KeyResultAdmin(admin.ModelAdmin):
    list_display = ("title", "goal", "current_value", "target_value", "unit", "progress")
    search_fields = ("title", "goal__title")
    list_select_related = ("goal",)

    @admin.display(description="Progress (%)")
    def progress(self, obj):
        return round(obj.progress, 1)
