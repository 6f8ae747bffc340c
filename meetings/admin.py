from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import Agenda, Minutes, NextAction, OneOnOne


class AgendaInline(admin.TabularInline):
    model = Agenda
    extra = 0
    fields = ("title", "description")


class MinutesInline(admin.TabularInline):
    model = Minutes
    extra = 0
    fields = ("timestamp", "speaker", "content")
    autocomplete_fields = ("speaker",)


class NextActionInline(admin.TabularInline):
    model = NextAction
    extra = 0
    fields = ("title", "user", "due_date", "status")
    autocomplete_fields = ("user",)


@admin.register(OneOnOne)
class OneOnOneAdmin(AppAdmin):
    list_display = ("id", "supervisor", "member", "scheduled_at", "status")
    list_filter = ("status",)
    search_fields = ("supervisor__name", "supervisor__email", "member__name", "member__email")
    list_select_related = ("supervisor", "member")
    autocomplete_fields = ("supervisor", "member")
    date_hierarchy = "scheduled_at"
    inlines = [AgendaInline, MinutesInline, NextActionInline]


@admin.register(NextAction)
class NextActionAdmin(AppAdmin):
    list_display = ("title", "user", "one_on_one", "due_date", "status")
    list_filter = ("status",)
    search_fields = ("title", "description", "user__name", "user__email")
    list_select_related = ("user", "one_on_one")
    autocomplete_fields = ("user",)
    raw_id_fields = ("one_on_one",)


@admin.register(Agenda)
class AgendaAdmin(AppAdmin):
    list_display = ("title", "one_on_one", "created_at")
    search_fields = ("title", "description")
    raw_id_fields = ("one_on_one",)


@admin.register(Minutes)
class MinutesAdmin(AppAdmin):
    list_display = ("one_on_one", "speaker", "timestamp")
    search_fields = ("content", "speaker__name")
    list_select_related = ("speaker", "one_on_one")
    raw_id_fields = ("one_on_one",)
    autocomplete_fields = ("speaker",)
