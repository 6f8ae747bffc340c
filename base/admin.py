# base/admin.py
from __future__ import annotations

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from django.utils.translation import gettext_lazy as _

from base.admin_mixins import ReadonlyAuditFieldsMixin
from .forms import UserAdminChangeForm, UserAdminCreationForm


User = get_user_model()


@admin.register(User)
class UserAdmin(ReadonlyAuditFieldsMixin, DjangoUserAdmin):
    """
    User admin: الدخول بالبريد، مع الدور والقسم وشركة العميل.
    """
    form = UserAdminChangeForm
    add_form = UserAdminCreationForm

    list_display = ("id", "display_name", "email", "role", "department", "client_company_name", "is_active", "is_staff")
    list_filter = ("role", "department", "is_active", "is_staff", "is_superuser")
    search_fields = ("email", "name", "client_company_name")
    list_select_related = ("department",)
    ordering = ("-created_at",)

    fieldsets = (
        (None, {"fields": ("email", "username", "password")}),
        (_("Profile"), {"fields": ("name", "role", "department", "client_company_name")}),
        (_("Permissions"), {"fields": ("is_active", "is_staff", "is_superuser", "groups")}),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "username", "name", "role", "department", "password1", "password2"),
        }),
    )
