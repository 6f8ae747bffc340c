"""
URL configuration for the SES 1on1 portal.

Every app mounts its JSON routes under /api/; the admin stays at /admin/.
"""
# sesportal/urls.py
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # المستخدمون والمصادقة
    path("api/", include(("base.urls", "base"), namespace="base")),
    # الأقسام
    path("api/", include(("hr.urls", "hr"), namespace="hr")),
    # الأهداف (OKR)
    path("api/", include(("goals.urls", "goals"), namespace="goals")),
    # 1on1 والمهام التالية ولوحة المعلومات
    path("api/", include(("meetings.urls", "meetings"), namespace="meetings")),
    # لوحة الإدارة
    path("admin/", admin.site.urls),
]
