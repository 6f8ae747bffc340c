from django.apps import AppConfig


class MeetingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "meetings"
    verbose_name = "1on1 Meetings"

    def ready(self):
        # قواعد الصلاحيات تُسجّل في base.acl_service عند الاستيراد
        from . import access  # noqa: F401
