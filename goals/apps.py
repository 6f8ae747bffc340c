from django.apps import AppConfig


class GoalsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "goals"
    verbose_name = "Goals (OKR)"

    def ready(self):
        # قواعد الصلاحيات تُسجّل في base.acl_service عند الاستيراد
        from . import access  # noqa: F401
