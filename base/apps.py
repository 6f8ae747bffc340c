# base/apps.py
from django.apps import AppConfig
import logging


logger = logging.getLogger(__name__)


class BaseConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "base"
    verbose_name = "Base"

    def ready(self):
        # سجّل قواعد الصلاحيات الخاصة بالمستخدمين في base.acl_service
        from . import access  # noqa: F401

        from . import acl_service
        logger.debug("ACL rules registered so far: %s", acl_service.registered_rules())
