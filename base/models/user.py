# base/models/user.py
from __future__ import annotations
from django.db import models
from django.contrib.auth.models import AbstractUser
from django.db.models.functions import Lower
from django.db.models import Q

from ..roles import Role, get_role_display_name
from .managers import UserManager
from .mixins import TimeStampedMixin


class User(TimeStampedMixin, AbstractUser):
    """
    مستخدم البوابة (موظف SES):
    - تسجيل الدخول بالبريد (USERNAME_FIELD = email) مع بقاء username لأغراض Django
    - role: الدور التنظيمي (GENERAL → EXECUTIVE) ويُستعمل في كل قواعد الصلاحيات
    - department: اختياري، غيابه يعني "غير مُسند لقسم" وليس قيمة فارغة
    - client_company_name: اسم شركة العميل التي يعمل لديها الموظف حاليًا
    """
    # هوية
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)

    role = models.CharField(max_length=16, choices=Role.choices, default=Role.GENERAL, db_index=True)
    department = models.ForeignKey(
        "hr.Department",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="members",
    )
    client_company_name = models.CharField(max_length=255, blank=True)

    # جلسات
    last_session_key = models.CharField(max_length=40, null=True, blank=True)

    objects = UserManager()

    # تسجيل الدخول بالبريد
    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username", "name"]

    class Meta:
        db_table = "user"
        ordering = ("-created_at",)
        indexes = [
            models.Index(Lower("email"), name="user_email_ci_idx"),
            models.Index(fields=["department", "role"], name="user_department_role_idx"),
        ]
        constraints = [
            models.UniqueConstraint(Lower("email"), name="uniq_user_email_ci"),
            models.CheckConstraint(condition=~Q(email=""), name="user_email_not_empty"),
        ]

    @property
    def display_name(self) -> str:
        return (self.name or "").strip() or self.email

    @property
    def role_display(self) -> str:
        return get_role_display_name(self.role)

    def __str__(self):
        return self.display_name

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if not self.username:
            self.username = self.email
        super().save(*args, **kwargs)
