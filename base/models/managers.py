# base/models/managers.py
# مدير المستخدمين: إنشاء بالبريد + استعلامات مبنية على رتبة الدور.
from django.contrib.auth.models import BaseUserManager
from django.db import models
from django.db.models import Case, IntegerField, Value, When

from ..roles import ROLE_RANK, SUPERVISOR_ROLES, UNKNOWN_RANK


class UserQuerySet(models.QuerySet):
    def with_role_rank(self):
        """أضف role_rank كعمود محسوب لترتيب المستخدمين حسب الأقدمية."""
        return self.annotate(
            role_rank=Case(
                *[When(role=role, then=Value(rank)) for role, rank in ROLE_RANK.items()],
                default=Value(UNKNOWN_RANK),
                output_field=IntegerField(),
            )
        )

    def supervisors(self):
        return self.filter(role__in=SUPERVISOR_ROLES)

    def search(self, term: str):
        return self.filter(
            models.Q(name__icontains=term)
            | models.Q(email__icontains=term)
            | models.Q(client_company_name__icontains=term)
        )


class UserManager(BaseUserManager.from_queryset(UserQuerySet)):
    use_in_migrations = True

    def _create_user(self, email, password, **extra):
        if not email:
            raise ValueError("Users must have an email address")
        email = self.normalize_email(email).lower().strip()
        # AbstractUser يتطلب username كحقل، نولّده تلقائيًا إن لم يُمرّر
        extra.setdefault("username", email)
        user = self.model(email=email, **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra):
        extra.setdefault("is_staff", False)
        extra.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra)

    def create_superuser(self, email, password=None, **extra):
        extra.setdefault("is_staff", True)
        extra.setdefault("is_superuser", True)
        extra.setdefault("role", "EXECUTIVE")
        return self._create_user(email, password, **extra)

    def get_by_natural_key(self, email):
        """
        يسمح بالبحث عن المستخدم باستخدام EMAIL كحقل دخول.
        Django يعتمد هذه الدالة عند createsuperuser/login.
        """
        return self.get(email__iexact=email.strip().lower())
