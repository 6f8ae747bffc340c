# hr/models/department.py
from django.db import models
from django.db.models.functions import Lower

from base.models.mixins import TimeStampedMixin


class DepartmentQuerySet(models.QuerySet):
    def with_member_count(self):
        # member_count محسوب دائمًا (لا نخزّن العدد)
        return self.annotate(member_count=models.Count("members", distinct=True))


class Department(TimeStampedMixin, models.Model):
    """
    مجموعة تنظيمية بسيطة: اسم + أعضاء (User.department).
    حذف القسم لا يحذف أعضاءه؛ يصبح department_id = NULL.
    """
    name = models.CharField(max_length=255)

    objects = DepartmentQuerySet.as_manager()

    class Meta:
        db_table = "department"
        ordering = ("name",)
        constraints = [
            models.UniqueConstraint(Lower("name"), name="uniq_department_name_ci"),
        ]

    def __str__(self):
        return self.name
