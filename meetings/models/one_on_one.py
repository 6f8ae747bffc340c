from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from base.models.mixins import TimeStampedMixin


class OneOnOneStatus(models.TextChoices):
    SCHEDULED = "SCHEDULED", _("Scheduled")
    COMPLETED = "COMPLETED", _("Completed")
    CANCELLED = "CANCELLED", _("Cancelled")


class OneOnOneQuerySet(models.QuerySet):
    def for_participant(self, user_id):
        return self.filter(Q(supervisor_id=user_id) | Q(member_id=user_id))

    def scheduled(self):
        return self.filter(status=OneOnOneStatus.SCHEDULED)

    def conflicting(self, *, supervisor_id, member_id, scheduled_at, exclude_pk=None):
        """
        اجتماعات SCHEDULED في نفس اللحظة يشارك فيها أحد الطرفين بأي دور
        (مشرف في اجتماع وعضو في آخر يُعدّ تعارضًا أيضًا).
        الفحص في التطبيق فقط، لا قيد على مستوى قاعدة البيانات.
        """
        ids = {supervisor_id, member_id}
        qs = self.scheduled().filter(scheduled_at=scheduled_at).filter(
            Q(supervisor_id__in=ids) | Q(member_id__in=ids)
        )
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs


class OneOnOne(TimeStampedMixin):
    """
    اجتماع 1on1 بين مشرف (LEADER فما فوق) وعضو.
    SCHEDULED هي الحالة المفتوحة الوحيدة؛ الإلغاء تغيير حالة وليس حذفًا.
    """
    supervisor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="supervised_one_on_ones"
    )
    member = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="member_one_on_ones"
    )
    scheduled_at = models.DateTimeField(db_index=True)
    status = models.CharField(
        max_length=16, choices=OneOnOneStatus.choices, default=OneOnOneStatus.SCHEDULED, db_index=True
    )

    objects = OneOnOneQuerySet.as_manager()

    class Meta:
        db_table = "one_on_one"
        ordering = ("-scheduled_at",)
        indexes = [
            models.Index(fields=["supervisor", "scheduled_at"], name="one_on_one_supervisor_idx"),
            models.Index(fields=["member", "scheduled_at"], name="one_on_one_member_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=~Q(supervisor=models.F("member")), name="chk_one_on_one_distinct_participants"),
        ]
        permissions = [
            ("conduct_oneonone", "Can conduct a one-on-one"),
            ("complete_oneonone", "Can complete a one-on-one"),
            ("cancel_oneonone", "Can cancel a one-on-one"),
            ("export_oneonone", "Can export a one-on-one as PDF"),
        ]

    def __str__(self):
        return f"1on1 {self.supervisor} / {self.member} @ {self.scheduled_at:%Y-%m-%d %H:%M}"

    @property
    def participant_ids(self) -> tuple:
        return (self.supervisor_id, self.member_id)

    def has_participant(self, user_id) -> bool:
        return user_id is not None and user_id in self.participant_ids
