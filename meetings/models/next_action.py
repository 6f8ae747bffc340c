from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from base.models.mixins import TimeStampedMixin


class NextActionStatus(models.TextChoices):
    PENDING = "PENDING", _("Pending")
    IN_PROGRESS = "IN_PROGRESS", _("In progress")
    COMPLETED = "COMPLETED", _("Completed")


class NextAction(TimeStampedMixin):
    one_on_one = models.ForeignKey("meetings.OneOnOne", on_delete=models.CASCADE, related_name="next_actions")
    # المكلَّف: أحد مشاركي الاجتماع
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="next_actions")

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    due_date = models.DateTimeField(db_index=True)
    status = models.CharField(
        max_length=16, choices=NextActionStatus.choices, default=NextActionStatus.PENDING, db_index=True
    )

    class Meta:
        db_table = "next_action"
        ordering = ("due_date", "id")
        indexes = [
            models.Index(fields=["user", "status"], name="next_action_user_status_idx"),
        ]

    def __str__(self):
        return self.title
