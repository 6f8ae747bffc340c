from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from base.models.mixins import TimeStampedMixin


class GoalStatus(models.TextChoices):
    DRAFT = "DRAFT", _("Draft")
    PENDING_APPROVAL = "PENDING_APPROVAL", _("Pending approval")
    REJECTED = "REJECTED", _("Rejected")
    ACTIVE = "ACTIVE", _("Active")
    COMPLETED = "COMPLETED", _("Completed")
    CANCELLED = "CANCELLED", _("Cancelled")


class Goal(TimeStampedMixin):
    # مالك الهدف؛ حذف المستخدم يحذف أهدافه
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="goals")

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    start_date = models.DateField()
    end_date = models.DateField()

    status = models.CharField(max_length=20, choices=GoalStatus.choices, default=GoalStatus.DRAFT, db_index=True)

    class Meta:
        db_table = "goal"
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["user", "status"], name="goal_user_status_idx"),
            models.Index(fields=["start_date", "end_date"], name="goal_period_idx"),
        ]
        permissions = [
            ("approve_goal", "Can approve or reject goals"),
            ("progress_goal", "Can update key result progress"),
        ]

    def __str__(self):
        return self.title

    @property
    def progress(self) -> int:
        from ..services.progress import calculate_goal_progress
        return calculate_goal_progress(self.key_results.all())
