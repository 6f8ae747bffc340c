from django.conf import settings
from django.db import models
from django.utils import timezone

from base.models.mixins import TimeStampedMixin


class Minutes(TimeStampedMixin):
    """سطر في محضر الاجتماع؛ المتحدث أحد المشاركين فقط (يُفحص في الـ view)."""
    one_on_one = models.ForeignKey("meetings.OneOnOne", on_delete=models.CASCADE, related_name="minutes")
    speaker = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="minutes")
    content = models.TextField()
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = "minutes"
        ordering = ("timestamp", "id")
        verbose_name_plural = "minutes"

    def __str__(self):
        return f"{self.speaker}: {self.content[:40]}"
