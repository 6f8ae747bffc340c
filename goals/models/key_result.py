from django.db import models


class KeyResult(models.Model):
    """مؤشر قابل للقياس داخل الهدف: current_value / target_value."""
    goal = models.ForeignKey("goals.Goal", on_delete=models.CASCADE, related_name="key_results")

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    target_value = models.FloatField()
    current_value = models.FloatField(default=0)
    unit = models.CharField(max_length=32, blank=True)

    class Meta:
        db_table = "key_result"
        ordering = ("id",)

    def __str__(self):
        return f"{self.title} ({self.current_value:g}/{self.target_value:g} {self.unit})".strip()

    @property
    def progress(self) -> float:
        from ..services.progress import key_result_progress
        return key_result_progress(self.current_value, self.target_value)
