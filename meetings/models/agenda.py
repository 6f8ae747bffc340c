from django.db import models

from base.models.mixins import TimeStampedMixin


class Agenda(TimeStampedMixin):
    one_on_one = models.ForeignKey("meetings.OneOnOne", on_delete=models.CASCADE, related_name="agendas")
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "agenda"
        ordering = ("created_at", "id")

    def __str__(self):
        return self.title
