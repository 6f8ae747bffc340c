from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Goal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("status", models.CharField(
                    choices=[
                        ("DRAFT", "Draft"),
                        ("PENDING_APPROVAL", "Pending approval"),
                        ("REJECTED", "Rejected"),
                        ("ACTIVE", "Active"),
                        ("COMPLETED", "Completed"),
                        ("CANCELLED", "Cancelled"),
                    ],
                    db_index=True,
                    default="DRAFT",
                    max_length=20,
                )),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="goals",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "goal",
                "ordering": ("-created_at",),
                "permissions": [
                    ("approve_goal", "Can approve or reject goals"),
                    ("progress_goal", "Can update key result progress"),
                ],
            },
        ),
        migrations.CreateModel(
            name="KeyResult",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("target_value", models.FloatField()),
                ("current_value", models.FloatField(default=0)),
                ("unit", models.CharField(blank=True, max_length=32)),
                ("goal", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="key_results",
                    to="goals.goal",
                )),
            ],
            options={
                "db_table": "key_result",
                "ordering": ("id",),
            },
        ),
        migrations.AddIndex(
            model_name="goal",
            index=models.Index(fields=["user", "status"], name="goal_user_status_idx"),
        ),
        migrations.AddIndex(
            model_name="goal",
            index=models.Index(fields=["start_date", "end_date"], name="goal_period_idx"),
        ),
    ]
