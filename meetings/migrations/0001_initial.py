from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="OneOnOne",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("scheduled_at", models.DateTimeField(db_index=True)),
                ("status", models.CharField(
                    choices=[("SCHEDULED", "Scheduled"), ("COMPLETED", "Completed"), ("CANCELLED", "Cancelled")],
                    db_index=True,
                    default="SCHEDULED",
                    max_length=16,
                )),
                ("member", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="member_one_on_ones",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("supervisor", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="supervised_one_on_ones",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "one_on_one",
                "ordering": ("-scheduled_at",),
                "permissions": [
                    ("conduct_oneonone", "Can conduct a one-on-one"),
                    ("complete_oneonone", "Can complete a one-on-one"),
                    ("cancel_oneonone", "Can cancel a one-on-one"),
                    ("export_oneonone", "Can export a one-on-one as PDF"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Agenda",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("one_on_one", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="agendas",
                    to="meetings.oneonone",
                )),
            ],
            options={
                "db_table": "agenda",
                "ordering": ("created_at", "id"),
            },
        ),
        migrations.CreateModel(
            name="Minutes",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("content", models.TextField()),
                ("timestamp", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("one_on_one", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="minutes",
                    to="meetings.oneonone",
                )),
                ("speaker", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="minutes",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "minutes",
                "ordering": ("timestamp", "id"),
                "verbose_name_plural": "minutes",
            },
        ),
        migrations.CreateModel(
            name="NextAction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True, db_index=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("due_date", models.DateTimeField(db_index=True)),
                ("status", models.CharField(
                    choices=[("PENDING", "Pending"), ("IN_PROGRESS", "In progress"), ("COMPLETED", "Completed")],
                    db_index=True,
                    default="PENDING",
                    max_length=16,
                )),
                ("one_on_one", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="next_actions",
                    to="meetings.oneonone",
                )),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="next_actions",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "next_action",
                "ordering": ("due_date", "id"),
            },
        ),
        migrations.AddIndex(
            model_name="oneonone",
            index=models.Index(fields=["supervisor", "scheduled_at"], name="one_on_one_supervisor_idx"),
        ),
        migrations.AddIndex(
            model_name="oneonone",
            index=models.Index(fields=["member", "scheduled_at"], name="one_on_one_member_idx"),
        ),
        migrations.AddConstraint(
            model_name="oneonone",
            constraint=models.CheckConstraint(
                condition=models.Q(("supervisor", models.F("member")), _negated=True),
                name="chk_one_on_one_distinct_participants",
            ),
        ),
        migrations.AddIndex(
            model_name="nextaction",
            index=models.Index(fields=["user", "status"], name="next_action_user_status_idx"),
        ),
    ]
