# base/management/commands/seed_demo.py
from __future__ import annotations

from datetime import timedelta

from dateutil.relativedelta import relativedelta
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from base.models import User
from base.roles import Role
from goals.models import Goal, GoalStatus, KeyResult
from hr.models import Department
from meetings.models import Agenda, Minutes, NextAction, NextActionStatus, OneOnOne, OneOnOneStatus
from meetings.services.templates import get_one_on_one_templates

# مستخدم واحد لكل دور (البريد يُبنى من الدور)
DEMO_USERS = (
    (Role.EXECUTIVE, "Emi Executive", "Head office"),
    (Role.DIRECTOR, "Daichi Director", "Head office"),
    (Role.MANAGER, "Mika Manager", "Head office"),
    (Role.LEADER, "Ren Leader", "Acme Systems"),
    (Role.GENERAL, "Gen Member", "Acme Systems"),
)


class Command(BaseCommand):
    help = "Seed a demo department, one user per role, a sample one-on-one and a sample goal."

    def add_arguments(self, parser):
        parser.add_argument("--department", default="Solutions", help='Department name (default: "Solutions").')
        parser.add_argument("--domain", default="ses.example", help="Email domain for the demo users.")
        parser.add_argument("--password", default="password123", help="Password set on every demo user.")
        parser.add_argument("--dry-run", action="store_true", help="Simulate without writing to DB.")

    def _user(self, role, name, company, department, domain, password):
        email = f"{role.lower()}@{domain}"
        user, created = User.objects.get_or_create(
            email=email,
            defaults={
                "username": email,
                "name": name,
                "role": role,
                "department": department,
                "client_company_name": company,
            },
        )
        if created:
            user.set_password(password)
            user.save(update_fields=["password"])
        self.stdout.write(f"   {'+' if created else '='} {user.email} ({user.role_display})")
        return user

    @transaction.atomic
    def handle(self, *args, **opts):
        dry = opts["dry_run"]
        domain = opts["domain"].strip().lower()
        if not domain:
            raise CommandError("--domain must not be empty.")

        self.stdout.write(self.style.NOTICE(">> Seeding SES demo data"))

        self.stdout.write("-> Department")
        department, _ = Department.objects.get_or_create(name=opts["department"].strip())

        self.stdout.write("-> Users")
        users = {
            role: self._user(role, name, company, department, domain, opts["password"])
            for role, name, company in DEMO_USERS
        }
        leader = users[Role.LEADER]
        member = users[Role.GENERAL]

        self.stdout.write("-> One-on-one")
        scheduled_at = (timezone.now() - timedelta(days=7)).replace(minute=0, second=0, microsecond=0)
        meeting = OneOnOne.objects.filter(supervisor=leader, member=member).order_by("scheduled_at").first()
        if meeting is None:
            meeting = OneOnOne.objects.create(supervisor=leader, member=member, scheduled_at=scheduled_at)
            template = get_one_on_one_templates()[0]
            Agenda.objects.bulk_create(
                Agenda(one_on_one=meeting, title=a["title"], description=a["description"])
                for a in template["agendas"][:3]
            )
            Minutes.objects.bulk_create([
                Minutes(one_on_one=meeting, speaker=member, timestamp=scheduled_at + timedelta(minutes=5),
                        content="The new project is going well; test automation is the main blocker."),
                Minutes(one_on_one=meeting, speaker=leader, timestamp=scheduled_at + timedelta(minutes=12),
                        content="Agreed to pair on the CI pipeline next week."),
            ])
            NextAction.objects.bulk_create([
                NextAction(one_on_one=meeting, user=member, title="Draft the CI pipeline proposal",
                           due_date=timezone.now() + timedelta(days=3)),
                NextAction(one_on_one=meeting, user=leader, title="Book a pairing session",
                           due_date=timezone.now() - timedelta(days=1), status=NextActionStatus.IN_PROGRESS),
            ])
            meeting.status = OneOnOneStatus.COMPLETED
            meeting.save(update_fields=["status", "updated_at"])

        self.stdout.write("-> Goal")
        today = timezone.localdate()
        goal, created = Goal.objects.get_or_create(
            user=member,
            title="Improve test automation on the client project",
            defaults={
                "description": "Raise automated coverage so releases need less manual checking.",
                "start_date": today.replace(day=1),
                "end_date": today.replace(day=1) + relativedelta(months=3, days=-1),
                "status": GoalStatus.ACTIVE,
            },
        )
        if created:
            KeyResult.objects.bulk_create([
                KeyResult(goal=goal, title="Unit test coverage", target_value=80, current_value=55, unit="%"),
                KeyResult(goal=goal, title="Automated E2E scenarios", target_value=20, current_value=4, unit="cases"),
            ])

        if dry:
            self.stdout.write(self.style.WARNING("Dry-run enabled, rolling back."))
            raise transaction.TransactionManagementError("Dry-run rollback")

        self.stdout.write(self.style.SUCCESS("Demo seed completed successfully."))
