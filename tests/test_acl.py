import pytest

from base import acl_service
from base.backends import RolePermissionBackend
from base.roles import Role
from goals.models import Goal, GoalStatus


def test_apps_register_their_rules():
    rules = acl_service.registered_rules()
    for key in [
        ("base.user", "view"),
        ("goals.goal", "approve"),
        ("goals.goal", "progress"),
        ("meetings.oneonone", "export"),
        ("meetings.nextaction", "delete"),
    ]:
        assert key in rules


def test_rule_decorator_registers_and_overrides():
    @acl_service.rule("tests.widget", "poke")
    def _first(user, obj):
        return False

    @acl_service.rule("tests.widget", "POKE")
    def _second(user, obj):
        return True

    assert acl_service.get_rule("tests.widget", "poke") is _second


@pytest.mark.django_db
def test_unknown_action_is_denied(manager):
    assert acl_service.has_perm(manager, manager, "teleport") is False


@pytest.mark.django_db
def test_anonymous_is_denied(member):
    from django.contrib.auth.models import AnonymousUser

    assert acl_service.has_perm(member, AnonymousUser(), "view") is False


@pytest.mark.django_db
def test_backend_maps_codename_to_rule(member, manager):
    goal = Goal.objects.create(
        user=member, title="T", description="D",
        start_date="2026-01-01", end_date="2026-03-31", status=GoalStatus.PENDING_APPROVAL,
    )
    backend = RolePermissionBackend()
    assert backend.has_perm(manager, "goals.approve_goal", goal)
    assert not backend.has_perm(member, "goals.approve_goal", goal)
    # wrong app label / model / no object
    assert not backend.has_perm(manager, "meetings.approve_goal", goal)
    assert not backend.has_perm(manager, "goals.approve_oneonone", goal)
    assert not backend.has_perm(manager, "goals.approve_goal")


@pytest.mark.django_db
def test_user_has_perm_goes_through_backend(member, manager):
    assert member.has_perm("base.view_user", member)
    assert member.role == Role.GENERAL
    assert not member.has_perm("base.view_user", manager)
