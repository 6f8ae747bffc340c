import pytest

from base.roles import (
    SUPERVISOR_ROLES,
    Role,
    get_role_display_name,
    has_permission,
    is_senior_to,
    role_rank,
)
from base.utils import percent, round_half_up


@pytest.mark.parametrize(
    "role,rank",
    [
        (Role.GENERAL, 0),
        (Role.LEADER, 1),
        (Role.MANAGER, 2),
        (Role.DIRECTOR, 3),
        (Role.EXECUTIVE, 4),
        ("INTERN", -1),
        (None, -1),
    ],
)
def test_role_rank(role, rank):
    assert role_rank(role) == rank


def test_has_permission_is_inclusive():
    assert has_permission(Role.MANAGER, Role.MANAGER)
    assert has_permission(Role.EXECUTIVE, Role.GENERAL)
    assert not has_permission(Role.LEADER, Role.MANAGER)


def test_unknown_role_never_satisfies_a_check():
    assert not has_permission("INTERN", Role.GENERAL)
    assert not has_permission(None, Role.GENERAL)


def test_is_senior_to_is_strict():
    assert is_senior_to(Role.DIRECTOR, Role.MANAGER)
    assert not is_senior_to(Role.MANAGER, Role.MANAGER)
    assert not is_senior_to(Role.GENERAL, Role.LEADER)


def test_supervisor_roles_start_at_leader():
    assert Role.GENERAL not in SUPERVISOR_ROLES
    assert set(SUPERVISOR_ROLES) == {Role.LEADER, Role.MANAGER, Role.DIRECTOR, Role.EXECUTIVE}


def test_role_display_name():
    assert get_role_display_name(Role.DIRECTOR) == "Director"
    assert get_role_display_name("INTERN") == "INTERN"
    assert get_role_display_name(None) == ""


def test_round_half_up_and_percent():
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12
    assert percent(1, 4) == 25
    assert percent(1, 8) == 13
    assert percent(0, 0) == 0


@pytest.mark.parametrize("role", list(Role))
def test_has_permission_is_reflexive(role):
    assert has_permission(role, role)
    assert not is_senior_to(role, role)
