# base/roles.py
# ------------------------------------------------------------
# Organisational role hierarchy
# ------------------------------------------------------------
# GENERAL < LEADER < MANAGER < DIRECTOR < EXECUTIVE
# Any value outside the enumeration ranks -1, so it never satisfies a check.
# ------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from django.db import models
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    GENERAL = "GENERAL", _("General")
    LEADER = "LEADER", _("Leader")
    MANAGER = "MANAGER", _("Manager")
    DIRECTOR = "DIRECTOR", _("Director")
    EXECUTIVE = "EXECUTIVE", _("Executive")


ROLE_RANK: dict[str, int] = {
    Role.GENERAL: 0,
    Role.LEADER: 1,
    Role.MANAGER: 2,
    Role.DIRECTOR: 3,
    Role.EXECUTIVE: 4,
}

UNKNOWN_RANK = -1

# Roles allowed to run a one-on-one as the supervisor
SUPERVISOR_ROLES: tuple[str, ...] = tuple(
    role for role, rank in ROLE_RANK.items() if rank >= ROLE_RANK[Role.LEADER]
)


def role_rank(role: Optional[str]) -> int:
    return ROLE_RANK.get(role, UNKNOWN_RANK)


def has_permission(user_role: Optional[str], required_role: Optional[str]) -> bool:
    """True if ``user_role`` is at least as senior as ``required_role``."""
    return role_rank(user_role) >= role_rank(required_role)


def is_senior_to(role: Optional[str], other: Optional[str]) -> bool:
    """Strict seniority: equal ranks are never senior to each other."""
    return role_rank(role) > role_rank(other)


def get_role_display_name(role: Optional[str]) -> str:
    if role in ROLE_RANK:
        return str(Role(role).label)
    return role or ""
