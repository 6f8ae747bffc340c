# meetings/services/availability.py
"""
Which actions a one-on-one currently offers to the requester.

Every flag is re-evaluated against `now` on each call; nothing is cached.
"""
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from typing import Optional

from django.utils import timezone

from ..models.one_on_one import OneOnOneStatus

CONDUCT_OPENS_BEFORE = timedelta(minutes=30)
CONDUCT_CLOSES_AFTER = timedelta(minutes=60)


@dataclass(frozen=True)
class MeetingActions:
    can_edit: bool = False
    can_cancel: bool = False
    can_conduct: bool = False
    can_complete: bool = False
    can_export_pdf: bool = False

    def as_dict(self) -> dict:
        return asdict(self)


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else timezone.now()


def can_conduct(scheduled_at: datetime, now: Optional[datetime] = None) -> bool:
    """True from 30 minutes before the start until 60 minutes after it (inclusive)."""
    now = _now(now)
    return scheduled_at - CONDUCT_OPENS_BEFORE <= now <= scheduled_at + CONDUCT_CLOSES_AFTER


def get_available_actions(
    status: str,
    is_participant: bool,
    scheduled_at: datetime,
    now: Optional[datetime] = None,
) -> MeetingActions:
    now = _now(now)
    scheduled = status == OneOnOneStatus.SCHEDULED
    is_past = now > scheduled_at
    open_for_participant = scheduled and bool(is_participant)

    return MeetingActions(
        can_edit=open_for_participant and not is_past,
        can_cancel=open_for_participant and not is_past,
        can_conduct=open_for_participant and can_conduct(scheduled_at, now),
        can_complete=open_for_participant and is_past,
        can_export_pdf=status == OneOnOneStatus.COMPLETED,
    )


def actions_for(one_on_one, user, now: Optional[datetime] = None) -> MeetingActions:
    return get_available_actions(
        one_on_one.status,
        one_on_one.has_participant(getattr(user, "id", None)),
        one_on_one.scheduled_at,
        now,
    )
