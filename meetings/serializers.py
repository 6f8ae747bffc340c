# meetings/serializers.py
from base.serializers import serialize_user_ref

from .access import (
    can_delete_next_action,
    can_edit_next_action,
    is_participant,
)
from .services.availability import actions_for
from .services.lifecycle import (
    get_next_action_status_color,
    get_next_action_status_display,
    get_one_on_one_status_color,
    get_one_on_one_status_display,
)
from .services.next_actions import (
    days_until_due,
    due_date_display,
    get_priority,
    is_due_today,
    is_due_tomorrow,
    is_overdue,
    priority_color,
)
from .models import NextActionStatus


def serialize_agenda(agenda) -> dict:
    return {
        "id": agenda.pk,
        "one_on_one_id": agenda.one_on_one_id,
        "title": agenda.title,
        "description": agenda.description,
        "created_at": agenda.created_at,
    }


def serialize_minutes(minutes) -> dict:
    return {
        "id": minutes.pk,
        "one_on_one_id": minutes.one_on_one_id,
        "speaker_id": minutes.speaker_id,
        "speaker": serialize_user_ref(minutes.speaker),
        "content": minutes.content,
        "timestamp": minutes.timestamp,
    }


def serialize_next_action(action, viewer=None, now=None) -> dict:
    priority = get_priority(action.due_date, now)
    data = {
        "id": action.pk,
        "one_on_one_id": action.one_on_one_id,
        "user_id": action.user_id,
        "user": serialize_user_ref(action.user),
        "title": action.title,
        "description": action.description,
        "due_date": action.due_date,
        "status": action.status,
        "status_display": get_next_action_status_display(action.status),
        "status_color": get_next_action_status_color(action.status),
        "days_until_due": days_until_due(action.due_date, now),
        "due_date_display": due_date_display(action.due_date, now),
        "is_overdue": action.status != NextActionStatus.COMPLETED and is_overdue(action.due_date, now),
        "is_due_today": is_due_today(action.due_date, now),
        "is_due_tomorrow": is_due_tomorrow(action.due_date, now),
        "priority": priority,
        "priority_color": priority_color(priority),
        "created_at": action.created_at,
        "updated_at": action.updated_at,
    }
    if viewer is not None:
        data["permissions"] = {
            "can_edit": can_edit_next_action(viewer, action),
            "can_delete": can_delete_next_action(viewer, action),
        }
    return data


def serialize_one_on_one_summary(one_on_one) -> dict:
    return {
        "id": one_on_one.pk,
        "scheduled_at": one_on_one.scheduled_at,
        "status": one_on_one.status,
        "supervisor": serialize_user_ref(one_on_one.supervisor),
        "member": serialize_user_ref(one_on_one.member),
    }


def serialize_one_on_one(one_on_one, viewer, now=None, detail=True) -> dict:
    data = {
        **serialize_one_on_one_summary(one_on_one),
        "supervisor_id": one_on_one.supervisor_id,
        "member_id": one_on_one.member_id,
        "status_display": get_one_on_one_status_display(one_on_one.status),
        "status_color": get_one_on_one_status_color(one_on_one.status),
        "is_participant": is_participant(viewer, one_on_one),
        "available_actions": actions_for(one_on_one, viewer, now).as_dict(),
        "created_at": one_on_one.created_at,
        "updated_at": one_on_one.updated_at,
    }
    if detail:
        data["agendas"] = [serialize_agenda(a) for a in one_on_one.agendas.all()]
        data["minutes"] = [serialize_minutes(m) for m in one_on_one.minutes.all()]
        data["next_actions"] = [
            serialize_next_action(a, viewer, now) for a in one_on_one.next_actions.all()
        ]
    return data
