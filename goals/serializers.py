# goals/serializers.py
from base.serializers import serialize_user_ref

from .access import goal_permissions
from .services.lifecycle import get_goal_status_color, get_goal_status_display
from .services.progress import calculate_goal_progress, key_result_progress


def serialize_key_result(kr) -> dict:
    return {
        "id": kr.pk,
        "goal_id": kr.goal_id,
        "title": kr.title,
        "description": kr.description,
        "target_value": kr.target_value,
        "current_value": kr.current_value,
        "unit": kr.unit,
        "progress": key_result_progress(kr.current_value, kr.target_value),
    }


def serialize_goal(goal, viewer=None) -> dict:
    key_results = list(goal.key_results.all())
    data = {
        "id": goal.pk,
        "user_id": goal.user_id,
        "user": serialize_user_ref(goal.user),
        "title": goal.title,
        "description": goal.description,
        "start_date": goal.start_date,
        "end_date": goal.end_date,
        "status": goal.status,
        "status_display": get_goal_status_display(goal.status),
        "status_color": get_goal_status_color(goal.status),
        "progress": calculate_goal_progress(key_results),
        "key_results": [serialize_key_result(kr) for kr in key_results],
        "created_at": goal.created_at,
        "updated_at": goal.updated_at,
    }
    if viewer is not None:
        data["permissions"] = goal_permissions(viewer, goal)
    return data
