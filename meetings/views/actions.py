# meetings/views/actions.py
import logging
from datetime import timedelta

from django.core.exceptions import PermissionDenied
from django.shortcuts import get_object_or_404
from django.utils import timezone

from base.exceptions import BadRequest
from base.views.mixins import ApiView, ObjectPermissionRequiredMixin, json_response, parse_bool, parse_int

from ..access import can_view_user_actions
from ..forms import NextActionForm
from ..models import NextAction, NextActionStatus
from ..serializers import serialize_next_action, serialize_one_on_one_summary
from ..services.lifecycle import can_transition_next_action

logger = logging.getLogger(__name__)


def next_action_queryset():
    return NextAction.objects.select_related(
        "user", "one_on_one", "one_on_one__supervisor", "one_on_one__member"
    )


def _serialize_with_meeting(action, viewer, now=None) -> dict:
    data = serialize_next_action(action, viewer, now)
    data["one_on_one"] = serialize_one_on_one_summary(action.one_on_one)
    return data


class NextActionListView(ApiView):
    """
    GET /api/actions/
      ?status=PENDING|IN_PROGRESS|COMPLETED
      ?overdue=true        → due_date < now, not COMPLETED
      ?due_this_week=true  → now ≤ due_date ≤ now + 7 days, not COMPLETED
      ?user_id=<id>        → another user's actions (MANAGER فما فوق)
    """
    http_method_names = ["get"]

    def get(self, request):
        user_id = parse_int(request.GET.get("user_id"), "user_id") or request.user.pk
        if not can_view_user_actions(request.user, user_id):
            raise PermissionDenied("You do not have permission to view this user's actions.")

        now = timezone.now()
        qs = next_action_queryset().filter(user_id=user_id)

        overdue = parse_bool(request.GET.get("overdue"))
        due_this_week = parse_bool(request.GET.get("due_this_week"))
        status = request.GET.get("status")

        # overdue / due_this_week يحلّان محل فلتر status (غير المكتملة فقط)
        if overdue or due_this_week:
            qs = qs.exclude(status=NextActionStatus.COMPLETED)
            if overdue:
                qs = qs.filter(due_date__lt=now)
            if due_this_week:
                qs = qs.filter(due_date__gte=now, due_date__lte=now + timedelta(days=7))
        elif status:
            qs = qs.filter(status=status)

        qs = qs.order_by("due_date", "id")
        return json_response([_serialize_with_meeting(a, request.user, now) for a in qs])


class NextActionDetailView(ObjectPermissionRequiredMixin, ApiView):
    http_method_names = ["get", "put", "delete"]
    object_permission_map = {
        "GET": ["meetings.view_nextaction"],
        "PUT": ["meetings.change_nextaction"],
        "DELETE": ["meetings.delete_nextaction"],
    }
    permission_denied_messages = {
        "GET": "You do not have permission to view this action.",
        "PUT": "You do not have permission to edit this action.",
        "DELETE": "You do not have permission to delete this action.",
    }

    def get_permission_object(self):
        return get_object_or_404(next_action_queryset(), pk=self.kwargs["pk"])

    def get(self, request, pk):
        return json_response(_serialize_with_meeting(self.get_object(), request.user))

    def put(self, request, pk):
        action = self.get_object()
        new_status = self.payload.get("status")
        if new_status is not None and not can_transition_next_action(action.status, new_status):
            raise BadRequest(f"Invalid status: {new_status}.")

        form = self.validate(self.bind_form(NextActionForm, instance=action))
        action = form.save()
        return json_response(_serialize_with_meeting(action, request.user))

    def delete(self, request, pk):
        action = self.get_object()
        action.delete()
        logger.info("Next action %s deleted by %s", pk, request.user.pk)
        return json_response({"message": "Action deleted."})
