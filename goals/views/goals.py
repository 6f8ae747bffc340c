# goals/views/goals.py
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404

from base.exceptions import BadRequest
from base.views.mixins import ApiView, ObjectPermissionRequiredMixin, json_response, parse_int

from ..access import can_view_user_goals
from ..forms import GoalForm, KeyResultForm
from ..models import Goal, GoalStatus, KeyResult
from ..serializers import serialize_goal
from ..services.examples import get_goal_examples, get_key_result_unit_examples
from ..services.lifecycle import APPROVAL_DECISIONS, INITIAL_STATUSES, can_transition_goal

logger = logging.getLogger(__name__)


def _goal_queryset():
    return Goal.objects.select_related("user").prefetch_related("key_results")


def _build_key_result_forms(items) -> list:
    if not isinstance(items, list):
        raise BadRequest("key_results must be a list.")
    forms = []
    errors = {}
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise BadRequest("Each key result must be an object.")
        form = KeyResultForm(data=item)
        if not form.is_valid():
            for name, messages in form.errors.items():
                errors[f"key_results[{index}].{name}"] = list(messages)
        forms.append(form)
    if errors:
        raise ValidationError(errors)
    return forms


def _save_key_results(goal, forms) -> None:
    for form in forms:
        kr = form.save(commit=False)
        kr.goal = goal
        kr.save()


# ============================================================
# List / Create
# ============================================================

class GoalListCreateView(ApiView):
    http_method_names = ["get", "post"]

    def get(self, request):
        owner_id = parse_int(request.GET.get("user_id"), "user_id") or request.user.pk
        if not can_view_user_goals(request.user, owner_id):
            raise PermissionDenied("You do not have permission to view this user's goals.")

        qs = _goal_queryset().filter(user_id=owner_id).order_by("-created_at")
        status = request.GET.get("status")
        if status:
            qs = qs.filter(status=status)
        return json_response([serialize_goal(g, request.user) for g in qs])

    def post(self, request):
        data = dict(self.payload)
        data.setdefault("status", GoalStatus.DRAFT)
        if data["status"] not in INITIAL_STATUSES:
            raise BadRequest("A new goal must start as DRAFT or PENDING_APPROVAL.")

        form = self.validate(self.bind_form(GoalForm, data=data))
        kr_forms = _build_key_result_forms(data.get("key_results") or [])

        with transaction.atomic():
            goal = form.save(commit=False)
            goal.user = request.user
            goal.save()
            _save_key_results(goal, kr_forms)

        logger.info("Goal %s created by %s (status=%s)", goal.pk, request.user.pk, goal.status)
        return json_response(serialize_goal(_goal_queryset().get(pk=goal.pk), request.user), status=201)


class GoalExamplesView(ApiView):
    http_method_names = ["get"]

    def get(self, request):
        return json_response({
            "goals": get_goal_examples(),
            "units": get_key_result_unit_examples(),
        })


# ============================================================
# Detail / Update / Delete
# ============================================================

class GoalDetailView(ObjectPermissionRequiredMixin, ApiView):
    http_method_names = ["get", "put", "delete"]
    object_permission_map = {
        "GET": ["goals.view_goal"],
        "PUT": ["goals.change_goal"],
        "DELETE": ["goals.delete_goal"],
    }
    permission_denied_messages = {
        "GET": "You do not have permission to view this goal.",
        "PUT": "You do not have permission to edit this goal.",
        "DELETE": "You do not have permission to delete this goal.",
    }

    def get_permission_object(self):
        return get_object_or_404(_goal_queryset(), pk=self.kwargs["pk"])

    def get(self, request, pk):
        return json_response(serialize_goal(self.get_object(), request.user))

    def put(self, request, pk):
        goal = self.get_object()
        data = self.payload

        new_status = data.get("status")
        if new_status and not can_transition_goal(goal.status, new_status):
            raise BadRequest(f"Cannot change goal status from {goal.status} to {new_status}.")

        form = self.validate(self.bind_form(GoalForm, instance=goal))
        kr_forms = None
        if "key_results" in data:
            kr_forms = _build_key_result_forms(data.get("key_results") or [])

        with transaction.atomic():
            goal = form.save()
            if kr_forms is not None:
                # key results تُستبدل بالكامل
                goal.key_results.all().delete()
                _save_key_results(goal, kr_forms)

        return json_response(serialize_goal(_goal_queryset().get(pk=goal.pk), request.user))

    def delete(self, request, pk):
        goal = self.get_object()
        goal.delete()
        logger.info("Goal %s deleted by %s", pk, request.user.pk)
        return json_response({"message": "Goal deleted."})


# ============================================================
# Approval / Progress
# ============================================================

class GoalApproveView(ApiView):
    """PATCH /api/goals/<id>/approve/  {"status": "ACTIVE" | "REJECTED", "comment": "..."}"""
    http_method_names = ["patch"]

    def patch(self, request, pk):
        decision = self.payload.get("status")
        if decision not in APPROVAL_DECISIONS:
            raise BadRequest("Status must be ACTIVE or REJECTED.")

        goal = get_object_or_404(_goal_queryset(), pk=pk)
        if goal.status != GoalStatus.PENDING_APPROVAL:
            raise BadRequest("Only goals pending approval can be approved or rejected.")

        if not request.user.has_perm("goals.approve_goal", goal):
            raise PermissionDenied("You do not have permission to approve this goal.")

        goal.status = decision
        goal.save(update_fields=["status", "updated_at"])
        logger.info(
            "Goal %s %s by %s%s",
            goal.pk,
            "approved" if decision == GoalStatus.ACTIVE else "rejected",
            request.user.pk,
            f" (comment: {self.payload['comment']})" if self.payload.get("comment") else "",
        )

        message = "Goal approved." if decision == GoalStatus.ACTIVE else "Goal sent back."
        return json_response({"message": message, "goal": serialize_goal(goal, request.user)})


class GoalProgressView(ObjectPermissionRequiredMixin, ApiView):
    """PATCH /api/goals/<id>/progress/  {"key_results": [{"id": 1, "current_value": 3}, ...]}"""
    http_method_names = ["patch"]
    required_perms = ["goals.progress_goal"]
    permission_denied_messages = {"PATCH": "You do not have permission to update this goal's progress."}

    def get_permission_object(self):
        return get_object_or_404(Goal, pk=self.kwargs["pk"])

    def patch(self, request, pk):
        items = self.payload.get("key_results")
        if not isinstance(items, list):
            raise BadRequest("key_results must be a list.")

        goal = self.get_object()
        if goal.status != GoalStatus.ACTIVE:
            raise BadRequest("Progress can only be updated on an active goal.")

        owned = {kr.pk: kr for kr in goal.key_results.all()}
        updates = []
        for item in items:
            kr_id = item.get("id") if isinstance(item, dict) else None
            if kr_id not in owned:
                raise BadRequest("Key result does not belong to this goal.")
            value = item.get("current_value")
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise BadRequest("current_value must be a number.")
            kr = owned[kr_id]
            kr.current_value = value
            updates.append(kr)

        with transaction.atomic():
            KeyResult.objects.bulk_update(updates, ["current_value"])
            goal.save(update_fields=["updated_at"])

        goal = _goal_queryset().get(pk=goal.pk)
        return json_response({"message": "Progress updated.", "goal": serialize_goal(goal, request.user)})
