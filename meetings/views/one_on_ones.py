# meetings/views/one_on_ones.py
import logging
from datetime import datetime, time

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.shortcuts import get_object_or_404
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from base.exceptions import BadRequest, Conflict
from base.views.mixins import ApiView, ObjectPermissionRequiredMixin, json_response, parse_int

from ..forms import AgendaForm, MinutesForm, NextActionForm, OneOnOneForm
from ..models import Minutes, NextAction, NextActionStatus, OneOnOne, OneOnOneStatus
from ..serializers import (
    serialize_agenda,
    serialize_minutes,
    serialize_next_action,
    serialize_one_on_one,
)
from ..services.lifecycle import can_transition_one_on_one
from ..services.next_actions import sort_next_actions
from ..services.pdf import render_one_on_one_pdf
from ..services.templates import get_one_on_one_templates

logger = logging.getLogger(__name__)

User = get_user_model()

EDIT_FIELDS = ("supervisor_id", "scheduled_at", "agendas")


def one_on_one_queryset():
    return (
        OneOnOne.objects
        .select_related("supervisor", "member")
        .prefetch_related("agendas", "minutes__speaker", "next_actions__user")
    )


def _parse_range_bound(value, field, end=False):
    if not value:
        return None
    try:
        d = parse_date(value)
        dt = None if d is not None else parse_datetime(value)
    except ValueError:
        d = dt = None
    if d is not None:
        # تاريخ فقط: بداية اليوم أو نهايته
        dt = datetime.combine(d, time.max if end else time.min)
    elif dt is None:
        raise BadRequest(f"{field} must be an ISO-8601 date or datetime.")
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt)
    return dt


def _build_agenda_forms(items) -> list:
    if not isinstance(items, list):
        raise BadRequest("agendas must be a list.")
    forms, errors = [], {}
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise BadRequest("Each agenda item must be an object.")
        form = AgendaForm(data=item)
        if not form.is_valid():
            for name, messages in form.errors.items():
                errors[f"agendas[{index}].{name}"] = list(messages)
        forms.append(form)
    if errors:
        raise ValidationError(errors)
    return forms


def _save_agendas(one_on_one, forms) -> None:
    for form in forms:
        agenda = form.save(commit=False)
        agenda.one_on_one = one_on_one
        agenda.save()


def _ensure_free_slot(form, member, exclude_pk=None) -> None:
    clash = OneOnOne.objects.conflicting(
        supervisor_id=form.cleaned_data["supervisor"].pk,
        member_id=member.pk,
        scheduled_at=form.cleaned_data["scheduled_at"],
        exclude_pk=exclude_pk,
    )
    if clash.exists():
        raise Conflict("There is already a one-on-one scheduled at that time.")


# ============================================================
# List / Create / Templates
# ============================================================

class OneOnOneListCreateView(ApiView):
    http_method_names = ["get", "post"]

    def get(self, request):
        qs = one_on_one_queryset().for_participant(request.user.pk).order_by("-scheduled_at")

        status = request.GET.get("status")
        if status:
            qs = qs.filter(status=status)
        start = _parse_range_bound(request.GET.get("start_date"), "start_date")
        end = _parse_range_bound(request.GET.get("end_date"), "end_date", end=True)
        if start:
            qs = qs.filter(scheduled_at__gte=start)
        if end:
            qs = qs.filter(scheduled_at__lte=end)

        now = timezone.now()
        return json_response([serialize_one_on_one(o, request.user, now) for o in qs])

    def post(self, request):
        data = self.payload
        member_id = parse_int(data.get("member_id"), "member_id") or request.user.pk
        if not data.get("supervisor_id") or not data.get("scheduled_at"):
            raise BadRequest()

        # الطلب يقدّمه العضو نفسه فقط
        if member_id != request.user.pk:
            raise PermissionDenied("You can only request one-on-ones for yourself.")

        form = self.validate(OneOnOneForm(
            data={"supervisor": data.get("supervisor_id"), "scheduled_at": data.get("scheduled_at")},
            member=request.user,
        ))
        agenda_forms = _build_agenda_forms(data.get("agendas") or [])
        _ensure_free_slot(form, request.user)

        with transaction.atomic():
            one_on_one = form.save()
            _save_agendas(one_on_one, agenda_forms)

        logger.info(
            "One-on-one %s scheduled by %s with supervisor %s at %s",
            one_on_one.pk, request.user.pk, one_on_one.supervisor_id, one_on_one.scheduled_at,
        )
        one_on_one = one_on_one_queryset().get(pk=one_on_one.pk)
        return json_response(serialize_one_on_one(one_on_one, request.user), status=201)


class OneOnOneTemplatesView(ApiView):
    http_method_names = ["get"]

    def get(self, request):
        return json_response(get_one_on_one_templates())


# ============================================================
# Detail / Update / Cancel
# ============================================================

class OneOnOneObjectMixin(ObjectPermissionRequiredMixin):
    pk_url_kwarg = "pk"

    def get_permission_object(self):
        return get_object_or_404(one_on_one_queryset(), pk=self.kwargs[self.pk_url_kwarg])


class OneOnOneDetailView(OneOnOneObjectMixin, ApiView):
    http_method_names = ["get", "put", "delete"]
    object_permission_map = {
        "GET": ["meetings.view_oneonone"],
        "PUT": ["meetings.participate_oneonone"],
        "DELETE": ["meetings.participate_oneonone"],
    }
    permission_denied_messages = {
        "GET": "You do not have permission to view this one-on-one.",
        "PUT": "You do not have permission to update this one-on-one.",
        "DELETE": "You do not have permission to cancel this one-on-one.",
    }

    def get(self, request, pk):
        return json_response(serialize_one_on_one(self.get_object(), request.user))

    def put(self, request, pk):
        one_on_one = self.get_object()
        data = self.payload
        user = request.user

        new_status = data.get("status")
        if new_status and new_status != one_on_one.status:
            if not can_transition_one_on_one(one_on_one.status, new_status):
                raise BadRequest(f"Cannot change status from {one_on_one.status} to {new_status}.")
            if new_status == OneOnOneStatus.COMPLETED and not user.has_perm("meetings.complete_oneonone", one_on_one):
                raise BadRequest("This one-on-one cannot be completed before its scheduled time.")
            if new_status == OneOnOneStatus.CANCELLED and not user.has_perm("meetings.cancel_oneonone", one_on_one):
                raise BadRequest("This one-on-one can no longer be cancelled.")

        form = agenda_forms = None
        if any(key in data for key in EDIT_FIELDS):
            if not user.has_perm("meetings.change_oneonone", one_on_one):
                raise BadRequest("This one-on-one can no longer be edited.")
            form = self.validate(OneOnOneForm(
                data={
                    "supervisor": data.get("supervisor_id", one_on_one.supervisor_id),
                    "scheduled_at": data.get("scheduled_at", one_on_one.scheduled_at),
                },
                instance=one_on_one,
            ))
            if "agendas" in data:
                agenda_forms = _build_agenda_forms(data.get("agendas") or [])
            _ensure_free_slot(form, one_on_one.member, exclude_pk=one_on_one.pk)

        with transaction.atomic():
            if form is not None:
                one_on_one = form.save()
            if agenda_forms is not None:
                # جدول الأعمال يُستبدل بالكامل
                one_on_one.agendas.all().delete()
                _save_agendas(one_on_one, agenda_forms)
            if new_status and new_status != one_on_one.status:
                one_on_one.status = new_status
                one_on_one.save(update_fields=["status", "updated_at"])
                logger.info("One-on-one %s marked %s by %s", one_on_one.pk, new_status, user.pk)

        one_on_one = one_on_one_queryset().get(pk=one_on_one.pk)
        return json_response(serialize_one_on_one(one_on_one, user))

    def delete(self, request, pk):
        one_on_one = self.get_object()
        if not request.user.has_perm("meetings.cancel_oneonone", one_on_one):
            raise BadRequest("This one-on-one can no longer be cancelled.")

        # إلغاء بتغيير الحالة (التاريخ محفوظ)، وليس حذف السجل
        one_on_one.status = OneOnOneStatus.CANCELLED
        one_on_one.save(update_fields=["status", "updated_at"])
        logger.info("One-on-one %s cancelled by %s", one_on_one.pk, request.user.pk)
        return json_response({"message": "One-on-one cancelled."})


# ============================================================
# Agendas / Minutes / Next actions (participants only)
# ============================================================

class ParticipantOnlyMixin(OneOnOneObjectMixin):
    required_perms = ["meetings.participate_oneonone"]
    permission_denied_messages = {
        "GET": "You do not have permission to access this one-on-one.",
        "POST": "Only participants can add to this one-on-one.",
    }

    def participant_user(self, raw_id, field):
        """يعيد المستخدم إن كان أحد المشاركين، وإلا 400."""
        one_on_one = self.get_object()
        user_id = parse_int(raw_id, field)
        if not one_on_one.has_participant(user_id):
            raise BadRequest(f"{field} must be one of the participants.")
        if user_id == one_on_one.supervisor_id:
            return one_on_one.supervisor
        return one_on_one.member


class AgendaListCreateView(ParticipantOnlyMixin, ApiView):
    http_method_names = ["get", "post"]

    def get(self, request, pk):
        return json_response([serialize_agenda(a) for a in self.get_object().agendas.all()])

    def post(self, request, pk):
        if not (self.payload.get("title") or "").strip():
            raise BadRequest("Agenda title is required.")
        form = self.validate(self.bind_form(AgendaForm))
        agenda = form.save(commit=False)
        agenda.one_on_one = self.get_object()
        agenda.save()
        return json_response(serialize_agenda(agenda), status=201)


class MinutesListCreateView(ParticipantOnlyMixin, ApiView):
    http_method_names = ["get", "post"]

    def get(self, request, pk):
        minutes = self.get_object().minutes.all()
        return json_response([serialize_minutes(m) for m in minutes])

    def post(self, request, pk):
        if not (self.payload.get("content") or "").strip():
            raise BadRequest("Minutes content is required.")
        # المتحدث الافتراضي هو صاحب الطلب
        speaker = self.participant_user(self.payload.get("speaker_id") or request.user.pk, "speaker_id")

        form = self.validate(self.bind_form(MinutesForm))
        entry = form.save(commit=False)
        entry.one_on_one = self.get_object()
        entry.speaker = speaker
        entry.timestamp = form.cleaned_data.get("timestamp") or timezone.now()
        entry.save()
        entry = Minutes.objects.select_related("speaker").get(pk=entry.pk)
        return json_response(serialize_minutes(entry), status=201)


class OneOnOneNextActionListCreateView(ParticipantOnlyMixin, ApiView):
    http_method_names = ["get", "post"]

    def get(self, request, pk):
        actions = sort_next_actions(self.get_object().next_actions.all())
        now = timezone.now()
        return json_response([serialize_next_action(a, request.user, now) for a in actions])

    def post(self, request, pk):
        data = dict(self.payload)
        if not (data.get("title") or "").strip() or not data.get("user_id") or not data.get("due_date"):
            raise BadRequest()
        assignee = self.participant_user(data.get("user_id"), "user_id")

        data["status"] = NextActionStatus.PENDING
        form = self.validate(self.bind_form(NextActionForm, data=data))
        action = form.save(commit=False)
        action.one_on_one = self.get_object()
        action.user = assignee
        action.save()

        action = NextAction.objects.select_related("user", "one_on_one").get(pk=action.pk)
        return json_response(serialize_next_action(action, request.user), status=201)


# ============================================================
# PDF export
# ============================================================

class OneOnOnePdfView(OneOnOneObjectMixin, ApiView):
    http_method_names = ["get"]
    required_perms = ["meetings.view_oneonone"]
    permission_denied_messages = {"GET": "You do not have permission to view this one-on-one."}

    def get(self, request, pk):
        one_on_one = self.get_object()
        if not request.user.has_perm("meetings.export_oneonone", one_on_one):
            raise BadRequest("Only completed one-on-ones can be exported.")

        return render_one_on_one_pdf(request, one_on_one)
