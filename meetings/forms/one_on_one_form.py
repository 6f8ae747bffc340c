# -*- coding: utf-8 -*-
from django import forms
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError

from base.roles import SUPERVISOR_ROLES

from ..models import Agenda, Minutes, OneOnOne

User = get_user_model()


class OneOnOneForm(forms.ModelForm):
    """
    فورم الاجتماع:
    - supervisor: LEADER فما فوق فقط
    - supervisor ≠ member (العضو يُمرَّر من الـ view)
    """
    supervisor = forms.ModelChoiceField(
        queryset=User.objects.all(),
        error_messages={"invalid_choice": "The selected supervisor does not exist."},
    )

    class Meta:
        model = OneOnOne
        fields = ["supervisor", "scheduled_at"]

    def __init__(self, *args, member=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.member = member if member is not None else getattr(self.instance, "member", None)

    def clean_supervisor(self):
        supervisor = self.cleaned_data.get("supervisor")
        if supervisor and supervisor.role not in SUPERVISOR_ROLES:
            raise ValidationError("The selected user does not hold a supervisor role.")
        return supervisor

    def clean(self):
        cleaned = super().clean()
        supervisor = cleaned.get("supervisor")
        if supervisor and self.member is not None and supervisor.pk == self.member.pk:
            raise ValidationError({"supervisor": "Supervisor and member must be different people."})
        return cleaned

    def save(self, commit=True):
        obj = super().save(commit=False)
        if self.member is not None:
            obj.member = self.member
        if commit:
            obj.save()
        return obj


class AgendaForm(forms.ModelForm):
    class Meta:
        model = Agenda
        fields = ["title", "description"]


class MinutesForm(forms.ModelForm):
    timestamp = forms.DateTimeField(required=False)

    class Meta:
        model = Minutes
        fields = ["content", "timestamp"]

    def clean_content(self):
        content = (self.cleaned_data.get("content") or "").strip()
        if not content:
            raise ValidationError("Minutes content is required.")
        return content
