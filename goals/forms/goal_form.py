# -*- coding: utf-8 -*-
from django import forms
from django.core.exceptions import ValidationError

from ..models import Goal, KeyResult


class GoalForm(forms.ModelForm):
    """
    فورم الهدف مع تحققات أساسية:
    - العنوان والوصف والتواريخ مطلوبة
    - التواريخ: النهاية ≥ البداية
    - status: قيمة صحيحة من GoalStatus (الانتقال نفسه يُفحص في الـ view)
    """
    description = forms.CharField(widget=forms.Textarea(attrs={"rows": 3}))

    class Meta:
        model = Goal
        fields = ["title", "description", "start_date", "end_date", "status"]

    def clean_title(self):
        title = (self.cleaned_data.get("title") or "").strip()
        if not title:
            raise ValidationError("Title is required.")
        return title

    def clean(self):
        cleaned = super().clean()
        start_date = cleaned.get("start_date")
        end_date = cleaned.get("end_date")
        if start_date and end_date and end_date < start_date:
            raise ValidationError({"end_date": "End date must be greater than or equal to start date."})
        return cleaned


class KeyResultForm(forms.ModelForm):
    current_value = forms.FloatField(required=False)

    class Meta:
        model = KeyResult
        fields = ["title", "target_value", "current_value", "unit", "description"]

    def clean_target_value(self):
        target = self.cleaned_data.get("target_value")
        if target is not None and target <= 0:
            raise ValidationError("Target value must be greater than zero.")
        return target

    def clean_current_value(self):
        return self.cleaned_data.get("current_value") or 0
