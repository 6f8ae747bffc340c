# -*- coding: utf-8 -*-
from django import forms

from ..models import NextAction


class NextActionForm(forms.ModelForm):
    """title / due_date مطلوبة؛ المكلَّف يُحدد ويُفحص في الـ view."""

    class Meta:
        model = NextAction
        fields = ["title", "description", "due_date", "status"]
