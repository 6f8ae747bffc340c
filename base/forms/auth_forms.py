# base/forms/auth_forms.py
from django import forms
from django.contrib.auth.forms import AuthenticationForm


class LoginForm(AuthenticationForm):
    # AuthenticationForm يستخدم name=username؛ نعرضه كحقل بريد فقط
    username = forms.EmailField(label="Email", widget=forms.EmailInput(attrs={"autocomplete": "email"}))

    def clean_username(self):
        return (self.cleaned_data.get("username") or "").strip().lower()
