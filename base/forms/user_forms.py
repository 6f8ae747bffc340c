# base/forms/user_forms.py
from django import forms
from django.contrib.auth.forms import BaseUserCreationForm, ReadOnlyPasswordHashField

from ..models import User
from ..roles import Role


class UserCreateForm(forms.ModelForm):
    """
    إنشاء مستخدم عبر الـ API.
    - التحقق من تكرار البريد يتم في الـ view (409) قبل هذا الفورم.
    - role فارغ → GENERAL.
    """
    password = forms.CharField(label="Password", widget=forms.PasswordInput, strip=False)
    role = forms.ChoiceField(choices=Role.choices, required=False)

    class Meta:
        model = User
        fields = ("email", "name", "role", "department", "client_company_name")

    def clean_email(self):
        return (self.cleaned_data.get("email") or "").strip().lower()

    def clean_role(self):
        return self.cleaned_data.get("role") or Role.GENERAL

    def save(self, commit=True):
        user = super().save(commit=False)
        user.username = user.email
        user.set_password(self.cleaned_data["password"])
        if commit:
            user.save()
        return user


class UserUpdateForm(forms.ModelForm):
    """
    تحديث جزئي: الـ view يدمج القيم الحالية مع المرسلة.
    role يُطبَّق فقط بعد فحص can_change_role في الـ view.
    """
    password = forms.CharField(label="Password", widget=forms.PasswordInput, strip=False, required=False)

    class Meta:
        model = User
        fields = ("email", "name", "role", "department", "client_company_name")

    def clean_email(self):
        email = (self.cleaned_data.get("email") or "").strip().lower()
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise forms.ValidationError("This email address is already in use.")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        password = self.cleaned_data.get("password")
        if password:
            user.set_password(password)
        if commit:
            user.save()
        return user


class UserAdminChangeForm(forms.ModelForm):
    password = ReadOnlyPasswordHashField(help_text="Raw passwords are not stored.")

    class Meta:
        model = User
        fields = (
            "email", "username", "name", "role", "department", "client_company_name",
            "is_staff", "is_superuser", "is_active",
        )


class UserAdminCreationForm(BaseUserCreationForm):
    """فورم الإضافة في لوحة الإدارة (password1/password2 من BaseUserCreationForm)."""

    class Meta:
        model = User
        fields = ("email", "username", "name", "role", "department")

    def clean_email(self):
        return (self.cleaned_data.get("email") or "").strip().lower()
