# base/forms/__init__.py
from .auth_forms import LoginForm
from .user_forms import UserCreateForm, UserUpdateForm, UserAdminChangeForm, UserAdminCreationForm

__all__ = ["LoginForm", "UserCreateForm", "UserUpdateForm", "UserAdminChangeForm", "UserAdminCreationForm"]
