# base/views/__init__.py
from .auth_views import LoginView, LogoutView, MeView
from .user_views import UserListCreateView, UserDetailView, SupervisorListView

__all__ = [
    "LoginView", "LogoutView", "MeView",
    "UserListCreateView", "UserDetailView", "SupervisorListView",
]
