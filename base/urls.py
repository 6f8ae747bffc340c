# base/urls.py
from django.urls import path

from .views import (
    LoginView, LogoutView, MeView,
    UserListCreateView, UserDetailView, SupervisorListView,
)


app_name = "base"

urlpatterns = [
    # Auth
    path("auth/login/",  LoginView.as_view(),  name="login"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("auth/me/",     MeView.as_view(),     name="me"),

    # Users
    path("users/",             UserListCreateView.as_view(), name="user_list"),
    path("users/supervisors/", SupervisorListView.as_view(), name="supervisors"),
    path("users/<int:pk>/",    UserDetailView.as_view(),     name="user_detail"),
]
