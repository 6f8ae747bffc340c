# hr/urls.py
from django.urls import path

from . import views

app_name = "hr"

urlpatterns = [
    path("departments/", views.DepartmentListCreateView.as_view(), name="department_list"),
]
