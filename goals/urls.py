from django.urls import path

from . import views

app_name = "goals"

urlpatterns = [
    path("goals/",                       views.GoalListCreateView.as_view(), name="goal_list"),
    path("goals/examples/",              views.GoalExamplesView.as_view(),   name="goal_examples"),
    path("goals/<int:pk>/",              views.GoalDetailView.as_view(),     name="goal_detail"),
    path("goals/<int:pk>/approve/",      views.GoalApproveView.as_view(),    name="goal_approve"),
    path("goals/<int:pk>/progress/",     views.GoalProgressView.as_view(),   name="goal_progress"),
]
