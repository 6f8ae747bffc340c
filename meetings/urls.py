from django.urls import path

from . import views

app_name = "meetings"

urlpatterns = [
    # One-on-ones
    path("one-on-ones/",                         views.OneOnOneListCreateView.as_view(),           name="one_on_one_list"),
    path("one-on-ones/templates/",               views.OneOnOneTemplatesView.as_view(),            name="one_on_one_templates"),
    path("one-on-ones/<int:pk>/",                views.OneOnOneDetailView.as_view(),               name="one_on_one_detail"),
    path("one-on-ones/<int:pk>/agendas/",        views.AgendaListCreateView.as_view(),             name="agenda_list"),
    path("one-on-ones/<int:pk>/minutes/",        views.MinutesListCreateView.as_view(),            name="minutes_list"),
    path("one-on-ones/<int:pk>/next-actions/",   views.OneOnOneNextActionListCreateView.as_view(), name="one_on_one_actions"),
    path("one-on-ones/<int:pk>/pdf/",            views.OneOnOnePdfView.as_view(),                  name="one_on_one_pdf"),

    # Next actions
    path("actions/",          views.NextActionListView.as_view(),   name="action_list"),
    path("actions/<int:pk>/", views.NextActionDetailView.as_view(), name="action_detail"),

    # Dashboard
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
]
