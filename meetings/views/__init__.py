from .one_on_ones import (
    OneOnOneListCreateView,
    OneOnOneTemplatesView,
    OneOnOneDetailView,
    AgendaListCreateView,
    MinutesListCreateView,
    OneOnOneNextActionListCreateView,
    OneOnOnePdfView,
)
from .actions import NextActionListView, NextActionDetailView
from .dashboard import DashboardView

__all__ = [
    "OneOnOneListCreateView",
    "OneOnOneTemplatesView",
    "OneOnOneDetailView",
    "AgendaListCreateView",
    "MinutesListCreateView",
    "OneOnOneNextActionListCreateView",
    "OneOnOnePdfView",
    "NextActionListView",
    "NextActionDetailView",
    "DashboardView",
]
