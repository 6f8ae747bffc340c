from .goals import (
    GoalListCreateView,
    GoalExamplesView,
    GoalDetailView,
    GoalApproveView,
    GoalProgressView,
)

__all__ = [
    "GoalListCreateView",
    "GoalExamplesView",
    "GoalDetailView",
    "GoalApproveView",
    "GoalProgressView",
]
