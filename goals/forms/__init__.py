from .goal_form import GoalForm, KeyResultForm

__all__ = ["GoalForm", "KeyResultForm"]
