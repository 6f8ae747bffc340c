from types import SimpleNamespace

import pytest

from goals.models import GoalStatus
from goals.services.examples import get_goal_examples, get_key_result_unit_examples
from goals.services.lifecycle import (
    can_transition_goal,
    get_goal_status_color,
    get_goal_status_display,
)
from goals.services.progress import calculate_goal_progress, key_result_progress


def kr(current, target):
    return SimpleNamespace(current_value=current, target_value=target)


class TestProgress:
    def test_no_key_results_is_zero(self):
        assert calculate_goal_progress([]) == 0

    def test_half_way(self):
        assert calculate_goal_progress([kr(5, 10)]) == 50

    def test_over_achievement_is_clamped(self):
        assert key_result_progress(15, 10) == 100.0
        assert calculate_goal_progress([kr(15, 10), kr(0, 10)]) == 50

    def test_mean_rounds_half_up(self):
        # (25 + 0) / 2 = 12.5 → 13
        assert calculate_goal_progress([kr(1, 4), kr(0, 4)]) == 13

    def test_negative_current_floors_at_zero(self):
        assert key_result_progress(-3, 10) == 0.0


class TestLifecycle:
    @pytest.mark.parametrize(
        "current,new",
        [
            (GoalStatus.DRAFT, GoalStatus.PENDING_APPROVAL),
            (GoalStatus.REJECTED, GoalStatus.PENDING_APPROVAL),
            (GoalStatus.ACTIVE, GoalStatus.COMPLETED),
            (GoalStatus.ACTIVE, GoalStatus.CANCELLED),
            (GoalStatus.DRAFT, GoalStatus.DRAFT),
        ],
    )
    def test_owner_transitions_allowed(self, current, new):
        assert can_transition_goal(current, new)

    @pytest.mark.parametrize(
        "current,new",
        [
            (GoalStatus.DRAFT, GoalStatus.ACTIVE),
            (GoalStatus.PENDING_APPROVAL, GoalStatus.ACTIVE),
            (GoalStatus.COMPLETED, GoalStatus.ACTIVE),
            (GoalStatus.DRAFT, "ARCHIVED"),
        ],
    )
    def test_owner_transitions_rejected(self, current, new):
        assert not can_transition_goal(current, new)

    def test_approver_decides_pending_goals_only(self):
        assert can_transition_goal(GoalStatus.PENDING_APPROVAL, GoalStatus.ACTIVE, as_approver=True)
        assert can_transition_goal(GoalStatus.PENDING_APPROVAL, GoalStatus.REJECTED, as_approver=True)
        assert not can_transition_goal(GoalStatus.DRAFT, GoalStatus.ACTIVE, as_approver=True)

    def test_display_and_color(self):
        assert get_goal_status_display(GoalStatus.PENDING_APPROVAL) == "Pending approval"
        assert get_goal_status_color(GoalStatus.ACTIVE) == "blue"
        assert get_goal_status_color("UNKNOWN") == "gray"


def test_examples_are_copies():
    examples = get_goal_examples()
    assert len(examples) == 2
    examples[0]["key_results"].clear()
    assert get_goal_examples()[0]["key_results"]
    assert "%" in get_key_result_unit_examples()
