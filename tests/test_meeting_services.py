from datetime import datetime, timedelta, timezone as dt_timezone
from types import SimpleNamespace

import pytest
from django.utils import timezone

from meetings.models import NextActionStatus, OneOnOneStatus
from meetings.services.availability import can_conduct, get_available_actions
from meetings.services.lifecycle import (
    can_transition_next_action,
    can_transition_one_on_one,
    is_terminal,
)
from meetings.services.next_actions import (
    days_until_due,
    due_date_display,
    filter_next_actions,
    get_next_action_stats,
    get_priority,
    is_due_today,
    is_due_tomorrow,
    is_overdue,
    sort_next_actions,
)
from meetings.services.templates import get_one_on_one_templates

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=dt_timezone.utc)


def action(status, due, user_id=1, one_on_one_id=1, title=""):
    return SimpleNamespace(status=status, due_date=due, user_id=user_id, one_on_one_id=one_on_one_id, title=title)


class TestConductWindow:
    @pytest.mark.parametrize(
        "offset,expected",
        [
            (timedelta(minutes=-31), False),
            (timedelta(minutes=-30), True),
            (timedelta(0), True),
            (timedelta(minutes=60), True),
            (timedelta(minutes=61), False),
        ],
    )
    def test_window_edges(self, offset, expected):
        # offset = now - scheduled_at
        assert can_conduct(NOW - offset, now=NOW) is expected


class TestAvailableActions:
    def test_future_meeting_for_participant(self):
        actions = get_available_actions(OneOnOneStatus.SCHEDULED, True, NOW + timedelta(days=1), NOW)
        assert actions.can_edit and actions.can_cancel
        assert not actions.can_conduct and not actions.can_complete
        assert not actions.can_export_pdf

    def test_in_progress_meeting(self):
        actions = get_available_actions(OneOnOneStatus.SCHEDULED, True, NOW - timedelta(minutes=10), NOW)
        assert actions.can_conduct
        assert actions.can_complete
        assert not actions.can_edit and not actions.can_cancel

    def test_non_participant_gets_nothing_but_export_flag(self):
        actions = get_available_actions(OneOnOneStatus.COMPLETED, False, NOW - timedelta(days=1), NOW)
        assert actions.as_dict() == {
            "can_edit": False,
            "can_cancel": False,
            "can_conduct": False,
            "can_complete": False,
            "can_export_pdf": True,
        }

    def test_cancelled_meeting_offers_nothing(self):
        actions = get_available_actions(OneOnOneStatus.CANCELLED, True, NOW + timedelta(hours=1), NOW)
        assert not any(actions.as_dict().values())


class TestLifecycle:
    def test_one_on_one_transitions(self):
        assert can_transition_one_on_one(OneOnOneStatus.SCHEDULED, OneOnOneStatus.COMPLETED)
        assert can_transition_one_on_one(OneOnOneStatus.SCHEDULED, OneOnOneStatus.CANCELLED)
        assert not can_transition_one_on_one(OneOnOneStatus.COMPLETED, OneOnOneStatus.SCHEDULED)
        assert not can_transition_one_on_one(OneOnOneStatus.CANCELLED, OneOnOneStatus.COMPLETED)
        assert not can_transition_one_on_one(OneOnOneStatus.SCHEDULED, "POSTPONED")

    def test_terminal_statuses(self):
        assert is_terminal(OneOnOneStatus.COMPLETED)
        assert not is_terminal(OneOnOneStatus.SCHEDULED)

    def test_next_action_status_is_free_form_within_values(self):
        assert can_transition_next_action(NextActionStatus.COMPLETED, NextActionStatus.PENDING)
        assert not can_transition_next_action(NextActionStatus.PENDING, "DONE")


class TestDueDates:
    def test_days_until_due_rounds_up(self):
        assert days_until_due(NOW + timedelta(hours=1), NOW) == 1
        assert days_until_due(NOW - timedelta(hours=1), NOW) == 0
        assert days_until_due(NOW - timedelta(hours=25), NOW) == -1

    @pytest.mark.parametrize(
        "delta,text",
        [
            (timedelta(days=-3), "3 days overdue"),
            (timedelta(hours=-25), "1 day overdue"),
            (timedelta(hours=-1), "Due today"),
            (timedelta(hours=5), "Due tomorrow"),
            (timedelta(days=4), "In 4 days"),
        ],
    )
    def test_due_date_display(self, delta, text):
        assert due_date_display(NOW + delta, NOW) == text

    def test_priority(self):
        assert get_priority(NOW + timedelta(hours=2), NOW) == "high"
        assert get_priority(NOW + timedelta(days=5), NOW) == "medium"
        assert get_priority(NOW + timedelta(days=10), NOW) == "low"

    def test_is_overdue(self):
        assert is_overdue(NOW - timedelta(seconds=1), NOW)
        assert not is_overdue(NOW, NOW)

    def test_due_today_uses_local_calendar_date(self):
        # 2026-03-09 15:30 UTC = 2026-03-10 00:30 JST, NOW = 2026-03-10 21:00 JST
        due = datetime(2026, 3, 9, 15, 30, tzinfo=dt_timezone.utc)
        with timezone.override("Asia/Tokyo"):
            assert is_due_today(due, NOW)
            assert not is_due_tomorrow(due, NOW)
        with timezone.override("UTC"):
            assert not is_due_today(due, NOW)

    def test_due_tomorrow_crosses_local_midnight(self):
        # 2026-03-10 15:30 UTC = 2026-03-11 00:30 JST
        due = datetime(2026, 3, 10, 15, 30, tzinfo=dt_timezone.utc)
        with timezone.override("Asia/Tokyo"):
            assert is_due_tomorrow(due, NOW)
            assert not is_due_today(due, NOW)
        with timezone.override("UTC"):
            assert is_due_today(due, NOW)
            assert not is_due_tomorrow(due, NOW)


class TestSortFilterStats:
    def test_open_items_first_then_due_date(self):
        done = action(NextActionStatus.COMPLETED, NOW - timedelta(days=5), title="done")
        later = action(NextActionStatus.PENDING, NOW + timedelta(days=3), title="later")
        sooner = action(NextActionStatus.IN_PROGRESS, NOW + timedelta(days=1), title="sooner")
        assert [a.title for a in sort_next_actions([done, later, sooner])] == ["sooner", "later", "done"]

    def test_filter_combines_criteria(self):
        overdue = action(NextActionStatus.PENDING, NOW - timedelta(days=1), user_id=1)
        other_user = action(NextActionStatus.PENDING, NOW - timedelta(days=1), user_id=2)
        future = action(NextActionStatus.PENDING, NOW + timedelta(days=20), user_id=1)
        result = filter_next_actions([overdue, other_user, future], overdue=True, user_id=1, now=NOW)
        assert result == [overdue]

    def test_filter_due_this_week(self):
        soon = action(NextActionStatus.PENDING, NOW + timedelta(days=2))
        far = action(NextActionStatus.PENDING, NOW + timedelta(days=9))
        assert filter_next_actions([soon, far], due_this_week=True, now=NOW) == [soon]

    def test_stats(self):
        items = [
            action(NextActionStatus.COMPLETED, NOW - timedelta(days=2)),
            action(NextActionStatus.PENDING, NOW - timedelta(days=1)),
            action(NextActionStatus.IN_PROGRESS, NOW + timedelta(days=2)),
            action(NextActionStatus.PENDING, NOW + timedelta(days=30)),
        ]
        stats = get_next_action_stats(items, NOW)
        assert stats == {
            "total": 4,
            "completed": 1,
            "in_progress": 1,
            "pending": 2,
            "overdue": 1,
            "due_this_week": 1,
            "completion_rate": 25,
        }

    def test_stats_empty(self):
        assert get_next_action_stats([], NOW)["completion_rate"] == 0


def test_agenda_templates():
    templates = get_one_on_one_templates()
    assert [t["key"] for t in templates] == ["monthly", "project_onboarding", "quarterly_review", "problem_solving"]
    assert all(t["agendas"] for t in templates)


def test_export_filename_uses_local_date_and_member():
    from meetings.services.pdf import export_filename

    meeting = SimpleNamespace(scheduled_at=NOW, member=SimpleNamespace(name="Gen Member"), member_id=3)
    # 12:00 UTC is 21:00 in Asia/Tokyo, same calendar day
    assert export_filename(meeting) == "1on1-2026-03-10-gen-member.pdf"
