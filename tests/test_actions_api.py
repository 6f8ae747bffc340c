from datetime import timedelta

import pytest
from django.utils import timezone

from meetings.models import NextAction, NextActionStatus

pytestmark = pytest.mark.django_db


@pytest.fixture
def make_action(one_on_one, member):
    def _make(days, status=NextActionStatus.PENDING, user=None, title=None):
        return NextAction.objects.create(
            one_on_one=one_on_one,
            user=user or member,
            title=title or f"Action {days:+d}d",
            due_date=timezone.now() + timedelta(days=days),
            status=status,
        )

    return _make


class TestList:
    def test_own_actions_sorted_by_due_date(self, client_for, member, make_action):
        later = make_action(5)
        sooner = make_action(1)
        res = client_for(member).get("/api/actions/")
        assert res.status_code == 200
        body = res.json()
        assert [a["id"] for a in body] == [sooner.pk, later.pk]
        assert body[0]["one_on_one"]["id"] == sooner.one_on_one_id

    def test_overdue_filter_skips_completed(self, client_for, member, make_action):
        late = make_action(-2)
        make_action(-3, status=NextActionStatus.COMPLETED)
        make_action(3)
        res = client_for(member).get("/api/actions/", {"overdue": "true"})
        assert [a["id"] for a in res.json()] == [late.pk]
        assert res.json()[0]["is_overdue"] is True

    def test_due_this_week_filter(self, client_for, member, make_action):
        soon = make_action(2)
        make_action(10)
        make_action(-1)
        res = client_for(member).get("/api/actions/", {"due_this_week": "1"})
        assert [a["id"] for a in res.json()] == [soon.pk]

    def test_status_filter(self, client_for, member, make_action):
        make_action(1)
        doing = make_action(2, status=NextActionStatus.IN_PROGRESS)
        res = client_for(member).get("/api/actions/", {"status": NextActionStatus.IN_PROGRESS})
        assert [a["id"] for a in res.json()] == [doing.pk]

    def test_overdue_replaces_status_filter(self, client_for, member, make_action):
        late = make_action(-2, status=NextActionStatus.IN_PROGRESS)
        make_action(-3, status=NextActionStatus.COMPLETED)
        res = client_for(member).get("/api/actions/", {"status": NextActionStatus.COMPLETED, "overdue": "true"})
        assert [a["id"] for a in res.json()] == [late.pk]

    def test_due_tomorrow_flag(self, client_for, member, make_action):
        make_action(1)
        body = client_for(member).get("/api/actions/").json()[0]
        assert body["is_due_tomorrow"] is True
        assert body["is_due_today"] is False

    def test_other_users_actions_need_manager(self, client_for, member, leader, manager, make_action):
        make_action(1)
        assert client_for(leader).get("/api/actions/", {"user_id": member.pk}).status_code == 403
        res = client_for(manager).get("/api/actions/", {"user_id": member.pk})
        assert res.status_code == 200
        assert len(res.json()) == 1


class TestDetail:
    def test_assignee_updates_status(self, client_for, member, make_action):
        action = make_action(1)
        res = client_for(member).put_json(f"/api/actions/{action.pk}/", {"status": NextActionStatus.COMPLETED})
        assert res.status_code == 200
        action.refresh_from_db()
        assert action.status == NextActionStatus.COMPLETED
        assert action.title == "Action +1d"

    def test_completed_action_can_be_reopened(self, client_for, member, make_action):
        action = make_action(1, status=NextActionStatus.COMPLETED)
        res = client_for(member).put_json(f"/api/actions/{action.pk}/", {"status": NextActionStatus.PENDING})
        assert res.status_code == 200

    def test_invalid_status(self, client_for, member, make_action):
        action = make_action(1)
        res = client_for(member).put_json(f"/api/actions/{action.pk}/", {"status": "DONE"})
        assert res.status_code == 400

    def test_supervisor_may_edit_members_action(self, client_for, leader, make_action):
        action = make_action(1)
        res = client_for(leader).put_json(f"/api/actions/{action.pk}/", {"title": "Renamed"})
        assert res.status_code == 200
        assert res.json()["title"] == "Renamed"

    def test_manager_views_but_cannot_edit(self, client_for, manager, make_action):
        action = make_action(1)
        client = client_for(manager)
        assert client.get(f"/api/actions/{action.pk}/").status_code == 200
        assert client.put_json(f"/api/actions/{action.pk}/", {"title": "x"}).status_code == 403
        assert client.delete(f"/api/actions/{action.pk}/").status_code == 403

    def test_outsider_cannot_view(self, client_for, make_user, make_action):
        action = make_action(1)
        assert client_for(make_user()).get(f"/api/actions/{action.pk}/").status_code == 403

    def test_assignee_deletes(self, client_for, member, make_action):
        action = make_action(1)
        assert client_for(member).delete(f"/api/actions/{action.pk}/").status_code == 200
        assert not NextAction.objects.filter(pk=action.pk).exists()
