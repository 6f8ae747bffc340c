import pytest

from goals.models import Goal, GoalStatus, KeyResult

pytestmark = pytest.mark.django_db


def goal_payload(**overrides):
    data = {
        "title": "Ship the reporting module",
        "description": "Deliver reporting to the client by the end of the quarter.",
        "start_date": "2026-04-01",
        "end_date": "2026-06-30",
        "key_results": [
            {"title": "Reports delivered", "target_value": 10, "unit": "reports"},
            {"title": "Bugs fixed", "target_value": 4, "current_value": 2},
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_goal(member):
    def _make(status=GoalStatus.ACTIVE, owner=None, key_results=((2, 4),)):
        goal = Goal.objects.create(
            user=owner or member,
            title="Goal",
            description="Description",
            start_date="2026-01-01",
            end_date="2026-03-31",
            status=status,
        )
        for current, target in key_results:
            KeyResult.objects.create(goal=goal, title="KR", current_value=current, target_value=target)
        return goal

    return _make


class TestCreate:
    def test_creates_draft_with_key_results(self, client_for, member):
        res = client_for(member).post_json("/api/goals/", goal_payload())
        assert res.status_code == 201
        body = res.json()
        assert body["status"] == GoalStatus.DRAFT
        assert body["user_id"] == member.pk
        assert len(body["key_results"]) == 2
        # (0/10 + 2/4) / 2 = 25
        assert body["progress"] == 25
        assert body["permissions"]["can_edit"] is True

    def test_rejects_active_as_initial_status(self, client_for, member):
        res = client_for(member).post_json("/api/goals/", goal_payload(status=GoalStatus.ACTIVE))
        assert res.status_code == 400
        assert not Goal.objects.exists()

    def test_end_before_start_is_invalid(self, client_for, member):
        res = client_for(member).post_json("/api/goals/", goal_payload(end_date="2026-03-01"))
        assert res.status_code == 400
        assert "end_date" in res.json()["fields"]

    def test_key_result_target_must_be_positive(self, client_for, member):
        res = client_for(member).post_json(
            "/api/goals/", goal_payload(key_results=[{"title": "Zero", "target_value": 0}])
        )
        assert res.status_code == 400
        assert not Goal.objects.exists()


class TestList:
    def test_lists_own_goals(self, client_for, member, make_goal, manager):
        mine = make_goal()
        make_goal(owner=manager)
        res = client_for(member).get("/api/goals/")
        assert [g["id"] for g in res.json()] == [mine.pk]

    def test_other_users_goals_need_manager(self, client_for, member, leader, manager, make_goal):
        make_goal()
        assert client_for(leader).get("/api/goals/", {"user_id": member.pk}).status_code == 403
        res = client_for(manager).get("/api/goals/", {"user_id": member.pk})
        assert res.status_code == 200
        assert len(res.json()) == 1


class TestDetail:
    def test_owner_submits_draft(self, client_for, member, make_goal):
        goal = make_goal(status=GoalStatus.DRAFT)
        res = client_for(member).put_json(f"/api/goals/{goal.pk}/", {"status": GoalStatus.PENDING_APPROVAL})
        assert res.status_code == 200
        assert res.json()["status"] == GoalStatus.PENDING_APPROVAL

    def test_owner_cannot_self_activate(self, client_for, member, make_goal):
        goal = make_goal(status=GoalStatus.DRAFT)
        res = client_for(member).put_json(f"/api/goals/{goal.pk}/", {"status": GoalStatus.ACTIVE})
        assert res.status_code == 400

    def test_key_results_are_replaced(self, client_for, member, make_goal):
        goal = make_goal(status=GoalStatus.DRAFT, key_results=((1, 2), (3, 4)))
        res = client_for(member).put_json(
            f"/api/goals/{goal.pk}/", {"key_results": [{"title": "Only one", "target_value": 5}]}
        )
        assert res.status_code == 200
        assert [kr["title"] for kr in res.json()["key_results"]] == ["Only one"]
        assert goal.key_results.count() == 1

    def test_manager_views_but_cannot_edit(self, client_for, manager, make_goal):
        goal = make_goal()
        client = client_for(manager)
        assert client.get(f"/api/goals/{goal.pk}/").status_code == 200
        assert client.put_json(f"/api/goals/{goal.pk}/", {"title": "Mine now"}).status_code == 403
        assert client.delete(f"/api/goals/{goal.pk}/").status_code == 403

    def test_general_cannot_view_others_goal(self, client_for, make_user, make_goal):
        goal = make_goal()
        assert client_for(make_user()).get(f"/api/goals/{goal.pk}/").status_code == 403

    def test_owner_deletes(self, client_for, member, make_goal):
        goal = make_goal()
        assert client_for(member).delete(f"/api/goals/{goal.pk}/").status_code == 200
        assert not Goal.objects.filter(pk=goal.pk).exists()


class TestApprove:
    def test_manager_approves_pending_goal(self, client_for, manager, make_goal):
        goal = make_goal(status=GoalStatus.PENDING_APPROVAL)
        res = client_for(manager).patch_json(f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.ACTIVE})
        assert res.status_code == 200
        assert res.json()["goal"]["status"] == GoalStatus.ACTIVE

    def test_manager_rejects_with_comment(self, client_for, manager, make_goal):
        goal = make_goal(status=GoalStatus.PENDING_APPROVAL)
        res = client_for(manager).patch_json(
            f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.REJECTED, "comment": "Too vague"}
        )
        assert res.status_code == 200
        goal.refresh_from_db()
        assert goal.status == GoalStatus.REJECTED

    def test_invalid_decision_is_bad_request(self, client_for, manager, make_goal):
        goal = make_goal(status=GoalStatus.PENDING_APPROVAL)
        res = client_for(manager).patch_json(f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.COMPLETED})
        assert res.status_code == 400

    def test_goal_must_be_pending(self, client_for, manager, make_goal):
        goal = make_goal(status=GoalStatus.DRAFT)
        res = client_for(manager).patch_json(f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.ACTIVE})
        assert res.status_code == 400

    def test_leader_cannot_approve(self, client_for, leader, make_goal):
        goal = make_goal(status=GoalStatus.PENDING_APPROVAL)
        res = client_for(leader).patch_json(f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.ACTIVE})
        assert res.status_code == 403

    def test_manager_cannot_approve_own_goal(self, client_for, manager, make_goal):
        goal = make_goal(status=GoalStatus.PENDING_APPROVAL, owner=manager)
        res = client_for(manager).patch_json(f"/api/goals/{goal.pk}/approve/", {"status": GoalStatus.ACTIVE})
        assert res.status_code == 403


class TestProgress:
    def test_owner_updates_active_goal(self, client_for, member, make_goal):
        goal = make_goal(key_results=((0, 10),))
        kr = goal.key_results.get()
        res = client_for(member).patch_json(
            f"/api/goals/{goal.pk}/progress/", {"key_results": [{"id": kr.pk, "current_value": 5}]}
        )
        assert res.status_code == 200
        assert res.json()["goal"]["progress"] == 50
        kr.refresh_from_db()
        assert kr.current_value == 5

    def test_only_active_goals(self, client_for, member, make_goal):
        goal = make_goal(status=GoalStatus.DRAFT)
        kr = goal.key_results.get()
        res = client_for(member).patch_json(
            f"/api/goals/{goal.pk}/progress/", {"key_results": [{"id": kr.pk, "current_value": 1}]}
        )
        assert res.status_code == 400

    def test_foreign_key_result_is_rejected(self, client_for, member, make_goal):
        goal = make_goal()
        other = make_goal()
        foreign = other.key_results.get()
        res = client_for(member).patch_json(
            f"/api/goals/{goal.pk}/progress/", {"key_results": [{"id": foreign.pk, "current_value": 1}]}
        )
        assert res.status_code == 400

    def test_non_owner_is_forbidden(self, client_for, manager, make_goal):
        goal = make_goal()
        kr = goal.key_results.get()
        res = client_for(manager).patch_json(
            f"/api/goals/{goal.pk}/progress/", {"key_results": [{"id": kr.pk, "current_value": 1}]}
        )
        assert res.status_code == 403

    def test_key_results_must_be_a_list(self, client_for, member, make_goal):
        goal = make_goal()
        res = client_for(member).patch_json(f"/api/goals/{goal.pk}/progress/", {"key_results": "all"})
        assert res.status_code == 400


def test_examples_endpoint(client_for, member):
    res = client_for(member).get("/api/goals/examples/")
    assert res.status_code == 200
    assert len(res.json()["goals"]) == 2
    assert res.json()["units"]
