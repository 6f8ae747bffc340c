import pytest

from base.roles import Role

pytestmark = pytest.mark.django_db


def test_list_includes_member_count(client_for, department, other_department, member, leader):
    res = client_for(member).get("/api/departments/")
    assert res.status_code == 200
    counts = {d["name"]: d["member_count"] for d in res.json()}
    assert counts == {"Infrastructure": 0, "Solutions": 2}


def test_manager_creates_department(client_for, manager):
    res = client_for(manager).post_json("/api/departments/", {"name": "  Data  "})
    assert res.status_code == 201
    assert res.json()["name"] == "Data"
    assert res.json()["member_count"] == 0


def test_leader_cannot_create_department(client_for, make_user):
    leader = make_user(Role.LEADER)
    res = client_for(leader).post_json("/api/departments/", {"name": "Data"})
    assert res.status_code == 403


def test_name_is_required(client_for, manager):
    res = client_for(manager).post_json("/api/departments/", {"name": "   "})
    assert res.status_code == 400
