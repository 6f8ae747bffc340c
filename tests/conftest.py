import json
from datetime import timedelta

import pytest
from django.test import Client
from django.utils import timezone

from base.models import User
from base.roles import Role
from hr.models import Department
from meetings.models import OneOnOne


@pytest.fixture
def department(db):
    return Department.objects.create(name="Solutions")


@pytest.fixture
def other_department(db):
    return Department.objects.create(name="Infrastructure")


@pytest.fixture
def make_user(db, department):
    counter = {"n": 0}

    def _make(role=Role.GENERAL, name=None, dept=department, **extra):
        counter["n"] += 1
        n = counter["n"]
        return User.objects.create_user(
            email=extra.pop("email", f"{role.lower()}{n}@ses.example"),
            password="password123",
            name=name or f"{role.title()} {n}",
            role=role,
            department=dept,
            **extra,
        )

    return _make


@pytest.fixture
def member(make_user):
    return make_user(Role.GENERAL, name="Gen Member")


@pytest.fixture
def leader(make_user):
    return make_user(Role.LEADER, name="Ren Leader")


@pytest.fixture
def manager(make_user):
    return make_user(Role.MANAGER, name="Mika Manager")


@pytest.fixture
def director(make_user):
    return make_user(Role.DIRECTOR, name="Daichi Director")


@pytest.fixture
def executive(make_user):
    return make_user(Role.EXECUTIVE, name="Emi Executive")


class JsonClient(Client):
    """Test client that sends JSON bodies and decodes JSON responses."""

    def _send(self, method, path, data=None, **kwargs):
        body = json.dumps(data) if data is not None else ""
        return getattr(super(), method)(path, data=body, content_type="application/json", **kwargs)

    def post_json(self, path, data=None, **kwargs):
        return self._send("post", path, data, **kwargs)

    def put_json(self, path, data=None, **kwargs):
        return self._send("put", path, data, **kwargs)

    def patch_json(self, path, data=None, **kwargs):
        return self._send("patch", path, data, **kwargs)


@pytest.fixture
def client_for(db):
    def _client(user=None):
        client = JsonClient()
        if user is not None:
            client.force_login(user)
        return client

    return _client


@pytest.fixture
def one_on_one(leader, member):
    """SCHEDULED meeting two days from now."""
    return OneOnOne.objects.create(
        supervisor=leader,
        member=member,
        scheduled_at=timezone.now() + timedelta(days=2),
    )
