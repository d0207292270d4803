"""Registration, login and the bearer-token gate."""
from datetime import timedelta

import pytest

from traininghub.core.security import create_access_token
from tests.conftest import TEST_PASSWORD, application_payload, survey_payload

PROTECTED_ROUTES = [
    ("get", "/auth/me", None),
    ("get", "/users", None),
    ("get", "/users/profile", None),
    ("put", "/users/profile", {"first_name": "Eve"}),
    ("get", "/surveys", None),
    ("post", "/surveys", survey_payload()),
    ("get", "/surveys/1", None),
    ("put", "/surveys/1/status", {"status": "ACTIVE"}),
    ("post", "/surveys/1/responses", {"answers": []}),
    ("get", "/surveys/1/responses", None),
    ("get", "/training/applications", None),
    ("post", "/training/applications", application_payload()),
    ("get", "/training/applications/1", None),
    ("put", "/training/applications/1/status", {"status": "APPROVED"}),
    ("delete", "/training/applications/1", None),
    ("get", "/training/statistics", None),
    ("get", "/analytics/dashboard", None),
    ("get", "/analytics/training-needs", None),
]


def _call(client, method, path, body, headers=None):
    kwargs = {"headers": headers or {}}
    if body is not None:
        kwargs["json"] = body
    return client.request(method.upper(), path, **kwargs)


class TestRegister:

    def test_register_creates_employee(self, client):
        response = client.post("/auth/register", json={
            "email": "new.hire@traininghub.com",
            "password": "longenough",
            "first_name": "New",
            "last_name": "Hire",
            "department": "Finance",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["role"] == "EMPLOYEE"
        assert data["user"]["department"] == "Finance"
        assert "hashed_password" not in data["user"]

    def test_role_in_payload_is_ignored(self, client):
        response = client.post("/auth/register", json={
            "email": "sneaky@traininghub.com",
            "password": "longenough",
            "first_name": "Sneaky",
            "last_name": "User",
            "role": "ADMIN",
        })
        assert response.status_code == 201
        assert response.json()["user"]["role"] == "EMPLOYEE"

    def test_duplicate_email_rejected(self, client, employee):
        response = client.post("/auth/register", json={
            "email": employee.email,
            "password": "longenough",
            "first_name": "Copy",
            "last_name": "Cat",
        })
        assert response.status_code == 400
        assert response.json()["code"] == "bad_request"

    def test_short_password_rejected(self, client):
        response = client.post("/auth/register", json={
            "email": "short@traininghub.com",
            "password": "short",
            "first_name": "Short",
            "last_name": "Pass",
        })
        assert response.status_code == 400
        assert response.json()["code"] == "validation_error"


class TestLogin:

    def test_login_returns_usable_token(self, client, make_user):
        user = make_user(email="login.user@traininghub.com")
        response = client.post("/auth/login", json={
            "email": "login.user@traininghub.com",
            "password": TEST_PASSWORD,
        })
        assert response.status_code == 200
        token = response.json()["access_token"]

        me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["id"] == user.id
        assert me.json()["email"] == "login.user@traininghub.com"

    def test_wrong_password(self, client, make_user):
        make_user(email="login.user@traininghub.com")
        response = client.post("/auth/login", json={
            "email": "login.user@traininghub.com",
            "password": "wrong-password",
        })
        assert response.status_code == 401
        assert response.json()["code"] == "authentication_failed"

    def test_unknown_email(self, client):
        response = client.post("/auth/login", json={
            "email": "nobody@traininghub.com",
            "password": "whatever",
        })
        assert response.status_code == 401


class TestTokenGate:

    @pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
    def test_missing_token(self, client, method, path, body):
        response = _call(client, method, path, body)
        assert response.status_code == 401
        data = response.json()
        assert data["code"] == "authentication_failed"
        assert data["request_id"]

    @pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
    def test_garbage_token(self, client, method, path, body):
        response = _call(client, method, path, body, {"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_expired_token(self, client, employee):
        token = create_access_token(
            {"sub": str(employee.id), "role": employee.role.value},
            expires_delta=timedelta(seconds=-5),
        )
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_without_role(self, client, employee):
        token = create_access_token({"sub": str(employee.id)})
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_with_unknown_role(self, client, employee):
        token = create_access_token({"sub": str(employee.id), "role": "SUPERUSER"})
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_rejected_create_leaves_no_rows(self, client, manager_headers):
        response = client.post("/training/applications", json=application_payload())
        assert response.status_code == 401

        listing = client.get("/training/applications", headers=manager_headers)
        assert listing.json() == []

    def test_me_for_deleted_account(self, client, employee, employee_headers, db_session):
        db_session.delete(employee)
        db_session.commit()

        response = client.get("/auth/me", headers=employee_headers)
        assert response.status_code == 404
