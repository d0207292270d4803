"""Login rate limiting."""
import pytest
from fastapi.testclient import TestClient

from traininghub.core.limiter import configure_limiter, limiter
from traininghub.main import create_app
from tests.conftest import TEST_PASSWORD


@pytest.fixture
def limited_client(settings, database):
    limited = settings.model_copy(update={"RATE_LIMIT_ENABLED": True, "LOGIN_RATE_LIMIT": "2/minute"})
    limiter.reset()
    try:
        with TestClient(create_app(settings=limited, database=database)) as test_client:
            yield test_client
    finally:
        limiter.reset()
        configure_limiter(settings)


def test_login_limit_returns_429(limited_client, make_user):
    make_user(email="limited@traininghub.com")
    body = {"email": "limited@traininghub.com", "password": TEST_PASSWORD}

    for _ in range(2):
        assert limited_client.post("/auth/login", json=body).status_code == 200

    response = limited_client.post("/auth/login", json=body, headers={"X-Request-Id": "rl-1"})
    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests", "code": "rate_limited", "request_id": "rl-1"}


def test_failed_logins_count_toward_the_limit(limited_client):
    body = {"email": "nobody@traininghub.com", "password": "wrong-password"}

    assert [limited_client.post("/auth/login", json=body).status_code for _ in range(3)] == [401, 401, 429]


def test_other_routes_are_not_limited(limited_client):
    assert all(limited_client.get("/health").status_code == 200 for _ in range(5))


def test_disabled_limiter_lets_logins_through(client, make_user):
    make_user(email="unlimited@traininghub.com")
    body = {"email": "unlimited@traininghub.com", "password": TEST_PASSWORD}

    assert all(client.post("/auth/login", json=body).status_code == 200 for _ in range(7))
