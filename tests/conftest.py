"""
TrainingHub - Test Configuration and Fixtures
"""
import os
from typing import Callable, Generator

import pytest
from faker import Faker
from fastapi.testclient import TestClient

# Set testing environment
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ENVIRONMENT"] = "test"

from traininghub.core.config import get_settings
from traininghub.core.database import Database
from traininghub.core.security import create_access_token, get_password_hash
from traininghub.main import create_app
from traininghub.models.user import User, UserRole

fake = Faker()

TEST_PASSWORD = "testpassword123"


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def database(settings) -> Generator[Database, None, None]:
    """Fresh in-memory database per test"""
    database = Database(settings.DATABASE_URL)
    database.create_all()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings=settings, database=database)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(database):
    """Session for arranging data and checking what the API wrote"""
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def make_user(db_session) -> Callable[..., User]:
    """Create a user with the given role (and optional profile fields)"""
    def _make_user(role: UserRole = UserRole.EMPLOYEE, **fields) -> User:
        values = {
            "email": f"{fake.unique.user_name()}@traininghub.com",
            "hashed_password": get_password_hash(TEST_PASSWORD),
            "first_name": fake.first_name(),
            "last_name": fake.last_name(),
            "role": role,
            "department": "Engineering",
            "position": fake.job()[:100],
            "location": fake.city(),
        }
        values.update(fields)
        user = User(**values)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


def headers_for(user: User) -> dict:
    """Bearer headers for a user"""
    token = create_access_token({"sub": str(user.id), "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def employee(make_user) -> User:
    return make_user(UserRole.EMPLOYEE)


@pytest.fixture
def other_employee(make_user) -> User:
    return make_user(UserRole.EMPLOYEE, department="Sales")


@pytest.fixture
def manager(make_user) -> User:
    return make_user(UserRole.MANAGER, department="Human Resources")


@pytest.fixture
def admin(make_user) -> User:
    return make_user(UserRole.ADMIN, department="Administration")


@pytest.fixture
def employee_headers(employee) -> dict:
    return headers_for(employee)


@pytest.fixture
def other_employee_headers(other_employee) -> dict:
    return headers_for(other_employee)


@pytest.fixture
def manager_headers(manager) -> dict:
    return headers_for(manager)


@pytest.fixture
def admin_headers(admin) -> dict:
    return headers_for(admin)


def survey_payload(**overrides) -> dict:
    """Minimal valid survey body"""
    payload = {
        "title": "Quarterly skills survey",
        "description": "Tell us what you want to learn next",
        "questions": [
            {"title": "Which skill matters most to you?", "type": "TEXT", "required": True},
        ],
    }
    payload.update(overrides)
    return payload


def application_payload(**overrides) -> dict:
    """Minimal valid training application body"""
    payload = {
        "application_type": "TRAINING_REQUEST",
        "title": "Advanced PostgreSQL",
        "description": "Three day course on query tuning",
        "category": "Technical",
        "priority": "HIGH",
        "justification": "We run Postgres in production",
        "expected_outcome": "Faster reporting queries",
        "preferred_dates": ["2026-11-02", "2026-11-16"],
        "duration": "3 days",
        "budget": "1500.00",
        "participants": 2,
        "location": "Online",
        "provider": "Acme Training",
    }
    payload.update(overrides)
    return payload
