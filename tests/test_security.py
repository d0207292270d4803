"""Password hashing, access tokens and the role ordering."""
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from traininghub.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from traininghub.models.user import UserRole, has_at_least


class TestPasswordHashing:

    def test_hash_verifies(self):
        hashed = get_password_hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert verify_password("s3cret-pass", hashed)

    def test_wrong_password_rejected(self):
        hashed = get_password_hash("s3cret-pass")
        assert not verify_password("other-pass", hashed)

    def test_hashes_are_salted(self):
        assert get_password_hash("same") != get_password_hash("same")

    def test_malformed_hash_is_rejected(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False

    def test_long_password_is_truncated_consistently(self):
        password = "x" * 100
        hashed = get_password_hash(password)
        assert verify_password(password, hashed)


class TestAccessTokens:

    def test_round_trip(self):
        token = create_access_token({"sub": "42", "role": "MANAGER"})
        payload = decode_access_token(token)
        assert payload["sub"] == "42"
        assert payload["role"] == "MANAGER"
        assert payload["type"] == "access"
        assert "exp" in payload

    def test_expired_token_rejected(self):
        token = create_access_token({"sub": "1", "role": "EMPLOYEE"}, expires_delta=timedelta(minutes=-1))
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401

    def test_foreign_signature_rejected(self, settings):
        token = jwt.encode({"sub": "1", "role": "ADMIN", "type": "access"}, "another-key",
                           algorithm=settings.ALGORITHM)
        with pytest.raises(HTTPException) as exc_info:
            decode_access_token(token)
        assert exc_info.value.status_code == 401

    def test_wrong_token_type_rejected(self, settings):
        token = jwt.encode({"sub": "1", "role": "ADMIN", "type": "refresh"}, settings.SECRET_KEY,
                           algorithm=settings.ALGORITHM)
        with pytest.raises(HTTPException):
            decode_access_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(HTTPException):
            decode_access_token("not.a.jwt")


class TestRoleOrdering:

    @pytest.mark.parametrize("role,required,expected", [
        (UserRole.EMPLOYEE, UserRole.EMPLOYEE, True),
        (UserRole.EMPLOYEE, UserRole.MANAGER, False),
        (UserRole.EMPLOYEE, UserRole.ADMIN, False),
        (UserRole.MANAGER, UserRole.EMPLOYEE, True),
        (UserRole.MANAGER, UserRole.MANAGER, True),
        (UserRole.MANAGER, UserRole.ADMIN, False),
        (UserRole.ADMIN, UserRole.EMPLOYEE, True),
        (UserRole.ADMIN, UserRole.MANAGER, True),
        (UserRole.ADMIN, UserRole.ADMIN, True),
    ])
    def test_has_at_least(self, role, required, expected):
        assert has_at_least(role, required) is expected

    def test_accepts_plain_strings(self):
        assert has_at_least("ADMIN", "MANAGER")
