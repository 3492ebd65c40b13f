"""
Unit tests for identity/tokens.py (PyJWT HS256).
"""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from finance_api.identity.tokens import JWT_ALGORITHM, JWTTokenService

pytestmark = pytest.mark.unit

SECRET = "unit-test-secret-unit-test-secret"


@pytest.fixture
def service() -> JWTTokenService:
    return JWTTokenService(SECRET)


class TestJWTTokenService:
    def test_payload_shape(self, service):
        user_id = uuid4()
        token = service.issue_access_token(user_id)

        claims = jwt.decode(token, SECRET, algorithms=[JWT_ALGORITHM])

        assert claims["user"] == {"id": str(user_id), "admin": False}
        assert claims["typ"] == "access"
        assert claims["exp"] - claims["iat"] == 15 * 60
        assert "jti" in claims

    def test_refresh_ttl_is_seven_days(self, service):
        token = service.issue_refresh_token(uuid4())
        claims = jwt.decode(token, SECRET, algorithms=[JWT_ALGORITHM])
        assert claims["typ"] == "refresh"
        assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60

    def test_tokens_are_unique(self, service):
        user_id = uuid4()
        assert service.issue_access_token(user_id) != service.issue_access_token(user_id)

    def test_types_are_not_interchangeable(self, service):
        user_id = uuid4()
        access = service.issue_access_token(user_id)
        refresh = service.issue_refresh_token(user_id)

        assert service.verify_access_token(access).user_id == user_id
        assert service.verify_refresh_token(refresh).user_id == user_id
        assert service.verify_access_token(refresh) is None
        assert service.verify_refresh_token(access) is None

    def test_wrong_secret(self, service):
        other = JWTTokenService("another-secret-another-secret-xx")
        assert service.verify_access_token(other.issue_access_token(uuid4())) is None

    def test_expired(self):
        service = JWTTokenService(SECRET, access_ttl=timedelta(seconds=-1))
        assert service.verify_access_token(service.issue_access_token(uuid4())) is None

    def test_missing_user_id(self):
        token = jwt.encode(
            {"user": {"admin": False}, "typ": "access", "exp": 9_999_999_999},
            SECRET,
            algorithm=JWT_ALGORITHM,
        )
        assert JWTTokenService(SECRET).verify_access_token(token) is None

    @pytest.mark.parametrize("token", ["", "not-a-jwt"])
    def test_garbage(self, service, token):
        assert service.verify_access_token(token) is None
