"""
Unit tests for the session use cases (login / refresh).

Tests:
  - Valid credentials -> access + refresh tokens carrying the user id
  - Wrong password and unknown email produce the SAME error
  - Refresh: valid -> new access token, same refresh string
  - Refresh: expired / malformed / access-token-as-refresh -> INVALID_TOKEN
"""

from datetime import timedelta
from unittest.mock import Mock
from uuid import uuid4

import pytest

from finance_api.application.usecases import LoginUseCase, RefreshTokenUseCase
from finance_api.domain.errors import ErrorKind
from finance_api.domain.services import TokenPayload, TokenService
from finance_api.identity.tokens import JWTTokenService

pytestmark = pytest.mark.unit

VALID_PASSWORD = "Senha@123"


class TestLogin:
    async def test_valid_credentials(self, container, sample_user):
        await container.users.create(sample_user)

        result = await container.login.run(
            {"email": sample_user.email, "password": VALID_PASSWORD}
        )

        assert result.is_right()
        tokens = result.value
        access = container.token_service.verify_access_token(tokens.access_token)
        refresh = container.token_service.verify_refresh_token(tokens.refresh_token)
        assert access.user_id == sample_user.id
        assert refresh.user_id == sample_user.id

    async def test_wrong_password_equals_unknown_email(
        self, container, sample_user, fake_hasher
    ):
        await container.users.create(sample_user)
        use_case = LoginUseCase(container.users, fake_hasher, container.token_service)

        wrong_password = await use_case.run(
            {"email": sample_user.email, "password": "Outra@999"}
        )
        unknown_email = await use_case.run(
            {"email": "ninguem@example.com", "password": VALID_PASSWORD}
        )

        assert wrong_password.is_wrong() and unknown_email.is_wrong()
        assert wrong_password.value == unknown_email.value
        assert wrong_password.value.kind == ErrorKind.AUTH_FAILED
        assert wrong_password.value.slug == "EmailOrPasswordWrongError"

    async def test_missing_fields(self, container):
        result = await container.login.run({})
        assert result.value.kind == ErrorKind.VALIDATION
        assert set(result.value.errors) == {"email", "password"}


class TestRefreshToken:
    async def test_valid_refresh_returns_same_refresh_string(self, container, sample_user):
        refresh = container.token_service.issue_refresh_token(sample_user.id)

        result = await container.refresh_token.run({"refreshToken": refresh})

        assert result.is_right()
        assert result.value.refresh_token == refresh
        payload = container.token_service.verify_access_token(result.value.access_token)
        assert payload.user_id == sample_user.id

    async def test_expired_refresh(self, settings, sample_user):
        expired_issuer = JWTTokenService(
            settings.jwt_secret, refresh_ttl=timedelta(seconds=-10)
        )
        token = expired_issuer.issue_refresh_token(sample_user.id)

        result = await RefreshTokenUseCase(
            JWTTokenService.from_settings(settings)
        ).run({"refreshToken": token})

        assert result.value.kind == ErrorKind.INVALID_TOKEN

    @pytest.mark.parametrize("token", ["garbage", "a.b.c"])
    async def test_malformed_refresh(self, container, token):
        result = await container.refresh_token.run({"refreshToken": token})
        assert result.value.kind == ErrorKind.INVALID_TOKEN
        assert result.value.slug == "InvalidRefreshTokenError"

    async def test_access_token_is_not_a_refresh_token(self, container, sample_user):
        access = container.token_service.issue_access_token(sample_user.id)
        result = await container.refresh_token.run({"refreshToken": access})
        assert result.value.kind == ErrorKind.INVALID_TOKEN

    async def test_empty_refresh_is_validation_error(self, container):
        result = await container.refresh_token.run({"refreshToken": ""})
        assert result.value.kind == ErrorKind.VALIDATION

    async def test_refresh_string_is_echoed_byte_for_byte(self):
        tokens = Mock(spec=TokenService)
        tokens.verify_refresh_token.return_value = TokenPayload(user_id=uuid4())
        tokens.issue_access_token.return_value = "new-access"
        raw = "  opaque.refresh.token \n"

        result = await RefreshTokenUseCase(tokens).run({"refreshToken": raw})

        assert result.is_right()
        assert result.value.refresh_token == raw
        tokens.verify_refresh_token.assert_called_once_with(raw)
