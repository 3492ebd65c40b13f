from __future__ import annotations

from ...schemas import Email, InputSchema, OutputSchema, Password, VerbatimRequiredStr


class LoginInput(InputSchema):
    email: Email
    password: Password


class RefreshTokenInput(InputSchema):
    refresh_token: VerbatimRequiredStr


class TokensOutput(OutputSchema):
    access_token: str
    refresh_token: str
