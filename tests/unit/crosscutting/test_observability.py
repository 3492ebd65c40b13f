"""
Unit tests for structured logging, request context and pagination helpers.

Tests:
  - JSONFormatter emits one JSON object with request context
  - Sensitive keys are redacted (password, refreshToken, authorization)
  - paginate(): totalPages = ceil(total / limit), camelCase serialization
"""

import json
import logging

import pytest

from finance_api.context import clear_context, get_context_dict, set_request_context
from finance_api.crosscutting.logger import JSONFormatter
from finance_api.crosscutting.pagination import offset_for, paginate

pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="finance-api",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="login attempt",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_includes_request_context(self):
        set_request_context(request_id="req-1", method="GET", path="/api/user")
        try:
            payload = json.loads(JSONFormatter().format(_record()))
        finally:
            clear_context()

        assert payload["message"] == "login attempt"
        assert payload["level"] == "INFO"
        assert payload["request_id"] == "req-1"
        assert payload["path"] == "/api/user"

    def test_redacts_sensitive_keys(self):
        payload = json.loads(
            JSONFormatter().format(
                _record(
                    password="Senha@123",
                    body={"refreshToken": "abc", "email": "a@b.com"},
                    authorization="Bearer xyz",
                )
            )
        )

        assert payload["password"] == "***REDACTADO***"
        assert payload["authorization"] == "***REDACTADO***"
        assert payload["body"]["refreshToken"] == "***REDACTADO***"
        assert payload["body"]["email"] == "a@b.com"

    def test_context_is_cleared(self):
        set_request_context(request_id="req-2", method="POST", path="/api/login")
        clear_context()
        assert get_context_dict() == {}


class TestPagination:
    @pytest.mark.parametrize(
        "total, limit, expected_pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5)],
    )
    def test_total_pages(self, total, limit, expected_pages):
        page = paginate([], page=1, limit=limit, total=total)
        assert page.pagination.total_pages == expected_pages

    def test_serializes_camel_case(self):
        page = paginate(["a"], page=2, limit=1, total=3)
        assert page.model_dump(by_alias=True) == {
            "data": ["a"],
            "pagination": {"page": 2, "limit": 1, "total": 3, "totalPages": 3},
        }

    def test_offset(self):
        assert offset_for(1, 10) == 0
        assert offset_for(3, 10) == 20
