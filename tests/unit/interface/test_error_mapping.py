"""Unit tests for domain error to HTTP mapping."""

import pytest

from devnovate.domain.error import (
    ConflictError,
    ForbiddenError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from devnovate.interface.api.auth import extract_token
from devnovate.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (NotFoundError("Blog", "x"), 404),
            (ForbiddenError("approve", "blog", "x", "u"), 403),
            (InvalidTransitionError("draft", "approve"), 409),
            (ConflictError("retry"), 409),
            (ValidationError("Comment content is required"), 400),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error).status_code == status_code

    def test_conflict_is_retryable(self):
        http_exc = to_http_exception(ConflictError("retry"))

        assert http_exc.headers == {"Retry-After": "1"}


class TestExtractToken:
    """Tests for extract_token."""

    def test_cookie_preferred(self):
        assert extract_token("cookie-token", "Bearer header-token") == "cookie-token"

    def test_bearer_header(self):
        assert extract_token(None, "Bearer header-token") == "header-token"

    def test_missing(self):
        assert extract_token(None, None) is None
        assert extract_token(None, "Basic abc") is None
