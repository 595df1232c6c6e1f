"""Tests for the Pulse error taxonomy."""

from pulse.errors import (
    ERROR_CODES,
    PulseError,
    TokenError,
    TokenExpiredError,
    TokenNotFoundError,
    TokenUsedError,
    UnknownError,
)
from pulse.types import ErrorData


def test_error_messages():
    data = ErrorData(code="TOKEN_USED", error="Test error message")

    assert str(TokenNotFoundError(data)) == "Token not found: Test error message"
    assert str(TokenUsedError(data)) == "Token used: Test error message"
    assert str(TokenExpiredError(data)) == "Token expired: Test error message"
    assert str(UnknownError("Request failed: boom")) == "Request failed: boom"


def test_token_error_exposes_entry():
    data = ErrorData(code="TOKEN_EXPIRED", error="too old")
    err = TokenExpiredError(data)

    assert err.data is data
    assert err.code == "TOKEN_EXPIRED"
    assert err.error == "too old"
    assert isinstance(err, TokenError)
    assert isinstance(err, PulseError)


def test_equality_compares_kind_and_payload():
    data = ErrorData(code="TOKEN_USED", error="used")

    assert TokenUsedError(data) == TokenUsedError(ErrorData("TOKEN_USED", "used"))
    assert TokenUsedError(data) != TokenExpiredError(data)
    assert TokenUsedError(data) != TokenUsedError(ErrorData("TOKEN_USED", "other"))
    assert UnknownError("a") == UnknownError("a")
    assert UnknownError("a") != UnknownError("b")
    assert hash(UnknownError("a")) == hash(UnknownError("a"))


def test_error_codes_table():
    assert ERROR_CODES == {
        "TOKEN_NOT_FOUND": TokenNotFoundError,
        "TOKEN_USED": TokenUsedError,
        "TOKEN_EXPIRED": TokenExpiredError,
    }


def test_unknown_error_is_not_token_error():
    assert not isinstance(UnknownError("x"), TokenError)
