"""Type definitions for the Pulse SDK."""

from dataclasses import dataclass, field
from typing import Any, Union


class ResponseDecodeError(ValueError):
    """Raised when a classify response body matches neither known shape."""


@dataclass(frozen=True)
class ErrorData:
    """A single entry of an error response."""

    code: str  # machine-readable, e.g. TOKEN_USED
    error: str  # human-readable message


@dataclass(frozen=True)
class ClassifyPayload:
    """Request body for the /api/classify endpoint."""

    token: str = field(repr=False)
    site_key: str
    secret_key: str = field(repr=False)

    def to_dict(self) -> dict[str, str]:
        return {
            "token": self.token,
            "siteKey": self.site_key,
            "secretKey": self.secret_key,
        }


@dataclass(frozen=True)
class IsBotResponse:
    """Successful classification: {"isBot": bool}."""

    is_bot: bool


@dataclass(frozen=True)
class ErrorsResponse:
    """Failed classification: {"errors": [...]}."""

    errors: tuple[ErrorData, ...] = ()


ClassifyResponse = Union[IsBotResponse, ErrorsResponse]


def _parse_error_entry(entry: Any) -> ErrorData:
    if not isinstance(entry, dict):
        raise ResponseDecodeError(f"error entry must be an object, got {type(entry).__name__}")

    code = entry.get("code")
    message = entry.get("error")
    if not isinstance(code, str) or not isinstance(message, str):
        raise ResponseDecodeError("error entry requires string 'code' and 'error' fields")

    return ErrorData(code=code, error=message)


def parse_classify_response(data: Any) -> ClassifyResponse:
    """
    Decode a classify response body into one of its two shapes.

    The body is discriminated by which field is present, not by a tag:
    ``isBot`` selects IsBotResponse, ``errors`` selects ErrorsResponse.
    A body carrying both fields is rejected as ambiguous rather than
    guessing which one the service meant.

    Args:
        data: Decoded JSON body

    Returns:
        IsBotResponse or ErrorsResponse

    Raises:
        ResponseDecodeError: If the body matches neither shape
    """
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"expected a JSON object, got {type(data).__name__}")

    has_is_bot = "isBot" in data
    has_errors = "errors" in data

    if has_is_bot and has_errors:
        raise ResponseDecodeError("ambiguous response: both 'isBot' and 'errors' present")

    if has_is_bot:
        is_bot = data["isBot"]
        # bool only; json ints 0/1 are not accepted
        if not isinstance(is_bot, bool):
            raise ResponseDecodeError(f"'isBot' must be a boolean, got {type(is_bot).__name__}")
        return IsBotResponse(is_bot=is_bot)

    if has_errors:
        errors = data["errors"]
        if not isinstance(errors, list):
            raise ResponseDecodeError(f"'errors' must be a list, got {type(errors).__name__}")
        return ErrorsResponse(errors=tuple(_parse_error_entry(e) for e in errors))

    raise ResponseDecodeError("response has neither 'isBot' nor 'errors'")
