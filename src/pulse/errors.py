"""Exceptions raised by the Pulse client."""

from typing import Any

from pulse.types import ErrorData


class PulseError(Exception):
    """Base exception for all Pulse classification failures."""

    def _payload(self) -> Any:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class TokenError(PulseError):
    """An error reported by the service for a specific token."""

    prefix = "Token error"

    def __init__(self, data: ErrorData):
        self.data = data
        super().__init__(data)

    @property
    def code(self) -> str:
        return self.data.code

    @property
    def error(self) -> str:
        return self.data.error

    def _payload(self) -> Any:
        return self.data

    def __str__(self) -> str:
        return f"{self.prefix}: {self.data.error}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class TokenNotFoundError(TokenError):
    """The token is not recognized by the service."""

    prefix = "Token not found"


class TokenUsedError(TokenError):
    """The token was already consumed."""

    prefix = "Token used"


class TokenExpiredError(TokenError):
    """The token's validity window elapsed; a fresh token is needed."""

    prefix = "Token expired"


class UnknownError(PulseError):
    """Transport failure, undecodable response, or unrecognized error code."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def _payload(self) -> Any:
        return self.message


ERROR_CODES: dict[str, type[TokenError]] = {
    "TOKEN_NOT_FOUND": TokenNotFoundError,
    "TOKEN_USED": TokenUsedError,
    "TOKEN_EXPIRED": TokenExpiredError,
}
