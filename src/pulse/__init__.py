"""Pulse Python SDK - server-side bot classification for Pulse challenge tokens."""

import logging

__version__ = "0.1.0"

from pulse.client import DEFAULT_API_URL, Pulse
from pulse.errors import (
    PulseError,
    TokenError,
    TokenExpiredError,
    TokenNotFoundError,
    TokenUsedError,
    UnknownError,
)
from pulse.types import (
    ClassifyPayload,
    ErrorData,
    ErrorsResponse,
    IsBotResponse,
    ResponseDecodeError,
    parse_classify_response,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Pulse",
    "DEFAULT_API_URL",
    "PulseError",
    "TokenError",
    "TokenNotFoundError",
    "TokenUsedError",
    "TokenExpiredError",
    "UnknownError",
    "ClassifyPayload",
    "ErrorData",
    "IsBotResponse",
    "ErrorsResponse",
    "ResponseDecodeError",
    "parse_classify_response",
    "__version__",
]
