"""Pulse - async client for the Pulse bot-classification API."""

import logging
from typing import Any, Optional

import httpx

from pulse.errors import ERROR_CODES, PulseError, UnknownError
from pulse.types import (
    ClassifyPayload,
    ClassifyResponse,
    IsBotResponse,
    ResponseDecodeError,
    parse_classify_response,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.pulsesecurity.org"


class Pulse:
    """
    Client that asks the Pulse service whether a challenge token came from a bot.

    Each call to ``classify`` makes exactly one POST to ``/api/classify``.
    Nothing is retried or cached, and the client holds no per-call state,
    so one instance can serve concurrent calls.

    Example:
        >>> async with Pulse("site-key", "secret-key") as pulse:
        ...     if await pulse.classify(token):
        ...         reject_request()
    """

    def __init__(
        self,
        site_key: str,
        secret_key: str,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the Pulse client.

        Args:
            site_key: Site key identifying the integration
            secret_key: Secret key for the integration
            base_url: Base URL for the Pulse API (default: https://api.pulsesecurity.org)
            timeout: Request timeout in seconds for the owned HTTP client (default: 30)
            http_client: Optional shared httpx.AsyncClient; it is not closed by close()
        """
        self._site_key = site_key
        self._secret_key = secret_key
        self._base_url = base_url.rstrip("/")

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def with_url(cls, site_key: str, secret_key: str, base_url: str) -> "Pulse":
        """Create a client pointed at a non-default API URL (testing, self-hosting)."""
        return cls(site_key, secret_key, base_url)

    @property
    def site_key(self) -> str:
        return self._site_key

    @property
    def secret_key(self) -> str:
        return self._secret_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"Pulse(site_key={self._site_key!r}, base_url={self._base_url!r})"

    async def classify(self, token: str) -> bool:
        """
        Classify a challenge token.

        Args:
            token: Opaque token produced by the Pulse widget

        Returns:
            True if the token's originator is a bot, False otherwise

        Raises:
            TokenNotFoundError: The service does not recognize the token
            TokenUsedError: The token was already consumed
            TokenExpiredError: The token is too old; get a fresh one
            UnknownError: Transport failure, undecodable body, or unknown error code
        """
        payload = ClassifyPayload(
            token=token,
            site_key=self._site_key,
            secret_key=self._secret_key,
        )
        url = f"{self._base_url}/api/classify"
        logger.debug("POST %s (site_key=%s)", url, self._site_key)

        try:
            response = await self._client.post(url, json=payload.to_dict())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL is not an HTTPError; a bad base_url surfaces here
            raise UnknownError(f"Request failed: {e}") from e

        try:
            result = parse_classify_response(response.json())
        except (ValueError, ResponseDecodeError, RecursionError) as e:
            # ValueError covers json.JSONDecodeError and undecodable bytes,
            # RecursionError pathologically nested bodies
            raise UnknownError(f"Failed to get response data: {e}") from e

        return _interpret(result)

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "Pulse":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def _interpret(result: ClassifyResponse) -> bool:
    if isinstance(result, IsBotResponse):
        logger.debug("Token classified (is_bot=%s)", result.is_bot)
        return result.is_bot

    if not result.errors:
        raise UnknownError("Unknown error (no error returned)")

    # Only the first entry is authoritative
    entry = result.errors[0]
    error_cls = ERROR_CODES.get(entry.code)
    if error_cls is None:
        raise UnknownError(f"Unknown error code: {entry.code}")

    error: PulseError = error_cls(entry)
    logger.debug("Classification rejected (code=%s)", entry.code)
    raise error
