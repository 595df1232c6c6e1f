"""FastAPI dependency for Pulse token classification."""

import logging
from dataclasses import dataclass
from typing import Optional

try:
    from fastapi import HTTPException, Request
except ImportError:
    raise ImportError(
        "FastAPI is not installed. Install it with: pip install 'pulse[fastapi]'"
    )

from .client import DEFAULT_API_URL, Pulse
from .errors import TokenError, UnknownError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_HEADER = "X-Pulse-Token"


@dataclass(frozen=True)
class PulseVerification:
    """Outcome handed to the route when a token passes classification."""

    token: str
    is_bot: bool


class PulseVerify:
    """
    FastAPI dependency that rejects requests whose Pulse token belongs to a bot.

    The widget's token is read from a request header and classified with the
    given client. Bots get a 403, unusable tokens a 401 and service failures
    a 502.

    Usage:
        from pulse import Pulse
        from pulse.fastapi import PulseVerify

        pulse = PulseVerify(Pulse("site-key", "secret-key"))

        @app.post('/signup')
        async def signup(check: PulseVerification = Depends(pulse)):
            return {"ok": True}
    """

    def __init__(
        self,
        client: Pulse,
        header_name: str = DEFAULT_TOKEN_HEADER,
        auto_error: bool = True,
    ):
        """
        Initialize the Pulse dependency.

        Args:
            client: Pulse client used for classification
            header_name: Request header carrying the widget token
            auto_error: If True, raise HTTPException on rejection.
                       If False, return None instead.
        """
        self.client = client
        self.header_name = header_name
        self.auto_error = auto_error

    def _reject(self, status_code: int, detail: str) -> None:
        if self.auto_error:
            raise HTTPException(status_code=status_code, detail=detail)
        return None

    async def __call__(self, request: Request) -> Optional[PulseVerification]:
        token = (request.headers.get(self.header_name) or "").strip()
        if not token:
            return self._reject(401, "Missing Pulse token")

        try:
            is_bot = await self.client.classify(token)
        except TokenError as e:
            logger.info("Pulse token rejected (code=%s)", e.code)
            return self._reject(401, e.error)
        except UnknownError as e:
            logger.warning("Pulse classification failed: %s", e.message)
            return self._reject(502, "Bot verification unavailable")

        if is_bot:
            return self._reject(403, "Bot detected")

        return PulseVerification(token=token, is_bot=is_bot)

    async def close(self) -> None:
        """Close the wrapped Pulse client, e.g. from an app shutdown hook."""
        await self.client.close()


def verify_token_dependency(
    site_key: str,
    secret_key: str,
    base_url: str = DEFAULT_API_URL,
    header_name: str = DEFAULT_TOKEN_HEADER,
) -> PulseVerify:
    """
    Create a FastAPI dependency backed by a new Pulse client.

    The dependency owns that client; call ``await verify.close()`` on app
    shutdown to release its connections.

    Example:
        verify = verify_token_dependency('site-key', 'secret-key')

        @app.post('/comment')
        async def comment(check: PulseVerification = Depends(verify)):
            return {"ok": True}

        @app.on_event("shutdown")
        async def shutdown():
            await verify.close()
    """
    return PulseVerify(Pulse(site_key, secret_key, base_url), header_name=header_name)
