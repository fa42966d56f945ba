"""
clients/http_client.py
----------------------
Shared async HTTP client.
Wraps a single httpx.AsyncClient so every upstream call uses the same
connection pool and timeout, and maps httpx failures onto ApiError.
"""

import logging
from typing import Any, Optional

import httpx

from utils.errors import SchemaError, TransportError
from utils.logger import get_logger

_USER_AGENT = "doggo-bot/1.0"


class ApiClient:
    """GET-and-decode-JSON facade over httpx."""

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            timeout: Seconds allowed for connect, read and write of one request.
            transport: Optional httpx transport (tests pass a MockTransport).
            logger: Logger handle; defaults to this module's logger.
        """
        self.logger = logger or get_logger(__name__)
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            headers={"User-Agent": _USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    async def get_json(self, url: str, params: Optional[dict[str, str]] = None) -> Any:
        """
        Perform one GET request and decode the body as JSON.

        Error responses that still carry a JSON body are returned as-is;
        the caller decides what they mean.

        Raises:
            TransportError: On network/timeout failure, an unusable URL, or an error status with no JSON body.
            SchemaError: If a successful response body is not valid JSON.
        """
        try:
            response = await self._client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"GET {url} failed: {e!r}")
            raise TransportError(f"GET {url} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            if response.is_error:
                raise TransportError(f"GET {response.url} returned HTTP {response.status_code}") from e
            raise SchemaError(f"GET {response.url} returned a non-JSON body") from e

        if response.is_error:
            self.logger.warning(f"GET {response.url} returned HTTP {response.status_code}")
        return payload

    async def aclose(self) -> None:
        """Close all pooled connections."""
        await self._client.aclose()
        self.logger.info("HTTP client closed.")
