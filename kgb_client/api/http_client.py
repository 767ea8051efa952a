"""
Async HTTP client for KGB relays.

Owns the underlying httpx client and turns network failures into
TransportError. Protocol handling lives in the RPC service.
"""

import asyncio
from typing import Any

import httpx
import structlog

from kgb_client.config import KGBClientConfig
from kgb_client.exceptions import DecodeError, TransportError

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset({"x-kgb-auth", "password"})


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Keys are matched case-insensitively so HTTP header dicts work too.
    Nested dictionaries are sanitized recursively.

    Args:
        data: Dictionary that may contain sensitive values.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    result = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_KEYS:
            result[key] = "***"
        elif isinstance(value, dict):
            result[key] = sanitize_for_log(value)
        else:
            result[key] = value
    return result


class AsyncHttpClient:
    """Async HTTP client for KGB relays."""

    def __init__(
        self,
        config: KGBClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client. Safe to call more than once."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    async def post(
        self,
        url: str,
        *,
        content: bytes,
        headers: dict[str, str],
        timeout: float | None = None,
    ) -> httpx.Response:
        """
        POST a body and return the fully read response.

        The body is sent exactly as given. Status codes are not checked here.

        Args:
            url: Absolute URL.
            content: Request body.
            headers: Extra request headers.
            timeout: Per-call timeout overriding the configured one.

        Returns:
            Response with its content already loaded and the connection released.

        Raises:
            TransportError: If the request fails due to network issues or times out.
            DecodeError: If the response content encoding cannot be decoded.
        """
        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        try:
            return await self._client.post(
                url,
                content=content,
                headers=headers,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}", url=url) from e
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable response body: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Request failed: {e}", url=url) from e
