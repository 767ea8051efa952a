"""
KGB client facade.

This is the main entry point for users of the library. It wires the HTTP
client and the RPC service together and hands out project handles.
"""

import asyncio
from dataclasses import dataclass
from typing import Self

import httpx
import structlog

from kgb_client.api.http_client import AsyncHttpClient
from kgb_client.config import KGBClientConfig
from kgb_client.models.commit import CommitNotification
from kgb_client.models.session import Endpoint, ProjectSession
from kgb_client.services.rpc_service import RpcService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Project:
    """
    A project session bound to an open client.

    Obtained from ``KGBClient.project()``. Valid while the client is open.
    """

    session: ProjectSession
    _service: RpcService

    @property
    def project_id(self) -> str:
        """Identifier of the bound project."""
        return self.session.project_id

    async def relay_message(self, message: str, *, timeout: float | None = None) -> None:
        """
        Relay a free-text message to the project's channels.

        Raises:
            TransportError: Network failure or non-200 status.
            DecodeError: Response body is not a JSON object.
            RemoteError: Relay rejected the call.
            ProtocolViolationError: Relay answered with an unexpected result.
        """
        await self._service.relay_message(self.session, message, timeout=timeout)

    async def commit(
        self, notification: CommitNotification, *, timeout: float | None = None
    ) -> None:
        """
        Send a commit notification.

        Raises:
            TransportError: Network failure or non-200 status.
            DecodeError: Response body is not a JSON object.
            RemoteError: Relay rejected the call.
            ProtocolViolationError: Relay answered with an unexpected result.
        """
        await self._service.commit(self.session, notification, timeout=timeout)


class KGBClient:
    """
    Async client for a KGB relay.

    Example:
        ```python
        async with KGBClient("http://localhost:5391") as client:
            project = client.project("example-repo-id", "example-repo-password")
            await project.relay_message("hi, y'all!")
        ```

    Args:
        endpoint: Relay endpoint or its base address.
        config: Client configuration. Uses defaults if not provided.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        endpoint: Endpoint | str,
        config: KGBClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint if isinstance(endpoint, Endpoint) else Endpoint(endpoint)
        self._config = config or KGBClientConfig()
        self._transport = transport

        self._http: AsyncHttpClient | None = None
        self._service: RpcService | None = None
        self._init_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._ensure_initialized()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    async def _ensure_initialized(self) -> None:
        async with self._init_lock:
            if self._service is not None:
                return

            self._http = AsyncHttpClient(self._config, transport=self._transport)
            await self._http.__aenter__()
            self._service = RpcService(self._http, self._config)
            logger.debug("Client initialized", address=self._endpoint.address)

    async def close(self) -> None:
        """Close the client and release resources."""
        async with self._init_lock:
            if self._http:
                await self._http.__aexit__(None, None, None)
                self._http = None

            self._service = None
            logger.debug("Client closed")

    def project(self, project_id: str, password: str) -> Project:
        """
        Get a handle for one project on this client's endpoint.

        Args:
            project_id: Project identifier registered on the relay.
            password: Shared project password.

        Raises:
            RuntimeError: If the client is not open.
        """
        if self._service is None:
            raise RuntimeError("Client not initialized. Use 'async with' first.")
        return Project(self._endpoint.project(project_id, password), self._service)
