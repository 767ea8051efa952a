"""
Remote procedure calls against a KGB relay.

Every call is one signed POST: encode, sign the encoded bytes, send,
decode. Nothing is retried; a notification delivered twice is relayed twice.
"""

from enum import StrEnum
from typing import Any

import structlog

from kgb_client.api.http_client import AsyncHttpClient, sanitize_for_log
from kgb_client.api.json_rpc import decode_response, encode_request
from kgb_client.config import KGBClientConfig
from kgb_client.exceptions import ProtocolViolationError
from kgb_client.models.commit import CommitNotification
from kgb_client.models.session import ProjectSession

logger = structlog.get_logger(__name__)


class RelayMethod(StrEnum):
    """Remote procedures exposed by the relay."""

    RELAY_MESSAGE = "relay_message"
    COMMIT = "commit_v4"


# Both markers are accepted as success for every method.
SUCCESS_MARKERS: dict[RelayMethod, frozenset[str]] = {
    RelayMethod.RELAY_MESSAGE: frozenset({"OK", ""}),
    RelayMethod.COMMIT: frozenset({"OK", ""}),
}


def ensure_success(method: RelayMethod, result: Any) -> None:
    """
    Check a ``result`` value against the success markers of ``method``.

    Raises:
        ProtocolViolationError: If the value is not an accepted marker.
    """
    if isinstance(result, str):
        if result in SUCCESS_MARKERS[method]:
            return
        msg = f'result not "OK": {result!r}'
    else:
        msg = f"unexpected result: {result!r}"
    raise ProtocolViolationError(msg, method=method.value, result=result)


class RpcService:
    """
    Service for signed JSON-RPC calls.

    Holds no per-call state; one instance can serve concurrent calls for
    any number of sessions.
    """

    def __init__(self, http: AsyncHttpClient, config: KGBClientConfig) -> None:
        """
        Initialize RPC service.

        Args:
            http: Async HTTP client.
            config: Client configuration (RPC path and request id).
        """
        self._http = http
        self._config = config

    async def call(
        self,
        session: ProjectSession,
        method: str,
        *params: Any,
        timeout: float | None = None,
    ) -> Any:
        """
        Invoke a remote procedure.

        Args:
            session: Project credentials and endpoint.
            method: Remote procedure name.
            *params: Positional parameters.
            timeout: Per-call timeout in seconds.

        Returns:
            The decoded ``result`` value.

        Raises:
            TransportError: Network failure or non-200 status.
            DecodeError: Response body is not a JSON object.
            RemoteError: Relay returned an ``error`` member.
        """
        body = encode_request(method, params, self._config.request_id)
        headers = session.auth_headers(body)
        url = session.endpoint.rpc_url(self._config.rpc_path)

        logger.debug(
            "Calling relay",
            method=method,
            url=url,
            headers=sanitize_for_log(headers),
        )
        response = await self._http.post(url, content=body, headers=headers, timeout=timeout)
        result = decode_response(response)
        logger.debug("Relay answered", method=method, result=result)
        return result

    async def relay_message(
        self, session: ProjectSession, message: str, *, timeout: float | None = None
    ) -> None:
        """
        Relay a free-text message.

        Raises:
            ProtocolViolationError: If the relay does not acknowledge the message.
        """
        method = RelayMethod.RELAY_MESSAGE
        result = await self.call(session, method.value, message, timeout=timeout)
        ensure_success(method, result)

    async def commit(
        self,
        session: ProjectSession,
        notification: CommitNotification,
        *,
        timeout: float | None = None,
    ) -> None:
        """
        Send a commit notification.

        Raises:
            ProtocolViolationError: If the relay does not acknowledge the commit.
        """
        method = RelayMethod.COMMIT
        result = await self.call(session, method.value, notification.to_params(), timeout=timeout)
        ensure_success(method, result)
        logger.debug(
            "Commit relayed",
            project=session.project_id,
            commit_id=notification.commit_id,
            changes=len(notification.changes),
        )
