"""
JSON-RPC framing for the KGB protocol.
"""

import json
from collections.abc import Sequence
from typing import Any

import httpx

from kgb_client.exceptions import DecodeError, RemoteError, TransportError

_BODY_PREVIEW = 200


def encode_request(method: str, params: Sequence[Any], request_id: int = 0) -> bytes:
    """
    Serialize a call to the bytes that are both signed and sent.

    Member order and separators are fixed so the same call always produces
    the same bytes.

    Args:
        method: Remote procedure name.
        params: Positional parameters, in the procedure's declared order.
        request_id: JSON-RPC ``id``.

    Returns:
        Compact UTF-8 JSON document.

    Raises:
        ValueError: If method is empty or a parameter holds NaN or Infinity.
        TypeError: If a parameter is not JSON-serializable.
    """
    if not method:
        msg = "method must not be empty"
        raise ValueError(msg)
    payload = {"method": method, "params": list(params), "id": request_id}
    return json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode()


def decode_response(response: httpx.Response) -> Any:
    """
    Extract the ``result`` member of a relay response.

    Args:
        response: Fully read HTTP response.

    Returns:
        The ``result`` value, untouched (``None`` if absent).

    Raises:
        TransportError: If the status is not 200. The body is not inspected.
        DecodeError: If the body is not a JSON object.
        RemoteError: If the ``error`` member is present and not null.
    """
    if response.status_code != httpx.codes.OK:
        msg = f"HTTP error: {response.status_code} {response.reason_phrase}"
        raise TransportError(msg, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError("Invalid JSON response", body=response.text[:_BODY_PREVIEW]) from e

    if not isinstance(data, dict):
        raise DecodeError("Response is not a JSON object", body=response.text[:_BODY_PREVIEW])

    error = data.get("error")
    if error is not None:
        raise RemoteError(f"error result: {error}", error=error)

    return data.get("result")
