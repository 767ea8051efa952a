"""
KGB API client layer.

Provides async HTTP communication and JSON-RPC framing.
"""

from kgb_client.api.http_client import AsyncHttpClient, sanitize_for_log
from kgb_client.api.json_rpc import decode_response, encode_request

__all__ = ["AsyncHttpClient", "decode_response", "encode_request", "sanitize_for_log"]
