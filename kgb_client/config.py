"""
KGB client configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class KGBClientConfig:
    """
    Attributes:
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        rpc_path: Path of the JSON-RPC handler, appended to the endpoint address.
        request_id: JSON-RPC ``id`` sent with every call. Calls are unary, so
            the value is never used for matching.
    """

    timeout: float = 30.0
    user_agent: str = "kgb-client-python/0.1"
    rpc_path: str = "/json-rpc"
    request_id: int = 0

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if not self.rpc_path.startswith("/"):
            msg = "rpc_path must start with '/'"
            raise ValueError(msg)
        if self.request_id < 0:
            msg = "request_id must be non-negative"
            raise ValueError(msg)
