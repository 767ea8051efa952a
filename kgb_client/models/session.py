"""
Endpoint and project session value objects.
"""

from dataclasses import dataclass, field

import httpx

from kgb_client.crypto.digest import compute_auth_digest

PROJECT_HEADER = "X-KGB-Project"
AUTH_HEADER = "X-KGB-Auth"


@dataclass(frozen=True, slots=True)
class Endpoint:
    """
    Network address of a KGB relay.

    Holds no connection state; one endpoint can back any number of sessions.

    Attributes:
        address: Base URL of the relay, e.g. ``http://localhost:5391``.
    """

    address: str

    def __post_init__(self) -> None:
        msg = f"endpoint address must be an absolute http(s) URL: {self.address!r}"
        try:
            url = httpx.URL(self.address)
        except httpx.InvalidURL as e:
            raise ValueError(msg) from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(msg)

    def rpc_url(self, path: str = "/json-rpc") -> str:
        """Join the address with the JSON-RPC handler path."""
        return f"{self.address.rstrip('/')}/{path.lstrip('/')}"

    def project(self, project_id: str, password: str) -> "ProjectSession":
        """Bind credentials for one project to this endpoint."""
        return ProjectSession(endpoint=self, project_id=project_id, password=password)


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectSession:
    """
    An endpoint plus the project credentials used to sign calls.

    Stateless and immutable, so a single instance can be shared by
    concurrent callers.

    Attributes:
        endpoint: Relay the project is registered on.
        project_id: Project identifier.
        password: Shared secret for the project.
    """

    endpoint: Endpoint
    project_id: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.project_id:
            msg = "project_id must not be empty"
            raise ValueError(msg)
        if not self.project_id.isascii():
            msg = "project_id must be ASCII, it is sent as an HTTP header"
            raise ValueError(msg)

    def sign(self, body: bytes) -> str:
        """Digest for an exact request body."""
        return compute_auth_digest(self.password, self.project_id, body)

    def auth_headers(self, body: bytes) -> dict[str, str]:
        """
        Headers that authenticate ``body`` for this project.

        The digest covers ``body`` byte for byte, so the caller must transmit
        exactly these bytes.
        """
        return {
            "Content-Type": "application/json",
            PROJECT_HEADER: self.project_id,
            AUTH_HEADER: self.sign(body),
        }
