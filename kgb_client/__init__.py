"""
KGB Python Client.

An async client for the KGB notification relay: sends commit notifications
and free-text messages to IRC channels over authenticated JSON-RPC.

Example:
    ```python
    from kgb_client import CommitNotification, KGBClient

    async with KGBClient("http://localhost:5391") as client:
        project = client.project("example-repo-id", "example-repo-password")

        await project.relay_message("hi, y'all!")

        await project.commit(
            CommitNotification(
                commit_id="3f2a9c1",
                author="alice",
                branch="main",
                commit_log="Fix the frobnicator",
                changes=["(M)src/frob.c"],
            )
        )
    ```
"""

from kgb_client.client import KGBClient, Project
from kgb_client.config import KGBClientConfig
from kgb_client.exceptions import (
    DecodeError,
    InvalidChangeError,
    KGBError,
    ProtocolViolationError,
    RemoteError,
    TransportError,
)
from kgb_client.models import (
    ChangeAction,
    CommitExtras,
    CommitNotification,
    Endpoint,
    FileChange,
    ProjectSession,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "KGBClient",
    "KGBClientConfig",
    "Project",
    # Models
    "Endpoint",
    "ProjectSession",
    "ChangeAction",
    "FileChange",
    "CommitExtras",
    "CommitNotification",
    # Exceptions
    "KGBError",
    "TransportError",
    "DecodeError",
    "RemoteError",
    "ProtocolViolationError",
    "InvalidChangeError",
]
