"""
Domain models for the KGB client.

These are immutable (frozen) dataclasses.
"""

from kgb_client.models.commit import (
    ChangeAction,
    CommitExtras,
    CommitNotification,
    FileChange,
)
from kgb_client.models.session import AUTH_HEADER, PROJECT_HEADER, Endpoint, ProjectSession

__all__ = [
    # Session
    "Endpoint",
    "ProjectSession",
    "AUTH_HEADER",
    "PROJECT_HEADER",
    # Commit
    "ChangeAction",
    "FileChange",
    "CommitExtras",
    "CommitNotification",
]
