"""
Commit notification models for the ``commit_v4`` call.
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Self

from kgb_client.exceptions import InvalidChangeError

_CHANGE_RE = re.compile(r"^\((?P<action>[AMD]?)(?P<prop>\+?)\)(?P<path>.*)$", re.DOTALL)


class ChangeAction(StrEnum):
    """Kind of mutation a change descriptor reports."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"


@dataclass(frozen=True, kw_only=True)
class FileChange:
    """
    One entry of the ``changes`` list.

    Rendered as ``(A)path``, ``(M+)path``, ``(+)path`` or a bare ``path``.
    The ``+`` marks a change to properties only.
    """

    path: str
    action: ChangeAction | None = None
    prop_change: bool = False

    def __post_init__(self) -> None:
        if not self.path:
            raise InvalidChangeError("change path must not be empty", change=str(self))

    def __str__(self) -> str:
        if self.action is None and not self.prop_change:
            return self.path
        action = self.action.value if self.action is not None else ""
        prop = "+" if self.prop_change else ""
        return f"({action}{prop}){self.path}"

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a change descriptor.

        Text without a recognised ``(...)`` prefix is taken as a bare path.

        Raises:
            InvalidChangeError: If no path remains after the prefix.
        """
        match = _CHANGE_RE.match(text)
        if match is None:
            path, action, prop_change = text, None, False
        else:
            path = match["path"]
            action = ChangeAction(match["action"]) if match["action"] else None
            prop_change = bool(match["prop"])
        if not path:
            raise InvalidChangeError("change descriptor has no path", change=text)
        return cls(path=path, action=action, prop_change=prop_change)


@dataclass(frozen=True, kw_only=True)
class CommitExtras:
    """
    Optional ``extra`` members understood by the relay.

    Attributes:
        web_link: URL to a web view of the commit.
        use_irc_notices: Send the notification as an IRC NOTICE.
        use_color: Colorize the relayed lines.
        other: Any further keys, passed through untouched.
    """

    web_link: str | None = None
    use_irc_notices: bool | None = None
    use_color: bool | None = None
    other: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data = dict(self.other)
        for key in ("web_link", "use_irc_notices", "use_color"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True, kw_only=True)
class CommitNotification:
    """
    A version-control event for the ``commit_v4`` call.

    Content is passed through as-is; the relay decides what to make of it.

    Attributes:
        commit_id: Commit identifier (hash or revision number).
        rev_prefix: Prefix shown before the commit id, e.g. ``r`` for SVN.
        author: Commit author.
        branch: Branch the commit landed on.
        module: Module or sub-project name.
        commit_log: Full commit message.
        changes: Change descriptors, as strings or FileChange objects.
        extra: Extra members, as a mapping or CommitExtras.
    """

    commit_id: str
    rev_prefix: str = ""
    author: str = ""
    branch: str = ""
    module: str = ""
    commit_log: str = ""
    changes: Sequence[str | FileChange] = ()
    extra: Mapping[str, Any] | CommitExtras = field(default_factory=dict)

    def to_params(self) -> dict[str, Any]:
        """Serialize with the field names the relay expects."""
        extra = self.extra.to_dict() if isinstance(self.extra, CommitExtras) else dict(self.extra)
        return {
            "commit_id": self.commit_id,
            "rev_prefix": self.rev_prefix,
            "author": self.author,
            "branch": self.branch,
            "module": self.module,
            "commit_log": self.commit_log,
            "changes": [str(change) for change in self.changes],
            "extra": extra,
        }
