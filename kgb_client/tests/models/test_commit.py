import pytest

from kgb_client.exceptions import InvalidChangeError
from kgb_client.models.commit import (
    ChangeAction,
    CommitExtras,
    CommitNotification,
    FileChange,
)


@pytest.mark.parametrize(
    "change,expected",
    [
        (FileChange(path="src/a.c", action=ChangeAction.ADDED), "(A)src/a.c"),
        (FileChange(path="src/b.c", action=ChangeAction.MODIFIED, prop_change=True), "(M+)src/b.c"),
        (FileChange(path="src/c.c", action=ChangeAction.DELETED), "(D)src/c.c"),
        (FileChange(path="src/d.c", prop_change=True), "(+)src/d.c"),
        (FileChange(path="src/e.c"), "src/e.c"),
    ],
)
def test_file_change_renders_descriptor(change: FileChange, expected: str) -> None:
    assert str(change) == expected


def test_file_change_parse_reads_action_and_prop_flag() -> None:
    change = FileChange.parse("(M+)debian/control")

    assert change.path == "debian/control"
    assert change.action is ChangeAction.MODIFIED
    assert change.prop_change is True


def test_file_change_parse_bare_path() -> None:
    change = FileChange.parse("README")

    assert change == FileChange(path="README")


def test_file_change_parse_keeps_unknown_prefix_in_path() -> None:
    change = FileChange.parse("(draft)notes.txt")

    assert change.path == "(draft)notes.txt"
    assert change.action is None


@pytest.mark.parametrize("text", ["", "(A)", "(+)"])
def test_file_change_parse_rejects_missing_path(text: str) -> None:
    with pytest.raises(InvalidChangeError):
        FileChange.parse(text)


def test_commit_extras_omits_unset_keys() -> None:
    extras = CommitExtras(web_link="https://example.org/c/1", use_color=False)

    assert extras.to_dict() == {"web_link": "https://example.org/c/1", "use_color": False}


def test_commit_extras_merges_other_keys() -> None:
    extras = CommitExtras(use_irc_notices=True, other={"custom": [1, 2]})

    assert extras.to_dict() == {"custom": [1, 2], "use_irc_notices": True}


def test_to_params_uses_protocol_field_names() -> None:
    notification = CommitNotification(
        commit_id="3f2a9c1",
        rev_prefix="r",
        author="alice",
        branch="main",
        module="frob",
        commit_log="Fix the frobnicator",
        changes=["(A)new.c", FileChange(path="old.c", action=ChangeAction.DELETED)],
        extra=CommitExtras(web_link="https://example.org/3f2a9c1"),
    )

    assert notification.to_params() == {
        "commit_id": "3f2a9c1",
        "rev_prefix": "r",
        "author": "alice",
        "branch": "main",
        "module": "frob",
        "commit_log": "Fix the frobnicator",
        "changes": ["(A)new.c", "(D)old.c"],
        "extra": {"web_link": "https://example.org/3f2a9c1"},
    }


def test_to_params_passes_changes_and_extra_through() -> None:
    notification = CommitNotification(
        commit_id="1",
        changes=("whatever (X)", "(M)a"),
        extra={"use_color": True, "anything": {"nested": None}},
    )

    params = notification.to_params()

    assert params["changes"] == ["whatever (X)", "(M)a"]
    assert params["extra"] == {"use_color": True, "anything": {"nested": None}}
    assert list(params) == [
        "commit_id",
        "rev_prefix",
        "author",
        "branch",
        "module",
        "commit_log",
        "changes",
        "extra",
    ]
