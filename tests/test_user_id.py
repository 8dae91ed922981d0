import pytest

from bridge.errors import InvalidArgumentError
from bridge.models.user_id import build_user_id, escape_localpart, parse_user_id


def test_parse_user_id_splits_on_first_colon() -> None:
    assert parse_user_id("@alice:example.com") == ("alice", "example.com")
    assert parse_user_id("@alice:example.com:8448") == ("alice", "example.com:8448")


@pytest.mark.parametrize("user_id", ["alice:example.com", "@alice", "@:example.com", "@alice:"])
def test_parse_user_id_rejects_malformed_ids(user_id: str) -> None:
    with pytest.raises(InvalidArgumentError):
        parse_user_id(user_id)


def test_build_user_id() -> None:
    assert build_user_id("alice", "example.com") == "@alice:example.com"


def test_escape_localpart_replaces_disallowed_chars() -> None:
    assert escape_localpart("foo bar") == "foo=20bar"
    assert escape_localpart("a b c") == "a=20b=20c"
    assert escape_localpart("irc/#chan") == "irc=2f=23chan"
    assert escape_localpart("tab\there") == "tab=09here"
    assert escape_localpart("café") == "caf=e9"
    assert escape_localpart("小明") == "=5c0f=660e"


def test_escape_localpart_keeps_allowed_chars() -> None:
    assert escape_localpart("already.valid_123") == "already.valid_123"
    assert escape_localpart("Mixed-Case=ok") == "Mixed-Case=ok"


def test_escape_localpart_is_stable_after_first_run() -> None:
    once = escape_localpart("who? me!")
    assert once == "who=3f=20me=21"
    assert escape_localpart(once) == once
    assert escape_localpart(escape_localpart(once)) == once
