"""Matrix user ID parsing and localpart escaping.

Localparts are escaped with a quoted-printable style transform: every
character outside the Matrix identifier grammar becomes ``=`` followed by
the lowercase hex of its code point, e.g. ``"foo bar"`` -> ``"foo=20bar"``.
"""

from __future__ import annotations

import re

from bridge.errors import InvalidArgumentError

# Uppercase is still tolerated by homeservers, so it passes through unescaped.
LOCALPART_ALLOWED = re.compile(r"[A-Za-z0-9\-.=_]")


def parse_user_id(user_id: str) -> tuple[str, str]:
    """Split ``@localpart:host`` on the first ``:``; the host keeps any port."""
    if not user_id.startswith("@"):
        raise InvalidArgumentError(f"user_id must start with '@': {user_id}")
    localpart, sep, host = user_id[1:].partition(":")
    if not sep:
        raise InvalidArgumentError(f"user_id must contain a ':' separator: {user_id}")
    if not localpart or not host:
        raise InvalidArgumentError(f"user_id must have a localpart and a host: {user_id}")
    return localpart, host


def build_user_id(localpart: str, host: str) -> str:
    return f"@{localpart}:{host}"


def escape_localpart(localpart: str) -> str:
    bad_chars = {char for char in localpart if not LOCALPART_ALLOWED.fullmatch(char)}
    escaped = localpart
    for char in bad_chars:
        escaped = escaped.replace(char, f"={ord(char):02x}")
    return escaped
