from __future__ import annotations

import logging
from typing import Any

from pydantic import JsonValue

from bridge.errors import InvalidArgumentError
from bridge.models.data_bag import DataBag, dump_data_bag, load_data_bag
from bridge.models.user_id import build_user_id, escape_localpart, parse_user_id
from bridge.settings import get_escape_default

logger = logging.getLogger(__name__)

DISPLAY_NAME_KEY = "displayName"
LOCALPART_KEY = "localpart"


class MatrixUser:
    """A Matrix-side user known to the bridge.

    ``escape=None`` means "use the process-wide default" (see
    ``bridge.settings.set_escape_default``), resolved when the user is built.
    Escaping rewrites ``localpart`` and ``user_id`` once, at construction.
    """

    def __init__(
        self,
        user_id: str | None,
        data: Any = None,
        escape: bool | None = None,
    ) -> None:
        if not user_id:
            raise InvalidArgumentError("missing user_id")
        if not isinstance(user_id, str):
            raise InvalidArgumentError(f"user_id must be a str, got {type(user_id).__name__}")
        if data is not None and not isinstance(data, dict):
            raise InvalidArgumentError(f"data must be a dict, got {type(data).__name__}")
        self._user_id = user_id
        self._localpart, self._host = parse_user_id(user_id)
        if escape is None:
            escape = get_escape_default()
        if escape:
            self.escape_user_id()
        self._data: DataBag = data if data is not None else {}

    # Equality covers the mutable data bag, so users are unhashable.
    __hash__ = None

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def localpart(self) -> str:
        return self._localpart

    @property
    def host(self) -> str:
        return self._host

    def __repr__(self) -> str:
        return f"MatrixUser(user_id={self.user_id!r}, data={self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixUser):
            return NotImplemented
        return self.user_id == other.user_id and self._data == other._data

    def get_id(self) -> str:
        return self.user_id

    def get_display_name(self) -> str | None:
        return self._data.get(DISPLAY_NAME_KEY)

    def set_display_name(self, name: str) -> None:
        self._data[DISPLAY_NAME_KEY] = name

    def get(self, key: str) -> JsonValue | None:
        return self._data.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        self._data[key] = value

    def serialize(self) -> DataBag:
        """Return the data bag for storage, excluding the user ID.

        The current localpart is written into the bag before it is returned,
        so the bag itself is modified. Use ``to_dict()`` for a copy instead.
        """
        self._data[LOCALPART_KEY] = self.localpart
        return self._data

    def to_dict(self) -> DataBag:
        return {**self._data, LOCALPART_KEY: self.localpart}

    def to_json(self) -> str:
        return dump_data_bag(self.to_dict())

    @classmethod
    def from_json(
        cls,
        user_id: str,
        payload: str | bytes,
        escape: bool | None = None,
    ) -> MatrixUser:
        return cls(user_id, load_data_bag(payload), escape=escape)

    def escape_user_id(self) -> None:
        """Escape the localpart so the user ID fits the Matrix identifier grammar."""
        escaped = escape_localpart(self.localpart)
        if escaped != self.localpart:
            logger.debug(
                "matrix_user_escaped user_id=%s escaped=%s",
                self.user_id,
                build_user_id(escaped, self.host),
            )
        self._localpart = escaped
        self._user_id = build_user_id(escaped, self._host)
