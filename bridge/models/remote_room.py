from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import JsonValue

from bridge.models.data_bag import DataBag, dump_data_bag, load_data_bag


@dataclass(frozen=True)
class RemoteRoom:
    """A room on the remote network side of the bridge.

    ``data`` holds bridge-specific metadata. The store persists it through
    ``serialize()`` and keeps the room ID separately, usually as the key.
    The room ID cannot be reassigned; the bag's contents change via ``set()``.
    """

    room_id: str
    data: DataBag = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.data is None:
            object.__setattr__(self, "data", {})

    def get_id(self) -> str:
        return self.room_id

    def get(self, key: str) -> JsonValue | None:
        return self.data.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        # Values should be JSON serializable; only to_json() checks this.
        self.data[key] = value

    def serialize(self) -> DataBag:
        return self.data

    def to_json(self) -> str:
        return dump_data_bag(self.serialize())

    @classmethod
    def from_json(cls, room_id: str, payload: str | bytes) -> RemoteRoom:
        return cls(room_id, load_data_bag(payload))
