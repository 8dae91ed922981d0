from __future__ import annotations

from typing import TypeAlias

from pydantic import ConfigDict, JsonValue, TypeAdapter, ValidationError

from bridge.errors import InvalidArgumentError

DataBag: TypeAlias = dict[str, JsonValue]

# NaN and infinities have no JSON form; reject them instead of writing null.
_DATA_BAG_ADAPTER = TypeAdapter(DataBag, config=ConfigDict(allow_inf_nan=False))


def dump_data_bag(bag: DataBag) -> str:
    """Encode a metadata bag as compact JSON, rejecting values JSON cannot hold."""
    try:
        validated = _DATA_BAG_ADAPTER.validate_python(bag)
    except ValidationError as exc:
        raise InvalidArgumentError(f"data is not JSON serializable: {exc}") from exc
    return _DATA_BAG_ADAPTER.dump_json(validated).decode("utf-8")


def load_data_bag(payload: str | bytes) -> DataBag:
    """Decode a bag stored by ``dump_data_bag``. The payload must be a JSON object."""
    try:
        return _DATA_BAG_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise InvalidArgumentError(f"data payload must be a JSON object: {exc}") from exc
