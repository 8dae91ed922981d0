from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from os import getenv

logger = logging.getLogger(__name__)

_settings: BridgeSettings | None = None


@dataclass(frozen=True)
class BridgeSettings:
    # Only read when a MatrixUser is constructed without an explicit escape flag.
    escape_default: bool = True


def load_settings() -> BridgeSettings:
    return BridgeSettings(
        escape_default=_parse_bool(getenv("BRIDGE_ESCAPE_DEFAULT"), default=True),
    )


def get_settings() -> BridgeSettings:
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def configure(settings: BridgeSettings) -> None:
    global _settings
    _settings = settings
    logger.info("bridge_settings_configured escape_default=%s", settings.escape_default)


def reset_settings() -> None:
    """Forget configured settings; the next read loads them from the environment."""
    global _settings
    _settings = None


def get_escape_default() -> bool:
    return get_settings().escape_default


def set_escape_default(value: bool) -> None:
    configure(replace(get_settings(), escape_default=bool(value)))


def _parse_bool(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default
