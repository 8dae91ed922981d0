from collections.abc import Iterator

import pytest

from bridge.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolate_bridge_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("BRIDGE_ESCAPE_DEFAULT", raising=False)
    reset_settings()
    yield
    reset_settings()
