from __future__ import annotations

import pytest

from plotweave.config.settings import reset_config
from plotweave.diagnostics import use_diagnostics
from plotweave.registry import LastPlotRegistry, use_registry


class CollectingDiagnostics:
    def __init__(self):
        self.messages: list[str] = []

    def notice(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def notices():
    """Collect notices instead of printing them."""
    sink = CollectingDiagnostics()
    with use_diagnostics(sink):
        yield sink.messages


@pytest.fixture(autouse=True)
def registry():
    with use_registry(LastPlotRegistry()) as registry:
        yield registry


@pytest.fixture
def fresh_config():
    reset_config()
    yield
    reset_config()
