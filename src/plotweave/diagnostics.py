"""Sinks for non-fatal notices emitted while composing plots."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol

from rich.console import Console

from plotweave.config.logging import get_logger
from plotweave.config.settings import get_config

logger = get_logger(__name__)


class DiagnosticsSink(Protocol):
    """Receives observational notices. Must not raise."""

    def notice(self, message: str) -> None: ...


class ConsoleDiagnostics:
    """Print notices to stderr and record them in the log."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def notice(self, message: str) -> None:
        logger.info("diagnostics.notice", message=message)
        if not get_config().notices_enabled:
            return
        self.console.print(message, style="yellow", markup=False, highlight=False)


_default_sink = ConsoleDiagnostics()
_active_sink: ContextVar[DiagnosticsSink | None] = ContextVar(
    "plotweave_diagnostics", default=None
)


def get_diagnostics() -> DiagnosticsSink:
    """Return the sink notices are currently routed to."""
    return _active_sink.get() or _default_sink


def notify(message: str) -> None:
    """Send ``message`` to the active diagnostics sink."""
    get_diagnostics().notice(message)


@contextmanager
def use_diagnostics(sink: DiagnosticsSink) -> Iterator[DiagnosticsSink]:
    """Route notices to ``sink`` for the duration of the block."""
    token = _active_sink.set(sink)
    try:
        yield sink
    finally:
        _active_sink.reset(token)
