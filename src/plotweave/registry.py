"""Registry holding the most recently composed plot."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plotweave.plot import PlotSpec


class LastPlotRegistry:
    """A single slot, last write wins."""

    def __init__(self):
        self._lock = threading.Lock()
        self._plot: PlotSpec | None = None

    def set(self, plot: PlotSpec | None) -> None:
        with self._lock:
            self._plot = plot

    def get(self) -> PlotSpec | None:
        with self._lock:
            return self._plot

    def clear(self) -> None:
        self.set(None)


_default_registry = LastPlotRegistry()
_active_registry: ContextVar[LastPlotRegistry | None] = ContextVar(
    "plotweave_last_plot", default=None
)


def get_registry() -> LastPlotRegistry:
    """Return the registry that successful combinations write to."""
    return _active_registry.get() or _default_registry


def set_last_plot(plot: PlotSpec | None) -> None:
    """Record ``plot`` as the current plot."""
    get_registry().set(plot)


def last_plot() -> PlotSpec | None:
    """Return the most recently composed plot, if any."""
    return get_registry().get()


@contextmanager
def use_registry(registry: LastPlotRegistry) -> Iterator[LastPlotRegistry]:
    """Write last-plot updates to ``registry`` inside the block."""
    token = _active_registry.set(registry)
    try:
        yield registry
    finally:
        _active_registry.reset(token)
