"""Top-level combine operators."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Final

from plotweave.components import Proto, Theme
from plotweave.dispatch import add_component, describe_component
from plotweave.errors import InvalidComponentError, MissingOperandError, ProtoAdditionError
from plotweave.registry import set_last_plot
from plotweave.plot import PlotSpec
from plotweave.theming import add_theme


class _Missing:
    """Marks an operand that was not supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def add(e1: Any, e2: Any = MISSING, *, name: str | None = None) -> Any:
    """Combine ``e1`` with the component ``e2``.

    ``e1`` must be a plot or a theme. Adding to a plot never modifies ``e1``:
    the plot is cloned first and the clone becomes the last plot.
    """
    if e2 is MISSING:
        raise MissingOperandError(
            "Cannot use `+` with a single argument. "
            "Did you accidentally put + on a new line?"
        )

    e2name = name or describe_component(e2)

    if isinstance(e1, Theme):
        return add_theme(e1, e2, e2name)
    if isinstance(e1, PlotSpec):
        return _add_to_plot(e1, e2, e2name)
    if isinstance(e1, Proto):
        raise ProtoAdditionError(
            "Cannot add proto objects together. "
            "Did you forget to add this object to a plot?"
        )
    raise InvalidComponentError(
        f"Can't add `{e2name}` to `{describe_component(e1)}`: "
        "only plots and themes can be added to."
    )


def add3(
    e1: Any,
    e2: Any = MISSING,
    e3: Any = MISSING,
    *,
    env: Mapping[str, Any] | None = None,
) -> Any:
    """Combine operator that also accepts data in front of a deferred chain.

    With two operands this is :func:`add`. With three, ``e1`` is data,
    ``e2`` a chain built from :data:`plotweave.chain.lazy` calls and ``e3``
    the next component: the data is passed to the earliest call of the chain
    before ``e3`` is added. This is what ``df.pipe(add3, chain, component)``
    relies on.
    """
    if e3 is MISSING:
        return add(e1, e2)

    from plotweave.chain import caller_namespace, insert_data_into_chain

    if env is None:
        frame = inspect.currentframe()
        try:
            env = caller_namespace(frame.f_back)
        finally:
            del frame
    return add(insert_data_into_chain(e1, e2, env), e3)


def _add_to_plot(plot: PlotSpec, component: Any, name: str) -> PlotSpec:
    plot = plot.clone()
    plot = add_component(plot, component, name)
    set_last_plot(plot)
    return plot

