"""The accumulating plot specification."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

import pandas as pd

from plotweave.components import Aes, Coord, Facet, Layer, Theme
from plotweave.labels import make_labels
from plotweave.scales import ScalesList


def _default_coordinates() -> Coord:
    return Coord(name="cartesian", default=True)


@dataclass(slots=True, eq=False)
class PlotSpec:
    """A declarative plot, built up one component at a time with ``+``."""

    data: Any = None
    mapping: Aes = field(default_factory=Aes)
    layers: list[Layer] = field(default_factory=list)
    scales: ScalesList = field(default_factory=ScalesList)
    theme: Theme = field(default_factory=Theme)
    coordinates: Coord = field(default_factory=_default_coordinates)
    facet: Facet = field(default_factory=Facet)
    labels: dict[str, str] = field(default_factory=dict)
    guides: dict[str, Any] = field(default_factory=dict)

    def clone(self) -> PlotSpec:
        """Copy every mutable container so the clone can be changed freely."""
        return PlotSpec(
            data=self.data,
            mapping=self.mapping.model_copy(deep=True),
            layers=list(self.layers),
            scales=self.scales.clone(),
            theme=self.theme,
            coordinates=self.coordinates,
            facet=self.facet,
            labels=dict(self.labels),
            guides=dict(self.guides),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlotSpec):
            return NotImplemented
        if not _same_data(self.data, other.data):
            return False
        return all(
            getattr(self, f.name) == getattr(other, f.name)
            for f in fields(self)
            if f.name != "data"
        )

    __hash__ = None

    def __add__(self, other: Any) -> PlotSpec:
        from plotweave.operators import add

        return add(self, other)


def new_plot(data: Any = None, mapping: Aes | None = None) -> PlotSpec:
    """Create an empty plot with optional default data and mapping."""
    mapping = mapping if mapping is not None else Aes()
    if not isinstance(mapping, Aes):
        raise TypeError(
            f"`mapping` must be created with `aes()`, not {type(mapping).__name__}."
        )
    return PlotSpec(data=data, mapping=mapping, labels=make_labels(mapping))


def _same_data(left: Any, right: Any) -> bool:
    # DataFrame == is elementwise, so frames are compared with equals().
    if left is right:
        return True
    if isinstance(left, pd.DataFrame) or isinstance(right, pd.DataFrame):
        return (
            isinstance(left, pd.DataFrame)
            and isinstance(right, pd.DataFrame)
            and left.equals(right)
        )
    return bool(left == right)
