"""Compose declarative plot specifications one component at a time."""

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from plotweave.builders import (
        aes,
        coord_cartesian,
        coord_fixed,
        coord_flip,
        facet_grid,
        facet_null,
        facet_wrap,
        geom_histogram,
        geom_line,
        geom_point,
        geom_smooth,
        ggtitle,
        guides,
        labs,
        layer,
        scale_color_discrete,
        scale_color_manual,
        scale_colour_discrete,
        scale_colour_manual,
        scale_x_continuous,
        scale_y_continuous,
        theme,
        theme_grey,
        theme_minimal,
        xlab,
        ylab,
    )
    from plotweave.chain import Call, Combine, evaluate, insert_data_into_chain, lazy, splice_data
    from plotweave.components import (
        Aes,
        Component,
        Coord,
        Facet,
        Guides,
        Labels,
        Layer,
        Proto,
        Scale,
        Stat,
        Theme,
    )
    from plotweave.dispatch import ComponentKind, classify, register_component
    from plotweave.errors import (
        FunctionComponentError,
        InternalChainError,
        InvalidComponentError,
        MissingOperandError,
        PlotweaveError,
        ProtoAdditionError,
    )
    from plotweave.registry import LastPlotRegistry, last_plot, set_last_plot, use_registry
    from plotweave.operators import MISSING, add, add3
    from plotweave.plot import PlotSpec, new_plot

_EXPORTS = {
    "builders": [
        "aes",
        "coord_cartesian",
        "coord_fixed",
        "coord_flip",
        "facet_grid",
        "facet_null",
        "facet_wrap",
        "geom_histogram",
        "geom_line",
        "geom_point",
        "geom_smooth",
        "ggtitle",
        "guides",
        "labs",
        "layer",
        "scale_color_discrete",
        "scale_color_manual",
        "scale_colour_discrete",
        "scale_colour_manual",
        "scale_x_continuous",
        "scale_y_continuous",
        "theme",
        "theme_grey",
        "theme_minimal",
        "xlab",
        "ylab",
    ],
    "chain": ["Call", "Combine", "evaluate", "insert_data_into_chain", "lazy", "splice_data"],
    "components": [
        "Aes",
        "Component",
        "Coord",
        "Facet",
        "Guides",
        "Labels",
        "Layer",
        "Proto",
        "Scale",
        "Stat",
        "Theme",
    ],
    "dispatch": ["ComponentKind", "classify", "register_component"],
    "errors": [
        "FunctionComponentError",
        "InternalChainError",
        "InvalidComponentError",
        "MissingOperandError",
        "PlotweaveError",
        "ProtoAdditionError",
    ],
    "registry": ["LastPlotRegistry", "last_plot", "set_last_plot", "use_registry"],
    "operators": ["MISSING", "add", "add3"],
    "plot": ["PlotSpec", "new_plot"],
}

_NAME_TO_MODULE = {name: module for module, names in _EXPORTS.items() for name in names}

__all__ = sorted(_NAME_TO_MODULE)


def __getattr__(name: str) -> Any:
    module_name = _NAME_TO_MODULE.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    value = getattr(import_module(f"{__name__}.{module_name}"), name)
    globals()[name] = value
    return value
