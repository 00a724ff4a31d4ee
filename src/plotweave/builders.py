"""Constructors for plot components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from plotweave.components import (
    Aes,
    Coord,
    Facet,
    Guides,
    Labels,
    Layer,
    Scale,
    Stat,
    Theme,
)

# Base-graphics style aesthetic names mapped to their canonical spelling.
_AES_ALIASES = {
    "color": "colour",
    "col": "colour",
    "fg": "colour",
    "bg": "fill",
    "pch": "shape",
    "cex": "size",
    "lty": "linetype",
    "lwd": "linewidth",
    "srt": "angle",
    "adj": "hjust",
    "min": "ymin",
    "max": "ymax",
}

_X_AESTHETICS = ("x", "xmin", "xmax", "xend", "xintercept", "xlower", "xmiddle", "xupper", "x0")
_Y_AESTHETICS = ("y", "ymin", "ymax", "yend", "yintercept", "ylower", "ymiddle", "yupper", "y0")

STAT_IDENTITY = Stat(name="identity")
STAT_BIN = Stat(
    name="bin",
    default_aes={"x": "after_stat(count)", "y": "after_stat(count)", "weight": 1},
)
STAT_SMOOTH = Stat(name="smooth")


def standardise_aes_names(names: Sequence[str]) -> list[str]:
    """Canonical aesthetic names, e.g. ``color`` becomes ``colour``."""
    return [_AES_ALIASES.get(name, name) for name in names]


def _standardise(entries: dict[str, Any]) -> dict[str, Any]:
    return dict(zip(standardise_aes_names(list(entries)), entries.values()))


def aes(x: Any = None, y: Any = None, **kwargs: Any) -> Aes:
    """Bind aesthetics to data expressions, e.g. ``aes("displ", "hwy", colour="class")``."""
    bindings: dict[str, Any] = {}
    if x is not None:
        bindings["x"] = x
    if y is not None:
        bindings["y"] = y
    bindings.update(_standardise(kwargs))
    return Aes(bindings=bindings)


def labs(**kwargs: str) -> Labels:
    return Labels(entries=_standardise(kwargs))


def xlab(label: str) -> Labels:
    return labs(x=label)


def ylab(label: str) -> Labels:
    return labs(y=label)


def ggtitle(label: str, subtitle: str | None = None) -> Labels:
    entries = {"title": label}
    if subtitle is not None:
        entries["subtitle"] = subtitle
    return labs(**entries)


def guides(**kwargs: Any) -> Guides:
    return Guides(entries=_standardise(kwargs))


def theme(*, complete: bool = False, **elements: Any) -> Theme:
    """A theme modification, e.g. ``theme(axis_text={"size": 10})``."""
    return Theme(elements=elements, complete=complete)


def theme_grey(base_size: float = 11, base_family: str = "") -> Theme:
    text = {"family": base_family, "face": "plain", "colour": "black", "size": base_size}
    return Theme(
        elements={
            "text": text,
            "line": {"colour": "black", "linewidth": base_size / 22},
            "panel_background": {"fill": "grey92", "colour": None},
            "panel_grid": {"colour": "white"},
            "legend_position": "right",
        },
        complete=True,
    )


def theme_minimal(base_size: float = 11, base_family: str = "") -> Theme:
    base = theme_grey(base_size, base_family)
    elements = dict(base.elements)
    elements.update(
        {
            "panel_background": None,
            "panel_border": None,
            "axis_ticks": None,
        }
    )
    return Theme(elements=elements, complete=True)


def layer(
    geom: str,
    stat: Stat | None = None,
    mapping: Aes | None = None,
    data: Any = None,
    inherit_aes: bool = True,
    **params: Any,
) -> Layer:
    if mapping is not None and not isinstance(mapping, Aes):
        raise TypeError(
            f"`mapping` must be created with `aes()`, not {type(mapping).__name__}."
        )
    return Layer(
        geom=geom,
        stat=stat or STAT_IDENTITY,
        mapping=mapping,
        data=data,
        inherit_aes=inherit_aes,
        params=params,
    )


def geom_point(mapping: Aes | None = None, data: Any = None, **params: Any) -> Layer:
    return layer("point", mapping=mapping, data=data, **params)


def geom_line(mapping: Aes | None = None, data: Any = None, **params: Any) -> Layer:
    return layer("line", mapping=mapping, data=data, **params)


def geom_histogram(
    mapping: Aes | None = None, data: Any = None, bins: int = 30, **params: Any
) -> Layer:
    return layer("bar", stat=STAT_BIN, mapping=mapping, data=data, bins=bins, **params)


def geom_smooth(
    mapping: Aes | None = None, data: Any = None, method: str | None = None, **params: Any
) -> Layer:
    return layer("smooth", stat=STAT_SMOOTH, mapping=mapping, data=data, method=method, **params)


def scale_x_continuous(name: str | None = None, **params: Any) -> Scale:
    return Scale(aesthetics=_X_AESTHETICS, scale_type="continuous", name=name, params=params)


def scale_y_continuous(name: str | None = None, **params: Any) -> Scale:
    return Scale(aesthetics=_Y_AESTHETICS, scale_type="continuous", name=name, params=params)


def scale_colour_discrete(name: str | None = None, **params: Any) -> Scale:
    return Scale(aesthetics=("colour",), scale_type="discrete", name=name, params=params)


def scale_colour_manual(
    values: Sequence[str] | dict[str, str], name: str | None = None, **params: Any
) -> Scale:
    return Scale(
        aesthetics=("colour",),
        scale_type="manual",
        name=name,
        params={"values": values, **params},
    )


scale_color_discrete = scale_colour_discrete
scale_color_manual = scale_colour_manual


def coord_cartesian(
    xlim: tuple[float, float] | None = None,
    ylim: tuple[float, float] | None = None,
    expand: bool = True,
    default: bool = False,
) -> Coord:
    return Coord(
        name="cartesian",
        default=default,
        params={"xlim": xlim, "ylim": ylim, "expand": expand},
    )


def coord_flip(
    xlim: tuple[float, float] | None = None,
    ylim: tuple[float, float] | None = None,
    expand: bool = True,
) -> Coord:
    return Coord(name="flip", params={"xlim": xlim, "ylim": ylim, "expand": expand})


def coord_fixed(ratio: float = 1, expand: bool = True) -> Coord:
    return Coord(name="fixed", params={"ratio": ratio, "expand": expand})


def facet_null() -> Facet:
    return Facet(name="null")


def facet_wrap(
    facets: str | Sequence[str],
    nrow: int | None = None,
    ncol: int | None = None,
    scales: str = "fixed",
) -> Facet:
    facets = [facets] if isinstance(facets, str) else list(facets)
    return Facet(
        name="wrap",
        params={"facets": facets, "nrow": nrow, "ncol": ncol, "scales": scales},
    )


def facet_grid(
    rows: str | Sequence[str] | None = None,
    cols: str | Sequence[str] | None = None,
    scales: str = "fixed",
) -> Facet:
    def _vars(value):
        if value is None:
            return []
        return [value] if isinstance(value, str) else list(value)

    return Facet(
        name="grid",
        params={"rows": _vars(rows), "cols": _vars(cols), "scales": scales},
    )
