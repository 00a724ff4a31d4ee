"""Label derivation and label/guide merging."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from plotweave.components import Aes

if TYPE_CHECKING:
    from plotweave.plot import PlotSpec

_STAGE_CALL = re.compile(r"^\s*(?:after_stat|after_scale|stat)\((.*)\)\s*$", re.DOTALL)
_DOTTED_STAT = re.compile(r"^\.\.([A-Za-z_][\w.]*?)\.\.$")


def defaults(x: Mapping[str, Any], y: Mapping[str, Any]) -> dict[str, Any]:
    """Entries of ``x`` followed by the entries of ``y`` that ``x`` lacks."""
    merged = dict(x)
    for key, value in y.items():
        if key not in merged:
            merged[key] = value
    return merged


def make_labels(mapping: Aes | Mapping[str, Any] | None) -> dict[str, str]:
    """Derive a display label for every binding in ``mapping``."""
    if mapping is None:
        return {}
    bindings = mapping.bindings if isinstance(mapping, Aes) else mapping
    return {
        aesthetic: _label_for(aesthetic, expression)
        for aesthetic, expression in bindings.items()
    }


def _label_for(aesthetic: str, expression: Any) -> str:
    if not isinstance(expression, str) or not expression.strip():
        return aesthetic
    return strip_stage(expression)


def strip_stage(expression: str) -> str:
    """Remove ``after_stat()``-style stage wrappers from an expression."""
    match = _STAGE_CALL.match(expression)
    if match:
        return match.group(1).strip()
    match = _DOTTED_STAT.match(expression.strip())
    if match:
        return match.group(1)
    return expression.strip()


def update_labels(plot: PlotSpec, labels: Mapping[str, str]) -> PlotSpec:
    """Merge ``labels`` into the plot; labels already present are kept."""
    plot.labels = defaults(plot.labels, labels)
    return plot


def update_guides(plot: PlotSpec, guides: Mapping[str, Any]) -> PlotSpec:
    """Merge ``guides`` into the plot; new entries replace old ones."""
    plot.guides = {**plot.guides, **guides}
    return plot
