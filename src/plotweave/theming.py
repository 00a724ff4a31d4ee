"""Theme merging."""

from __future__ import annotations

from typing import Any

from plotweave.components import Theme
from plotweave.errors import InvalidComponentError


def add_theme(t1: Theme | None, t2: Any, t2name: str | None = None) -> Theme:
    """Merge ``t2`` into ``t1``.

    Elements only present in ``t1`` survive. Elements present in both are
    merged property by property, with ``t2`` winning wherever it sets a value.
    A complete ``t2`` replaces ``t1`` outright.
    """
    if t2 is None:
        return t1 if t1 is not None else Theme()
    if not isinstance(t2, Theme):
        name = t2name or type(t2).__name__
        raise InvalidComponentError(f"Can't add `{name}` to a theme object.")
    if t1 is None or t2.complete:
        return t2

    elements = dict(t1.elements)
    for key, new in t2.elements.items():
        elements[key] = merge_element(new, elements.get(key))

    return Theme(elements=elements, complete=t1.complete)


def merge_element(new: Any, old: Any) -> Any:
    """Combine one theme element; unset properties of ``new`` inherit from ``old``."""
    if old is None or new is None:
        return new
    if not isinstance(new, dict) or not isinstance(old, dict):
        return new
    merged = dict(old)
    merged.update({key: value for key, value in new.items() if value is not None})
    return merged
