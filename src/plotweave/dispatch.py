"""Apply a single component to a plot according to its variant."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

import pandas as pd

from plotweave.components import Aes, Coord, Facet, Guides, Labels, Layer, Scale, Theme
from plotweave.config.logging import get_logger
from plotweave.diagnostics import notify
from plotweave.errors import FunctionComponentError, InvalidComponentError
from plotweave.labels import defaults, make_labels, update_guides, update_labels
from plotweave.plot import PlotSpec
from plotweave.theming import add_theme

logger = get_logger(__name__)

type ComponentHandler = Callable[[Any, PlotSpec, str], PlotSpec]

_custom_handlers: dict[type, ComponentHandler] = {}


class ComponentKind(StrEnum):
    NULL = "null"
    DATA_FRAME = "data_frame"
    THEME = "theme"
    SCALE = "scale"
    COORD = "coord"
    FACET = "facet"
    LAYER = "layer"
    MAPPING = "mapping"
    LABELS = "labels"
    GUIDES = "guides"
    LIST = "list"
    FUNCTION = "function"
    UNRECOGNIZED = "unrecognized"


_MODEL_KINDS: tuple[tuple[type, ComponentKind], ...] = (
    (Theme, ComponentKind.THEME),
    (Scale, ComponentKind.SCALE),
    (Coord, ComponentKind.COORD),
    (Facet, ComponentKind.FACET),
    (Layer, ComponentKind.LAYER),
    (Aes, ComponentKind.MAPPING),
    (Labels, ComponentKind.LABELS),
    (Guides, ComponentKind.GUIDES),
)


def classify(component: Any) -> ComponentKind:
    """Determine which variant ``component`` belongs to."""
    if component is None:
        return ComponentKind.NULL
    if isinstance(component, pd.DataFrame):
        return ComponentKind.DATA_FRAME
    for model, kind in _MODEL_KINDS:
        if isinstance(component, model):
            return kind
    if isinstance(component, (list, tuple)):
        return ComponentKind.LIST
    if callable(component):
        return ComponentKind.FUNCTION
    return ComponentKind.UNRECOGNIZED


def register_component(cls: type, handler: ComponentHandler) -> None:
    """Teach the dispatcher how to add instances of ``cls`` to a plot.

    The handler receives ``(component, plot, name)``, may modify ``plot`` and
    must return the resulting plot. Built-in variants cannot be overridden.
    """
    if not isinstance(cls, type):
        raise TypeError("Component handlers are registered per class.")
    if _builtin_kind(cls) is not ComponentKind.UNRECOGNIZED:
        raise ValueError(f"Cannot override how `{cls.__name__}` is added to a plot.")
    _custom_handlers[cls] = handler


def unregister_component(cls: type) -> None:
    _custom_handlers.pop(cls, None)


def _builtin_kind(cls: type) -> ComponentKind:
    if issubclass(cls, pd.DataFrame):
        return ComponentKind.DATA_FRAME
    for model, kind in _MODEL_KINDS:
        if issubclass(cls, model):
            return kind
    if issubclass(cls, (list, tuple)):
        return ComponentKind.LIST
    return ComponentKind.UNRECOGNIZED


def _find_handler(component: Any) -> ComponentHandler | None:
    for cls in type(component).__mro__:
        handler = _custom_handlers.get(cls)
        if handler is not None:
            return handler
    return None


def add_component(plot: PlotSpec, component: Any, component_name: str) -> PlotSpec:
    """Add ``component`` to ``plot`` and return the plot.

    ``plot`` is modified in place, so callers pass a clone.
    """
    kind = classify(component)
    if kind in (ComponentKind.FUNCTION, ComponentKind.UNRECOGNIZED):
        handler = _find_handler(component)
        if handler is not None:
            logger.debug("plot.add.custom", name=component_name)
            return handler(component, plot, component_name)

    logger.debug("plot.add.component", kind=kind.value, name=component_name)

    match kind:
        case ComponentKind.NULL:
            return plot
        case ComponentKind.DATA_FRAME:
            plot.data = component
            return plot
        case ComponentKind.FUNCTION:
            raise FunctionComponentError(
                f"Can't add `{component_name}` to a plot.\n"
                f"Did you forget to add parentheses, as in `{component_name}()`?"
            )
        case ComponentKind.THEME:
            plot.theme = add_theme(plot.theme, component)
            return plot
        case ComponentKind.SCALE:
            plot.scales.add(component)
            return plot
        case ComponentKind.LABELS:
            return update_labels(plot, component.entries)
        case ComponentKind.GUIDES:
            return update_guides(plot, component.entries)
        case ComponentKind.MAPPING:
            return _add_mapping(plot, component)
        case ComponentKind.COORD:
            if not plot.coordinates.default:
                notify(
                    "Coordinate system already present. Adding new coordinate "
                    "system, which will replace the existing one."
                )
            plot.coordinates = component
            return plot
        case ComponentKind.FACET:
            plot.facet = component
            return plot
        case ComponentKind.LIST:
            for item in component:
                plot = add_component(plot, item, _item_name(item, component_name))
            return plot
        case ComponentKind.LAYER:
            return _add_layer(plot, component)
        case ComponentKind.UNRECOGNIZED:
            raise InvalidComponentError(f"Can't add `{component_name}` to a plot.")


def _add_mapping(plot: PlotSpec, mapping: Aes) -> PlotSpec:
    # Keep the subclass of the incoming mapping on the merged result.
    merged = defaults(mapping.bindings, plot.mapping.bindings)
    plot.mapping = mapping.model_copy(update={"bindings": merged})
    labels = make_labels(mapping)
    return update_labels(plot, labels)


def _add_layer(plot: PlotSpec, layer: Layer) -> PlotSpec:
    plot.layers.append(layer)

    mapping = make_labels(layer.mapping)
    default = make_labels(layer.stat.default_aes)
    new_labels = defaults(mapping, default)
    plot.labels = defaults(plot.labels, new_labels)
    return plot


def describe_component(value: Any) -> str:
    """A short display name for ``value`` used in error messages."""
    if value is None:
        return "None"
    func = getattr(value, "func", None)
    if callable(func) and not isinstance(value, type):
        value = func
    for attr in ("__name__", "__qualname__"):
        name = getattr(value, attr, None)
        if isinstance(name, str):
            return name
    return type(value).__name__


def _item_name(item: Any, list_name: str) -> str:
    if classify(item) in (ComponentKind.FUNCTION, ComponentKind.UNRECOGNIZED):
        return describe_component(item)
    return list_name
