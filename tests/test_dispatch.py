"""Tests for adding each kind of component to a plot."""

import pandas as pd
import pytest

from plotweave.builders import (
    aes,
    coord_cartesian,
    coord_flip,
    facet_grid,
    facet_wrap,
    geom_histogram,
    geom_line,
    geom_point,
    guides,
    labs,
    scale_colour_manual,
    scale_x_continuous,
    theme,
    theme_grey,
)
from plotweave.components import Aes, Stat, Theme
from plotweave.dispatch import (
    ComponentKind,
    add_component,
    classify,
    register_component,
    unregister_component,
)
from plotweave.errors import FunctionComponentError, InvalidComponentError
from plotweave.plot import PlotSpec, new_plot


@pytest.fixture
def plot() -> PlotSpec:
    return new_plot(mapping=aes("displ", "hwy"))


@pytest.mark.parametrize(
    ("component", "kind"),
    [
        (None, ComponentKind.NULL),
        (pd.DataFrame({"a": [1]}), ComponentKind.DATA_FRAME),
        (theme(legend_position="none"), ComponentKind.THEME),
        (scale_x_continuous(), ComponentKind.SCALE),
        (coord_flip(), ComponentKind.COORD),
        (facet_wrap("class"), ComponentKind.FACET),
        (geom_point(), ComponentKind.LAYER),
        (aes(colour="class"), ComponentKind.MAPPING),
        (labs(title="Title"), ComponentKind.LABELS),
        (guides(colour="none"), ComponentKind.GUIDES),
        ([geom_point(), labs(x="x")], ComponentKind.LIST),
        ((geom_point(),), ComponentKind.LIST),
        (geom_point, ComponentKind.FUNCTION),
        (Theme, ComponentKind.FUNCTION),
        (42, ComponentKind.UNRECOGNIZED),
        ("geom_point", ComponentKind.UNRECOGNIZED),
        (Stat(), ComponentKind.UNRECOGNIZED),
    ],
)
def test_classify(component, kind):
    assert classify(component) is kind


def test_null_is_identity(plot):
    assert plot + None == plot


def test_null_is_identity_with_data_frame_data():
    plot = new_plot(pd.DataFrame({"displ": [1.8, 2.0], "hwy": [29, 31]}), aes("displ", "hwy"))

    assert plot + None == plot


def test_data_frame_replaces_data(plot):
    df = pd.DataFrame({"displ": [1.8], "hwy": [29]})
    other = pd.DataFrame({"displ": [2.0], "hwy": [31]})

    result = plot + df + other

    assert result.data is other
    assert plot.data is None


def test_layers_are_appended_in_order(plot):
    layers = [geom_point(), geom_line(), geom_point(size=3), geom_histogram()]

    result = plot
    for layer in layers:
        result = result + layer

    assert result.layers == layers
    assert plot.layers == []


def test_layer_adds_mapping_and_stat_labels():
    result = new_plot() + geom_histogram(aes(x="cty"))

    assert result.labels == {"x": "cty", "y": "count", "weight": "weight"}


def test_layer_labels_do_not_override_plot_labels(plot):
    result = plot + geom_histogram(aes(x="cty"))

    assert result.labels == {"x": "displ", "y": "hwy", "weight": "weight"}


def test_labels_existing_keys_win(plot):
    result = plot + labs(x="Displacement", title="Fuel economy")

    assert result.labels == {"x": "displ", "y": "hwy", "title": "Fuel economy"}


def test_guides_new_keys_win(plot):
    result = plot + guides(colour="legend") + guides(color="none", size="legend")

    assert result.guides == {"colour": "none", "size": "legend"}


def test_mapping_override_merges_bindings(plot):
    result = plot + aes(y="cty", colour="class")

    assert result.mapping.bindings == {"y": "cty", "colour": "class", "x": "displ"}
    assert result.labels == {"x": "displ", "y": "hwy", "colour": "class"}
    assert plot.mapping.bindings == {"x": "displ", "y": "hwy"}


def test_mapping_override_keeps_mapping_class(plot):
    class GroupedAes(Aes):
        pass

    result = plot + GroupedAes(bindings={"group": "drv"})

    assert isinstance(result.mapping, GroupedAes)
    assert classify(result.mapping) is ComponentKind.MAPPING
    assert result.mapping.bindings == {"group": "drv", "x": "displ", "y": "hwy"}


def test_scale_for_same_aesthetic_is_replaced(plot, notices):
    result = plot + scale_x_continuous(name="first") + scale_x_continuous(name="second")

    assert len(result.scales) == 1
    assert result.scales.get_scales("x").name == "second"
    assert len(notices) == 1
    assert notices[0].startswith("Scale for x is already present.")


def test_scales_for_different_aesthetics_accumulate(plot, notices):
    result = plot + scale_x_continuous() + scale_colour_manual(["red", "blue"])

    assert len(result.scales) == 2
    assert result.scales.has_scale("colour")
    assert notices == []


def test_theme_is_merged(plot):
    result = (
        plot
        + theme(axis_text={"size": 10, "colour": "red"})
        + theme(axis_text={"size": 12, "colour": None}, legend_position="none")
    )

    assert result.theme.elements == {
        "axis_text": {"size": 12, "colour": "red"},
        "legend_position": "none",
    }


def test_complete_theme_replaces_then_merges(plot):
    result = plot + theme(legend_position="top") + theme_grey() + theme(legend_position="bottom")

    assert result.theme.complete
    assert result.theme.elements["legend_position"] == "bottom"
    assert "text" in result.theme.elements


def test_replacing_default_coord_is_silent(plot, notices):
    result = plot + coord_flip()

    assert result.coordinates.name == "flip"
    assert notices == []


def test_replacing_explicit_coord_emits_notice(plot, notices):
    result = plot + coord_flip() + coord_cartesian(xlim=(0, 5))

    assert result.coordinates.name == "cartesian"
    assert result.coordinates.params["xlim"] == (0, 5)
    assert notices == [
        "Coordinate system already present. Adding new coordinate system, "
        "which will replace the existing one."
    ]


def test_facet_is_replaced(plot, notices):
    result = plot + facet_wrap("class") + facet_grid(rows="drv")

    assert result.facet.name == "grid"
    assert result.facet.params["rows"] == ["drv"]
    assert notices == []


def test_list_is_folded_left_to_right(plot):
    a, b, c = geom_point(), scale_x_continuous(), labs(title="Title")

    assert plot + [a, b, c] == plot + a + b + c


def test_list_is_folded_with_data_frame_data():
    plot = new_plot(pd.DataFrame({"displ": [1.8], "hwy": [29]}), aes("displ", "hwy"))
    a = geom_point()

    assert plot + [a] == plot + a


def test_plots_with_different_frames_are_not_equal():
    first = new_plot(pd.DataFrame({"displ": [1.8]}))
    second = new_plot(pd.DataFrame({"displ": [2.0]}))

    assert first != second
    assert first != "plot"
    assert first == new_plot(pd.DataFrame({"displ": [1.8]}))


def test_nested_lists_and_empty_list(plot):
    result = plot + [geom_point(), [labs(title="Title"), []], None]

    assert [layer.geom for layer in result.layers] == ["point"]
    assert result.labels["title"] == "Title"
    assert plot + [] == plot


def test_function_component_suggests_parentheses(plot):
    with pytest.raises(FunctionComponentError, match=r"as in `geom_point\(\)`"):
        plot + geom_point


def test_function_inside_list_is_named(plot):
    with pytest.raises(FunctionComponentError, match="`theme_grey`"):
        plot + [geom_point(), theme_grey]


def test_unrecognized_component_raises(plot):
    with pytest.raises(InvalidComponentError, match="Can't add `int` to a plot"):
        plot + 42


def test_add_component_modifies_the_given_plot(plot):
    clone = plot.clone()

    result = add_component(clone, geom_point(), "geom_point()")

    assert result is clone
    assert len(clone.layers) == 1
    assert plot.layers == []


class Caption:
    def __init__(self, text: str):
        self.text = text


def test_registered_component_handler():
    def add_caption(component, plot, name):
        plot.labels["caption"] = component.text
        return plot

    register_component(Caption, add_caption)
    try:
        result = new_plot() + Caption("Source: EPA")
    finally:
        unregister_component(Caption)

    assert result.labels == {"caption": "Source: EPA"}
    with pytest.raises(InvalidComponentError):
        new_plot() + Caption("Source: EPA")


def test_builtin_components_cannot_be_overridden():
    with pytest.raises(ValueError, match="Cannot override"):
        register_component(Theme, lambda component, plot, name: plot)


def test_serialized_components_validate_back_into_their_kind():
    from pydantic import TypeAdapter

    from plotweave.components import Component, Coord

    adapter = TypeAdapter(Component)
    component = adapter.validate_python(coord_flip().model_dump())

    assert isinstance(component, Coord)
    assert classify(component) is ComponentKind.COORD
    assert adapter.validate_python({"kind": "labels", "entries": {"x": "X"}}) == labs(x="X")
