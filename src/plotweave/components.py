"""Pydantic models for plot components."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _ComponentModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Proto(_ComponentModel):
    """Low-level building block that lives inside a component, never on its own."""

    def __add__(self, other: Any) -> Any:
        from plotweave.operators import add

        return add(self, other)


class Stat(Proto):
    name: str = "identity"
    default_aes: dict[str, Any] = Field(default_factory=dict)


class Aes(_ComponentModel):
    """Aesthetic bindings, ordered by insertion."""

    kind: Literal["mapping"] = "mapping"
    bindings: dict[str, Any] = Field(default_factory=dict)


class Theme(_ComponentModel):
    kind: Literal["theme"] = "theme"
    elements: dict[str, Any] = Field(default_factory=dict)
    complete: bool = False

    def __add__(self, other: Any) -> Any:
        from plotweave.operators import add

        return add(self, other)


class Scale(_ComponentModel):
    kind: Literal["scale"] = "scale"
    aesthetics: tuple[str, ...]
    scale_type: str = "continuous"
    name: str | None = None
    params: dict[str, Any] = Field(default_factory=dict)


class Coord(_ComponentModel):
    kind: Literal["coord"] = "coord"
    name: str = "cartesian"
    # True only for the coordinate system a plot starts with.
    default: bool = False
    params: dict[str, Any] = Field(default_factory=dict)


class Facet(_ComponentModel):
    kind: Literal["facet"] = "facet"
    name: str = "null"
    params: dict[str, Any] = Field(default_factory=dict)


class Layer(_ComponentModel):
    kind: Literal["layer"] = "layer"
    geom: str
    stat: Stat = Field(default_factory=Stat)
    mapping: Aes | None = None
    data: Any = None
    inherit_aes: bool = True
    params: dict[str, Any] = Field(default_factory=dict)


class Labels(_ComponentModel):
    kind: Literal["labels"] = "labels"
    entries: dict[str, str] = Field(default_factory=dict)


class Guides(_ComponentModel):
    kind: Literal["guides"] = "guides"
    entries: dict[str, Any] = Field(default_factory=dict)


Component = Annotated[
    Aes | Theme | Scale | Coord | Facet | Layer | Labels | Guides,
    Field(discriminator="kind"),
]
