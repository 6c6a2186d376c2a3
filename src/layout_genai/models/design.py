"""
DesignJSON: the canonical, renderer-agnostic layout document.

Background and element variants are tagged unions on `type`; consumers
must treat `version` as a compatibility gate.
"""
from __future__ import annotations

from collections import Counter
from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from layout_genai.models.base import Finite, NonEmptyStr, PositiveFinite, PositiveInt, UnitInterval, WireModel

DESIGN_JSON_VERSION = "1.0"

FontWeight = Literal["normal", "bold", "extrabold"]
TextAlign = Literal["left", "center", "right"]
OverlayType = Literal["solid", "gradient", "texture"]


class Canvas(WireModel):
    width: PositiveFinite
    height: PositiveFinite


class Position(WireModel):
    x: Finite
    y: Finite


class TextPosition(Position):
    # Optional qualitative hint carried alongside the resolved coordinates.
    zone: str | None = None


# Backgrounds


class SolidBackground(WireModel):
    type: Literal["solid"] = "solid"
    value: str


class GradientBackground(WireModel):
    type: Literal["gradient"] = "gradient"
    from_: str = Field(alias="from")
    to: str
    direction: Finite = 135


class ImageBackground(WireModel):
    type: Literal["image"] = "image"
    src: str
    asset_id: str | None = None


Background = Annotated[
    Union[SolidBackground, GradientBackground, ImageBackground],
    Field(discriminator="type"),
]


class Overlay(WireModel):
    type: OverlayType
    value: str
    opacity: UnitInterval


# Elements


class TextStyle(WireModel):
    font_size: PositiveFinite | None = None
    font_family: str | None = None
    color: str | None = None
    font_weight: FontWeight | None = None
    text_align: TextAlign | None = None


class Transform(WireModel):
    scale: Finite = 1
    rotation: Finite = 0
    opacity: UnitInterval = 1


class ShapeStyle(WireModel):
    background_color: str | None = None


class TextElement(WireModel):
    id: NonEmptyStr
    type: Literal["text"] = "text"
    content: str
    style: TextStyle
    position: TextPosition
    layer: PositiveInt


class ImageElement(WireModel):
    id: NonEmptyStr
    type: Literal["image"] = "image"
    src: str
    transform: Transform
    position: Position
    layer: PositiveInt


class ShapeElement(WireModel):
    id: NonEmptyStr
    type: Literal["shape"] = "shape"
    shape_type: Literal["rectangle", "circle", "triangle"]
    style: ShapeStyle
    position: Position
    layer: PositiveInt


CanvasElement = Annotated[
    Union[TextElement, ImageElement, ShapeElement],
    Field(discriminator="type"),
]


class DesignJSON(WireModel):
    version: Literal["1.0"]
    canvas: Canvas
    background: Background
    overlay: Overlay | None = None
    elements: list[CanvasElement]

    @model_validator(mode="after")
    def _element_ids_unique(self) -> "DesignJSON":
        counts = Counter(el.id for el in self.elements)
        dupes = sorted(i for i, n in counts.items() if n > 1)
        if dupes:
            raise ValueError(f"duplicate element id(s): {', '.join(dupes)}")
        return self

    def paint_order(self) -> list[TextElement | ImageElement | ShapeElement]:
        # sorted() is stable, so equal layers keep list order.
        return sorted(self.elements, key=lambda el: el.layer)
