"""
Placement policy for the fixed 1080x1080 reference canvas.

Coordinates do not scale with other canvas sizes.
"""
from __future__ import annotations

import math

from layout_genai.models.design import TextPosition

REFERENCE_CANVAS_WIDTH = 1080
REFERENCE_CANVAS_HEIGHT = 1080

ZONE_Y: dict[str, int] = {"top": 80, "center": 480, "bottom": 880}
ALIGN_X: dict[str, int] = {"left": 80, "center": 540, "right": 900}

BASE_FONT_SIZE = 48

# Layers 0-2 are reserved for background, overlay and future use.
BASE_TEXT_LAYER = 3


def placement(zone: str, align: str) -> TextPosition:
    try:
        return TextPosition(x=ALIGN_X[align], y=ZONE_Y[zone])
    except KeyError as exc:
        raise ValueError(f"unknown zone/align pair: {zone!r}/{align!r}") from exc


def font_size(font_size_scale: float) -> int:
    # Halves round up; a vanishing scale still yields a 1px glyph.
    return max(1, math.floor(BASE_FONT_SIZE * font_size_scale + 0.5))


def text_layer(index: int) -> int:
    return BASE_TEXT_LAYER + index
