from __future__ import annotations

from collections.abc import Mapping, Sequence

from layout_genai.models.design import ImageElement, ShapeElement, TextElement

Element = TextElement | ImageElement | ShapeElement


def merge_copy_variations(elements: Sequence[Element], variations: Mapping[str, str]) -> list[Element]:
    """
    Replace the content of text elements whose id has a variation.

    Style, position and layer are untouched; non-text elements and
    unmatched ids pass through as-is. Keys that match no element are ignored.
    """
    merged: list[Element] = []
    for el in elements:
        if isinstance(el, TextElement) and el.id in variations:
            merged.append(el.model_copy(update={"content": variations[el.id]}))
        else:
            merged.append(el)
    return merged
