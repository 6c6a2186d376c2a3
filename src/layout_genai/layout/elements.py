from __future__ import annotations

from layout_genai.layout.placement import font_size, placement, text_layer
from layout_genai.layout.slots import SlotMapping
from layout_genai.models.design import TextElement, TextStyle


def build_text_element(mapping: SlotMapping, index: int) -> TextElement:
    slot = mapping.slot
    return TextElement(
        id=mapping.slot_id,
        content=mapping.text,
        style=TextStyle(
            font_family=slot.font_family,
            font_size=font_size(slot.font_size_scale),
            color=slot.color,
            font_weight=slot.font_weight,
        ),
        position=placement(slot.zone, slot.align),
        layer=text_layer(index),
    )


def build_text_elements(mappings: list[SlotMapping]) -> list[TextElement]:
    return [build_text_element(m, i) for i, m in enumerate(mappings)]
