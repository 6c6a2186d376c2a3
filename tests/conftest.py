import asyncio

import pytest

from layout_genai.models.pattern import Pattern, PunchlineSet, UserAsset


class FakeTextProvider:
    """Records prompts and answers with fixed variations, optionally after a delay."""

    def __init__(self, name="fake", variations=None, delay=0.0, error=None):
        self.name = name
        self.variations = variations if variations is not None else {}
        self.delay = delay
        self.error = error
        self.calls = []

    async def generate_variations(self, prompt, context_assets=None):
        self.calls.append((prompt, context_assets))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return dict(self.variations)


def make_pattern_data(**overrides):
    data = {
        "id": "test",
        "name": "Test",
        "description": "",
        "tags": [],
        "accentColor": "#fff",
        "background": {"type": "solid", "value": "#000", "overlayOpacity": 0.5},
        "textSlots": [
            {"id": "headline", "zone": "top", "align": "left", "fontFamily": "Inter", "fontSizeScale": 1.5, "color": "#fff", "fontWeight": "extrabold"},
            {"id": "subheadline", "zone": "center", "align": "left", "fontFamily": "Inter", "fontSizeScale": 1.0, "color": "#ccc", "fontWeight": "normal"},
            {"id": "cta", "zone": "bottom", "align": "right", "fontFamily": "Inter", "fontSizeScale": 0.8, "color": "#0f0", "fontWeight": "bold"},
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def ad_pattern():
    return Pattern.model_validate(make_pattern_data())


@pytest.fixture
def asset():
    return UserAsset(id="img-1", name="Beach", blob_url="blob:http://localhost/img-1", width=1200, height=800)


@pytest.fixture
def ad_punchlines():
    return PunchlineSet(headline="50% Off", cta="Shop Now", content_type="ad")


@pytest.fixture
def design_data():
    return {
        "version": "1.0",
        "canvas": {"width": 1080, "height": 1080},
        "background": {"type": "image", "src": "blob:1", "assetId": "img-1"},
        "overlay": {"type": "solid", "value": "#000", "opacity": 0.5},
        "elements": [
            {
                "id": "headline",
                "type": "text",
                "content": "Original",
                "style": {"color": "#fff", "fontSize": 72},
                "position": {"x": 80, "y": 80},
                "layer": 3,
            },
            {
                "id": "logo",
                "type": "image",
                "src": "asset-2",
                "transform": {"scale": 1, "rotation": 0, "opacity": 1},
                "position": {"x": 10, "y": 10},
                "layer": 5,
            },
            {
                "id": "badge",
                "type": "shape",
                "shapeType": "circle",
                "style": {"backgroundColor": "#f00"},
                "position": {"x": 900, "y": 900},
                "layer": 4,
            },
        ],
    }
