"""Tests for the DesignJSON document model and its validation."""

import math

import pytest

from layout_genai.errors import SchemaValidationError
from layout_genai.models.design import GradientBackground, ImageBackground, SolidBackground, TextElement
from layout_genai.validation import validate_design


class TestDesignValidation:
    def test_valid_document(self, design_data):
        design = validate_design(design_data)

        assert design.version == "1.0"
        assert design.canvas.width == 1080
        assert isinstance(design.background, ImageBackground)
        assert design.background.asset_id == "img-1"
        assert design.overlay.opacity == 0.5
        assert [el.type for el in design.elements] == ["text", "image", "shape"]

    def test_empty_elements_allowed(self, design_data):
        design_data["elements"] = []
        assert validate_design(design_data).elements == []

    def test_overlay_is_optional(self, design_data):
        del design_data["overlay"]
        assert validate_design(design_data).overlay is None

    def test_rejects_other_version(self, design_data):
        design_data["version"] = "2.0"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert exc_info.value.paths == ["version"]

    @pytest.mark.parametrize("width", [0, -10, math.inf, math.nan])
    def test_canvas_must_be_positive_and_finite(self, design_data, width):
        design_data["canvas"]["width"] = width
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert "canvas.width" in exc_info.value.paths

    def test_rejects_unknown_element_type(self, design_data):
        design_data["elements"][0]["type"] = "video"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert any(p.startswith("elements.0") for p in exc_info.value.paths)

    def test_rejects_unknown_background_type(self, design_data):
        design_data["background"] = {"type": "video", "src": "x"}
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert any(p.startswith("background") for p in exc_info.value.paths)

    def test_reports_every_violation(self, design_data):
        design_data["canvas"]["height"] = -1
        design_data["overlay"]["opacity"] = 1.5
        design_data["elements"][0]["layer"] = 0
        design_data["elements"][1]["transform"]["opacity"] = -0.1

        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)

        paths = exc_info.value.paths
        assert "canvas.height" in paths
        assert "overlay.opacity" in paths
        assert any(p.startswith("elements.0") and p.endswith("layer") for p in paths)
        assert any(p.startswith("elements.1") and p.endswith("opacity") for p in paths)

    def test_inactive_variant_fields_are_rejected(self, design_data):
        design_data["background"] = {"type": "solid", "value": "#000", "src": "blob:1"}
        with pytest.raises(SchemaValidationError):
            validate_design(design_data)

    def test_duplicate_element_ids_rejected(self, design_data):
        design_data["elements"][1]["id"] = "headline"
        with pytest.raises(SchemaValidationError, match="duplicate element id"):
            validate_design(design_data)

    def test_not_a_mapping(self):
        with pytest.raises(SchemaValidationError):
            validate_design("not a document")

    def test_error_to_dict(self, design_data):
        design_data["version"] = "0.9"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        payload = exc_info.value.to_dict()
        assert payload["code"] == "VALIDATION_ERROR"
        assert payload["details"]["issues"][0]["path"] == "version"


class TestBackgrounds:
    def test_gradient_default_direction(self, design_data):
        design_data["background"] = {"type": "gradient", "from": "#000", "to": "#fff"}
        bg = validate_design(design_data).background
        assert isinstance(bg, GradientBackground)
        assert bg.from_ == "#000"
        assert bg.direction == 135

    def test_solid(self, design_data):
        design_data["background"] = {"type": "solid", "value": "#123456"}
        assert isinstance(validate_design(design_data).background, SolidBackground)


class TestWireFormat:
    def test_round_trip(self, design_data):
        design = validate_design(design_data)
        wire = design.to_wire()

        assert wire["background"] == {"type": "image", "src": "blob:1", "assetId": "img-1"}
        assert "textAlign" not in wire["elements"][0]["style"]
        assert wire["elements"][2]["shapeType"] == "circle"
        assert validate_design(wire) == design

    def test_gradient_serializes_from_key(self, design_data):
        design_data["background"] = {"type": "gradient", "from": "#000", "to": "#fff", "direction": 90}
        wire = validate_design(design_data).to_wire()
        assert wire["background"] == {"type": "gradient", "from": "#000", "to": "#fff", "direction": 90}

    def test_paint_order_by_layer(self, design_data):
        design = validate_design(design_data)
        assert [el.id for el in design.paint_order()] == ["headline", "badge", "logo"]

    def test_models_are_immutable(self, design_data):
        el = validate_design(design_data).elements[0]
        assert isinstance(el, TextElement)
        with pytest.raises(Exception):
            el.content = "changed"


class TestStrictNumbers:
    @pytest.mark.parametrize("width", ["1080", True])
    def test_canvas_size_must_be_a_number(self, design_data, width):
        design_data["canvas"]["width"] = width
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert exc_info.value.paths == ["canvas.width"]

    @pytest.mark.parametrize("layer", ["3", 3.0, True])
    def test_layer_must_be_an_integer(self, design_data, layer):
        design_data["elements"][0]["layer"] = layer
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert exc_info.value.paths == ["elements.0.text.layer"]

    def test_position_rejects_numeric_strings(self, design_data):
        design_data["elements"][2]["position"]["x"] = "900"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        assert exc_info.value.paths == ["elements.2.shape.position.x"]

    def test_ints_accepted_for_float_fields(self, design_data):
        design = validate_design(design_data)
        assert design.canvas.width == 1080.0


class TestTextPosition:
    def test_zone_hint_accepted(self, design_data):
        design_data["elements"][0]["position"] = {"x": 80, "y": 80, "zone": "top"}
        design = validate_design(design_data)
        assert design.elements[0].position.zone == "top"
        assert design.to_wire()["elements"][0]["position"] == {"x": 80.0, "y": 80.0, "zone": "top"}

    def test_zone_is_optional(self, design_data):
        assert validate_design(design_data).elements[0].position.zone is None

    def test_zone_only_on_text_elements(self, design_data):
        design_data["elements"][1]["position"]["zone"] = "top"
        with pytest.raises(SchemaValidationError):
            validate_design(design_data)


class TestDuplicateIdsWithOtherErrors:
    def test_duplicates_reported_alongside_field_errors(self, design_data):
        design_data["elements"][1]["id"] = "headline"
        design_data["canvas"]["height"] = -1

        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)

        paths = exc_info.value.paths
        assert "canvas.height" in paths
        assert "elements" in paths
        dupes = [i for i in exc_info.value.issues if i.path == "elements"]
        assert dupes[0].message == "duplicate element id(s): headline"

    def test_duplicates_reported_once_when_only_error(self, design_data):
        design_data["elements"][1]["id"] = "headline"
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_design(design_data)
        messages = [i.message for i in exc_info.value.issues]
        assert sum("duplicate element id" in m for m in messages) == 1
