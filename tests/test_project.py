"""Tests for Composition and Project."""

import time

from layout_genai.models.project import Composition, Project
from layout_genai.validation import validate_design


def _composition(design_data, name="One"):
    return Composition(name=name, design_json=validate_design(design_data))


def test_composition_defaults(design_data):
    comp = _composition(design_data)
    assert comp.generated_by == "template"
    assert comp.id
    assert comp.created_at.tzinfo is not None


def test_composition_to_dict(design_data):
    data = _composition(design_data).to_dict()
    assert data["name"] == "One"
    assert data["generatedBy"] == "template"
    assert data["designJson"]["version"] == "1.0"
    assert data["designJson"]["background"]["assetId"] == "img-1"


def test_add_and_remove_refresh_updated_at(design_data):
    project = Project(name="Summer")
    first = project.updated_at

    time.sleep(0.001)
    a = _composition(design_data, "A")
    project.add_composition(a)
    after_add = project.updated_at
    assert after_add > first

    b, c = _composition(design_data, "B"), _composition(design_data, "C")
    project.add_compositions([b, c])
    assert [x.name for x in project.compositions] == ["A", "B", "C"]
    assert project.get_composition(b.id) is b

    time.sleep(0.001)
    project.remove_composition(a.id)
    assert [x.name for x in project.compositions] == ["B", "C"]
    assert project.updated_at > after_add


def test_project_to_dict(design_data):
    project = Project(name="Summer")
    project.add_composition(_composition(design_data))
    data = project.to_dict()
    assert data["name"] == "Summer"
    assert len(data["compositions"]) == 1
    assert data["updatedAt"] >= data["createdAt"]
