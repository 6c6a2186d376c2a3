"""Tests for the HTTP layer."""

import pytest
from fastapi.testclient import TestClient

from conftest import FakeTextProvider, make_pattern_data
from layout_genai.api import app as app_module
from layout_genai.errors import ProviderError

BASE_PAYLOAD = {
    "backgroundImage": {"id": "img-1", "name": "Img", "blobUrl": "url", "width": 100, "height": 100},
    "punchlines": {"headline": "Test", "contentType": "ad"},
    "patterns": [make_pattern_data(id="p1", name="P1", promptHints="test")],
}


@pytest.fixture
def client():
    app_module.registry.clear()
    yield TestClient(app_module.app)
    app_module.registry.clear()


def test_list_patterns(client):
    res = client.get("/api/patterns")
    assert res.status_code == 200
    assert len(res.json()["patterns"]) == 6


def test_template_mode(client):
    res = client.post("/api/generate", json={**BASE_PAYLOAD, "useLLMCopyVariation": False})

    assert res.status_code == 200
    comps = res.json()["compositions"]
    assert len(comps) == 1
    assert comps[0]["generatedBy"] == "template"
    assert comps[0]["designJson"]["elements"][0]["content"] == "Test"


def test_missing_key_is_401(client):
    res = client.post("/api/generate", json={**BASE_PAYLOAD, "providerName": "openai", "useLLMCopyVariation": True})
    assert res.status_code == 401


def test_unsupported_provider_is_400(client):
    res = client.post(
        "/api/generate",
        headers={"x-api-key": "test"},
        json={**BASE_PAYLOAD, "providerName": "unsupported_provider", "useLLMCopyVariation": True},
    )
    assert res.status_code == 400


def test_missing_fields_is_400(client):
    res = client.post("/api/generate", json={})
    assert res.status_code == 400
    data = res.json()
    assert data["error"] == "Validation failed"
    paths = {issue["path"] for issue in data["details"]}
    assert {"backgroundImage", "punchlines", "patterns"} <= paths


def test_registered_provider_is_used(client):
    app_module.registry.register("openai", FakeTextProvider(name="openai", variations={"headline": "Fresh"}))

    res = client.post("/api/generate", json={**BASE_PAYLOAD, "providerName": "openai", "useLLMCopyVariation": True})

    assert res.status_code == 200
    comp = res.json()["compositions"][0]
    assert comp["generatedBy"] == "openai"
    assert comp["designJson"]["elements"][0]["content"] == "Fresh"


def test_provider_failure_is_500(client):
    app_module.registry.register("gemini", FakeTextProvider(error=ProviderError("gemini", "Incorrect API key")))

    res = client.post("/api/generate", json={**BASE_PAYLOAD, "providerName": "gemini", "useLLMCopyVariation": True})

    assert res.status_code == 500
    assert "Incorrect API key" in res.json()["error"]


class _DesignProvider:
    name = "openai"

    def __init__(self, design):
        self.design = design

    async def generate(self, prompt, base_design=None):
        return self.design


def test_prompt_mode(client, design_data):
    app_module.registry.register("openai", _DesignProvider(design_data))

    res = client.post("/api/generate/prompt", json={"prompt": "A cool ad", "count": 2, "providerName": "openai"})

    assert res.status_code == 200
    names = [c["name"] for c in res.json()["compositions"]]
    assert names == ["Variant 1", "Variant 2"]


def test_prompt_mode_count_limit(client):
    res = client.post(
        "/api/generate/prompt",
        headers={"x-api-key": "test"},
        json={"prompt": "A cool ad", "count": 50, "providerName": "openai"},
    )
    assert res.status_code == 400


def test_prompt_mode_short_prompt(client):
    res = client.post("/api/generate/prompt", json={"prompt": "hi", "count": 1, "providerName": "openai"})
    assert res.status_code == 400
    assert res.json()["details"][0]["path"] == "prompt"
