"""Remote-first generation with local fallback."""

from unittest.mock import MagicMock

from app.generation.artifact import Artifact, GenerationResult
from app.inference.config import ProviderConfig
from app.llm.remote_generator import RemoteGenerator
from app.pipeline.controller import GenerationPipeline
from app.templates import get_template_registry

REGISTRY = get_template_registry()
BUTTON = REGISTRY.get("button").artifact
CAR = REGISTRY.get("car").artifact
NAVBAR = REGISTRY.get("navbar").artifact


def _offline_pipeline():
    factory = MagicMock()
    remote = RemoteGenerator(
        [
            ProviderConfig(name="openai", base_url="https://openai.test/v1", api_key=None),
            ProviderConfig(name="openrouter", base_url="https://openrouter.test/api/v1", api_key=None),
        ],
        client_factory=factory,
    )
    return GenerationPipeline(remote=remote), factory


def test_create_button_without_context():
    pipeline, factory = _offline_pipeline()
    result = pipeline.run("create a button")

    assert result.source == "template"
    assert result.artifact == BUTTON
    factory.assert_not_called()


def test_new_request_ignores_context():
    pipeline, _ = _offline_pipeline()
    result = pipeline.run("create a car", NAVBAR)

    assert result.artifact == CAR


def test_refinement_of_context():
    pipeline, _ = _offline_pipeline()
    result = pipeline.run("make it bigger", BUTTON)

    assert result.source == "refinement"
    assert result.artifact.jsx == BUTTON.jsx
    assert "font-size: 20px" in result.artifact.css


def test_no_context_falls_back_to_template_matching():
    pipeline, _ = _offline_pipeline()

    assert pipeline.run("a navigation bar").artifact == NAVBAR
    assert pipeline.run("make it bigger").artifact == BUTTON


def test_remote_success_skips_local_path():
    remote = MagicMock()
    remote.generate.return_value = GenerationResult.success(
        Artifact(jsx="<x />", css="x {}"), source="openai"
    )
    pipeline = GenerationPipeline(remote=remote)

    result = pipeline.run("make it bigger", BUTTON)

    assert result.source == "openai"
    assert result.artifact.jsx == "<x />"
    remote.generate.assert_called_once_with("make it bigger", BUTTON)


def test_remote_fallback_uses_local_path():
    remote = MagicMock()
    remote.generate.return_value = GenerationResult.fallback("openai: invalid response")
    pipeline = GenerationPipeline(remote=remote)

    assert pipeline.run("rounded please", BUTTON).source == "refinement"


def test_pipeline_without_remote():
    assert GenerationPipeline().run("build a menu").artifact == NAVBAR
