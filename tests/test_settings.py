from __future__ import annotations

from pathlib import Path

import pytest

from config import settings as settings_module
from config.settings import GeneratorSettings
from core import ImagePolicy
from intelligence.llm import OpenAIImageProvider, OpenAITextProvider, get_image_provider, get_text_provider
from utils.exceptions import ConfigurationError


@pytest.fixture
def fresh_settings(monkeypatch):
    for key in ("LLM_OPENAI_API_KEY", "LLM_TEXT_MODEL", "LLM_PROVIDER"):
        monkeypatch.delenv(key, raising=False)
    settings_module.get_settings.cache_clear()
    yield monkeypatch
    settings_module.get_settings.cache_clear()


def test_generator_defaults_build_pipeline_config() -> None:
    config = GeneratorSettings().to_pipeline_config()

    assert config.archive_path == Path("docs/news.json")
    assert config.images_dir == Path("docs/images")
    assert config.max_items == 200
    assert config.text_concurrency == 3
    assert config.image_policy == ImagePolicy.fixed_quota(1)
    assert config.image_size == "1024x1024"


def test_generator_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("GENERATOR_MAX_ITEMS", "50")
    monkeypatch.setenv("GENERATOR_IMAGE_POLICY", "probability")
    monkeypatch.setenv("GENERATOR_IMAGE_PROBABILITY", "0.5")

    config = GeneratorSettings().to_pipeline_config()

    assert config.max_items == 50
    assert config.image_policy == ImagePolicy.with_probability(0.5)


def test_disabled_image_policy() -> None:
    config = GeneratorSettings(image_policy="none").to_pipeline_config()
    assert config.image_policy == ImagePolicy.disabled()


def test_provider_factory_requires_api_key(fresh_settings) -> None:
    with pytest.raises(ConfigurationError):
        get_text_provider()


def test_provider_factory_builds_openai_providers(fresh_settings) -> None:
    fresh_settings.setenv("LLM_OPENAI_API_KEY", "sk-test")
    fresh_settings.setenv("LLM_TEXT_MODEL", "gpt-test")

    text = get_text_provider()
    image = get_image_provider()

    assert isinstance(text, OpenAITextProvider)
    assert text.model == "gpt-test"
    assert isinstance(image, OpenAIImageProvider)
    assert image.model == "gpt-image-1"


def test_unknown_provider_is_configuration_error(fresh_settings) -> None:
    fresh_settings.setenv("LLM_OPENAI_API_KEY", "sk-test")
    with pytest.raises(ConfigurationError):
        get_text_provider(provider="nope")
