"""
Provider Factory
Build text/image providers from settings
"""
from typing import Optional
import logging

from utils.exceptions import ConfigurationError
from .base import BaseImageProvider, BaseTextProvider
from .openai_llm import OpenAIImageProvider, OpenAITextProvider


logger = logging.getLogger(__name__)


DEFAULT_TEXT_MODELS = {
    "openai": "gpt-4o-mini",
}

DEFAULT_IMAGE_MODELS = {
    "openai": "gpt-image-1",
}


def _api_key(settings, override: Optional[str]) -> str:
    api_key = override or settings.openai_api_key
    if not api_key:
        raise ConfigurationError("LLM_OPENAI_API_KEY is not set", {"provider": settings.provider})
    return api_key


def get_text_provider(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    **kwargs,
) -> BaseTextProvider:
    """
    Build the text provider.

    Reads defaults from ``LLMSettings`` (``.env`` aware); arguments override.

    Example:
        provider = get_text_provider()
        provider = get_text_provider(model="gpt-4o")
    """
    from config import get_llm_settings

    settings = get_llm_settings()
    provider = provider or settings.provider
    model = model or settings.text_model or DEFAULT_TEXT_MODELS.get(provider)

    if provider == "openai":
        return OpenAITextProvider(
            model=model,
            api_key=_api_key(settings, kwargs.pop("api_key", None)),
            base_url=kwargs.pop("base_url", None) or settings.base_url,
            timeout=kwargs.pop("timeout", settings.timeout),
            **kwargs,
        )
    raise ConfigurationError(f"Unsupported text provider: {provider}")


def get_image_provider(
    provider: Optional[str] = None,
    model: Optional[str] = None,
    **kwargs,
) -> BaseImageProvider:
    """Build the image provider (same settings as the text provider)."""
    from config import get_llm_settings

    settings = get_llm_settings()
    provider = provider or settings.provider
    model = model or settings.image_model or DEFAULT_IMAGE_MODELS.get(provider)

    if provider == "openai":
        return OpenAIImageProvider(
            model=model,
            api_key=_api_key(settings, kwargs.pop("api_key", None)),
            base_url=kwargs.pop("base_url", None) or settings.base_url,
            timeout=kwargs.pop("image_timeout", settings.image_timeout),
            **kwargs,
        )
    raise ConfigurationError(f"Unsupported image provider: {provider}")
