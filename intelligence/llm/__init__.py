"""
LLM Module
Text and image provider abstractions
"""
from .base import BaseImageProvider, BaseTextProvider
from .openai_llm import OpenAIImageProvider, OpenAITextProvider
from .factory import get_image_provider, get_text_provider

__all__ = [
    "BaseImageProvider",
    "BaseTextProvider",
    "OpenAIImageProvider",
    "OpenAITextProvider",
    "get_image_provider",
    "get_text_provider",
]
