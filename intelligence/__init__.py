"""
Intelligence Module
External generative collaborators (text and image providers)
"""
from .llm import (
    BaseImageProvider,
    BaseTextProvider,
    OpenAIImageProvider,
    OpenAITextProvider,
    get_image_provider,
    get_text_provider,
)

__all__ = [
    "BaseImageProvider",
    "BaseTextProvider",
    "OpenAIImageProvider",
    "OpenAITextProvider",
    "get_image_provider",
    "get_text_provider",
]
