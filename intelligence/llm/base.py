"""
Base Providers
Abstract text and image collaborators used by generation tasks
"""
from abc import ABC, abstractmethod


class BaseTextProvider(ABC):
    """
    Text generation collaborator.

    Implementations return the provider's raw text; it may embed a JSON
    object anywhere inside. Call failures surface as ``TransportError``.
    """

    def __init__(self, model: str, timeout: float = 60.0, **kwargs):
        self.model = model
        self.timeout = timeout
        self.extra_config = kwargs

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider name"""
        pass

    @abstractmethod
    async def request_text(self, prompt: str) -> str:
        """
        Generate text for one prompt.

        Args:
            prompt: full prompt text

        Returns:
            Raw response text
        """
        pass

    async def aclose(self) -> None:
        """Release underlying client resources (no-op by default)."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model}, provider={self.provider})"


class BaseImageProvider(ABC):
    """Image generation collaborator returning encoded image bytes."""

    def __init__(self, model: str, timeout: float = 120.0, **kwargs):
        self.model = model
        self.timeout = timeout
        self.extra_config = kwargs

    @property
    @abstractmethod
    def provider(self) -> str:
        pass

    @abstractmethod
    async def request_image(self, prompt: str, size: str) -> bytes:
        """
        Generate one image.

        Args:
            prompt: image prompt
            size: provider size string, e.g. "1024x1024"

        Returns:
            PNG bytes
        """
        pass

    async def aclose(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model}, provider={self.provider})"
