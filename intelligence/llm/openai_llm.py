"""
OpenAI Providers
Text via the Responses API, images via the Images API
"""
from typing import Optional
import base64
import binascii
import inspect
import logging

from openai import AsyncOpenAI, OpenAIError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from utils.exceptions import TransportError
from .base import BaseImageProvider, BaseTextProvider


logger = logging.getLogger(__name__)


class _OpenAIClientMixin:
    """Lazily built AsyncOpenAI client shared by both providers."""

    api_key: Optional[str]
    base_url: Optional[str]
    timeout: float
    _async_client: Optional[AsyncOpenAI]

    def _get_async_client(self) -> AsyncOpenAI:
        if self._async_client is None:
            self._async_client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._async_client

    async def aclose(self) -> None:
        client = self._async_client
        if client is None:
            return
        close_fn = getattr(client, "close", None)
        if callable(close_fn):
            maybe_awaitable = close_fn()
            if inspect.isawaitable(maybe_awaitable):
                await maybe_awaitable
        self._async_client = None


class OpenAITextProvider(_OpenAIClientMixin, BaseTextProvider):
    """OpenAI text generation (Responses API, ``output_text``)."""

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        **kwargs,
    ):
        super().__init__(model, timeout, **kwargs)
        self.api_key = api_key
        self.base_url = base_url
        self._async_client = None

    @property
    def provider(self) -> str:
        return "openai"

    @retry(
        retry=retry_if_exception_type(OpenAIError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _create_response(self, prompt: str) -> str:
        client = self._get_async_client()
        response = await client.responses.create(model=self.model, input=prompt)
        return getattr(response, "output_text", None) or ""

    async def request_text(self, prompt: str) -> str:
        try:
            text = await self._create_response(prompt)
        except OpenAIError as exc:
            raise TransportError(f"text request failed: {exc}", provider=self.provider, model=self.model) from exc
        logger.debug(f"[{self.provider}] raw output length: {len(text)}")
        return text


class OpenAIImageProvider(_OpenAIClientMixin, BaseImageProvider):
    """OpenAI image generation returning decoded PNG bytes."""

    def __init__(
        self,
        model: str = "gpt-image-1",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        **kwargs,
    ):
        super().__init__(model, timeout, **kwargs)
        self.api_key = api_key
        self.base_url = base_url
        self._async_client = None

    @property
    def provider(self) -> str:
        return "openai"

    @retry(
        retry=retry_if_exception_type(OpenAIError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _generate(self, prompt: str, size: str) -> Optional[str]:
        client = self._get_async_client()
        result = await client.images.generate(model=self.model, prompt=prompt, size=size)
        data = getattr(result, "data", None) or []
        return getattr(data[0], "b64_json", None) if data else None

    async def request_image(self, prompt: str, size: str) -> bytes:
        try:
            b64 = await self._generate(prompt, size)
        except OpenAIError as exc:
            raise TransportError(f"image request failed: {exc}", provider=self.provider, model=self.model) from exc
        if not b64:
            raise TransportError("image API did not return b64_json", provider=self.provider, model=self.model)
        try:
            return base64.b64decode(b64)
        except (binascii.Error, ValueError) as exc:
            raise TransportError(f"image payload is not valid base64: {exc}", provider=self.provider) from exc
