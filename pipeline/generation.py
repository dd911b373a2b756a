"""Per-subject generation task: text item plus an optional gated image."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from core import GenerationOutcome, Item
from intelligence.llm.base import BaseImageProvider, BaseTextProvider
from orchestrator.counters import ImageGate
from utils.exceptions import GenerationError, TransportError
from .dedup import derive_key
from .parsing import extract_json_object, normalize_fields
from .prompts import image_prompt, slugify, subject_prompt


logger = logging.getLogger(__name__)


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    # "xb": never replace an image an archived item already points to
    with open(path, "xb") as fh:
        fh.write(data)


class GenerationTask:
    """
    Turns one subject name into a ``GenerationOutcome``.

    Never raises for per-subject problems: malformed output, empty fields and
    transport errors all come back as failed outcomes so sibling tasks keep
    running. Image failures only drop the image.
    """

    def __init__(
        self,
        text_provider: BaseTextProvider,
        *,
        run_started_at: str,
        image_gate: ImageGate,
        images_dir: Path,
        image_provider: Optional[BaseImageProvider] = None,
        image_size: str = "1024x1024",
        prompt_builder: Callable[[str], str] = subject_prompt,
        archived_keys: Iterable[str] = (),
    ) -> None:
        self.text_provider = text_provider
        self.image_provider = image_provider
        self.run_started_at = run_started_at
        self.image_gate = image_gate
        self.images_dir = Path(images_dir)
        self.image_size = image_size
        self.prompt_builder = prompt_builder
        self.archived_keys = frozenset(archived_keys)

    async def __call__(self, subject: str) -> GenerationOutcome:
        return await self.generate(subject)

    async def generate(self, subject: str) -> GenerationOutcome:
        logger.info(f"[GEN] Starting text generation for: {subject}")
        try:
            item = await self._generate_item(subject)
        except (GenerationError, TransportError) as exc:
            logger.warning(f"[GEN] Text generation failed for {subject}: {exc}")
            return GenerationOutcome.failed(subject, exc)
        except Exception as exc:
            logger.warning(f"[GEN] Unexpected provider error for {subject}: {exc!r}")
            wrapped = TransportError(str(exc) or exc.__class__.__name__, provider=self.text_provider.provider)
            return GenerationOutcome.failed(subject, wrapped)

        logger.info(f'[GEN] OK for {subject}: headline="{item.headline[:60]}" tags={len(item.tags)}')
        item = await self._attach_image(item)
        return GenerationOutcome.succeeded(item)

    async def _generate_item(self, subject: str) -> Item:
        raw = await self.text_provider.request_text(self.prompt_builder(subject))
        logger.debug(f"[GEN] Raw output length for {subject}: {len(raw or '')}")

        payload = extract_json_object(raw).unwrap(subject)
        fields = normalize_fields(payload, subject=subject)
        return Item(
            subject=subject,
            headline=fields.headline,
            content=fields.content,
            tags=fields.tags,
            created_at=self.run_started_at,
        )

    def _file_base(self, item: Item) -> str:
        day = item.created_at[:10]
        return f"{slugify(item.subject)}_{day}_{slugify(item.headline)[:20]}"

    async def _attach_image(self, item: Item) -> Item:
        if self.image_provider is None:
            return item
        # an archived item with this key already owns the image file name
        if derive_key(item) in self.archived_keys:
            logger.info(f"[IMG] Skipping image for archived duplicate: {item.subject}")
            return item
        if not self.image_gate.try_acquire():
            return item

        file_base = self._file_base(item)
        target = self.images_dir / f"{file_base}.png"
        logger.info(f"[IMG] Starting image generation: {file_base}")
        try:
            data = await self.image_provider.request_image(image_prompt(item.tags), self.image_size)
            await asyncio.to_thread(_write_bytes, target, data)
        except Exception as exc:
            self.image_gate.release()
            logger.warning(f"[IMG] Image generation failed for {item.subject}: {exc}")
            return item

        self.image_gate.commit()
        logger.info(f"[IMG] Saved image: {target}")
        return item.model_copy(update={"image": f"{self.images_dir.name}/{file_base}.png"})
