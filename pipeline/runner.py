"""Pipeline entry point: names in, merged archive and run report out."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
import random
from typing import Callable, List, Optional

from core import GenerationOutcome, PipelineConfig, RunReport
from intelligence.llm.base import BaseImageProvider, BaseTextProvider
from orchestrator.counters import ImageGate
from orchestrator.limiter import run_limited
from storage.archive_store import JsonArchiveStore, load_subject_names
from utils.exceptions import InvalidArgument
from .dedup import key_set
from .generation import GenerationTask
from .merge import merge_and_persist


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _iso(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def run_pipeline(
    config: PipelineConfig,
    text_provider: BaseTextProvider,
    image_provider: Optional[BaseImageProvider] = None,
    *,
    store: Optional[JsonArchiveStore] = None,
    now: Optional[Callable[[], datetime]] = None,
    rng: Optional[random.Random] = None,
) -> RunReport:
    """
    Generate items for every configured subject and merge them into the archive.

    Per-subject failures are reported, not raised. An empty name list, a bad
    limit and archive I/O errors abort the run.
    """
    store = store or JsonArchiveStore(config.archive_path)

    names: List[str] = await asyncio.to_thread(load_subject_names, config.names_source)
    if not names:
        raise InvalidArgument("names source is empty or invalid", {"path": str(config.names_source)})
    logger.info(f"[INFO] {config.names_source} entries: {len(names)}")

    existing = await asyncio.to_thread(store.load)
    logger.info(f"[INFO] existing items: {len(existing)}")

    started_at = _iso((now or _utcnow)())
    gate = ImageGate(config.image_policy, rng=rng)
    task = GenerationTask(
        text_provider,
        run_started_at=started_at,
        image_gate=gate,
        images_dir=config.images_dir,
        image_provider=image_provider,
        image_size=config.image_size,
        archived_keys=key_set(existing),
    )

    outcomes: List[GenerationOutcome] = await run_limited(names, config.text_concurrency, task)

    failures = [outcome for outcome in outcomes if not outcome.ok]
    for failure in failures:
        logger.warning(f"Text gen failed for {failure.subject}: {failure.error_message}")

    result = await asyncio.to_thread(merge_and_persist, outcomes, existing, config.max_items, store)

    report = RunReport(
        started_at=started_at,
        generated=len(outcomes) - len(failures),
        added=len(result.fresh),
        skipped_duplicates=len(result.duplicates),
        failed=len(failures),
        failures=[
            {"subject": f.subject, "error": f.error_message or "", "type": f.error_type or ""}
            for f in failures
        ],
        images_used=gate.images_used,
        evicted=result.evicted,
        archive_size=len(result.items),
    )
    logger.info(
        f"Added {report.added} items. Skipped {report.skipped_duplicates} duplicate(s). "
        f"Failed {report.failed}. Total: {report.archive_size}. Images used: {report.images_used}"
    )
    return report


def run_pipeline_sync(
    config: PipelineConfig,
    text_provider: BaseTextProvider,
    image_provider: Optional[BaseImageProvider] = None,
    **kwargs,
) -> RunReport:
    """Blocking wrapper that also closes the provider clients."""

    async def _run() -> RunReport:
        try:
            return await run_pipeline(config, text_provider, image_provider, **kwargs)
        finally:
            await text_provider.aclose()
            if image_provider is not None:
                await image_provider.aclose()

    return asyncio.run(_run())
