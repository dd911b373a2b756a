"""Merge freshly generated items into the bounded, newest-first archive."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Sequence

from core import GenerationOutcome, Item
from utils.exceptions import InvalidArgument
from .dedup import derive_key, key_set


logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """Merged archive plus what happened to each candidate."""

    items: List[Item]
    fresh: List[Item] = field(default_factory=list)
    duplicates: List[Item] = field(default_factory=list)
    evicted: int = 0


def merge_outcomes(
    outcomes: Sequence[GenerationOutcome],
    existing: Sequence[Item],
    max_items: int,
) -> MergeResult:
    """
    Prepend unseen items to ``existing`` and cap the result at ``max_items``.

    Outcomes are walked in order, so the first of several same-key items wins.
    Existing order is kept; the oldest entries fall off the end once the cap
    is reached.
    """
    if isinstance(max_items, bool) or not isinstance(max_items, int) or max_items < 1:
        raise InvalidArgument("max_items must be a positive integer", {"max_items": max_items})

    seen = key_set(existing)
    fresh: List[Item] = []
    duplicates: List[Item] = []

    for outcome in outcomes:
        if not outcome.ok:
            continue
        item = outcome.item
        key = derive_key(item)
        if key in seen:
            duplicates.append(item)
            logger.info(f"[SKIP] Duplicate: {item.subject} ({item.headline[:40]})")
            continue
        seen.add(key)
        fresh.append(item)
        logger.info(f"[ADD] Added: {item.subject} ({item.headline[:40]})")

    combined = fresh + list(existing)
    merged = combined[:max_items]
    evicted = len(combined) - len(merged)
    if evicted:
        logger.info(f"[MERGE] Archive cap {max_items} reached, evicted {evicted} oldest item(s)")

    return MergeResult(items=merged, fresh=fresh, duplicates=duplicates, evicted=evicted)


def merge_and_persist(
    outcomes: Sequence[GenerationOutcome],
    existing: Sequence[Item],
    max_items: int,
    store,
) -> MergeResult:
    """Merge, then overwrite the store with the merged archive."""
    result = merge_outcomes(outcomes, existing, max_items)
    store.save(result.items)
    return result
