"""
Archive Store
JSON-file persistence for the newest-first item archive
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from pydantic import ValidationError

from core import Item
from .json_files import read_json, write_json_atomic


logger = logging.getLogger(__name__)


class JsonArchiveStore:
    """Loads and atomically overwrites the archive JSON array."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Item]:
        """
        Read the archive.

        A missing file, broken JSON or a non-array payload is an empty
        archive. Records that fail validation are dropped with a warning.
        """
        payload = read_json(self.path, fallback=[])
        if not isinstance(payload, list):
            logger.warning(f"Archive {self.path} is not a JSON array, treating as empty")
            return []

        items: List[Item] = []
        for idx, record in enumerate(payload):
            if not isinstance(record, dict):
                logger.warning(f"Skipping archive entry {idx}: not an object")
                continue
            try:
                items.append(Item.model_validate(record))
            except ValidationError as exc:
                logger.warning(f"Skipping archive entry {idx}: {exc.error_count()} validation error(s)")
        return items

    def save(self, items: Sequence[Item]) -> None:
        write_json_atomic(self.path, [item.to_record() for item in items])
        logger.debug(f"Archive saved: {self.path} ({len(items)} items)")


def load_subject_names(path: Path) -> List[str]:
    """Trimmed, non-empty names from a JSON array; anything else yields []."""
    payload = read_json(Path(path), fallback=[])
    if not isinstance(payload, list):
        logger.warning(f"Names source {path} is not a JSON array")
        return []
    names = [str(name).strip() for name in payload if name is not None]
    return [name for name in names if name]
