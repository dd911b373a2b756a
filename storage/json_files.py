"""JSON file helpers shared by the archive and booking stores."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Any

from utils.exceptions import StorageError


logger = logging.getLogger(__name__)


def read_json(path: Path, fallback: Any = None) -> Any:
    """
    Read a JSON document.

    Missing files and undecodable content return ``fallback``; any other
    read error raises ``StorageError``.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return fallback
    except OSError as exc:
        raise StorageError(f"cannot read {path}: {exc}", {"path": str(path)}) from exc

    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(f"Ignoring unreadable JSON in {path}: {exc}")
        return fallback


def write_json_atomic(path: Path, data: Any) -> None:
    """Write pretty-printed JSON via a temp file and ``os.replace``."""
    path = Path(path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, TypeError, ValueError) as exc:
        raise StorageError(f"cannot write {path}: {exc}", {"path": str(path)}) from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
