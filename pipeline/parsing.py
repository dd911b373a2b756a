"""Parsing and normalization of raw provider text into item fields."""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Dict, List, Optional

from core import HEADLINE_MAX_CHARS, MAX_TAGS
from utils.exceptions import EmptyField, MalformedResponse


@dataclass(frozen=True)
class ParseResult:
    """Outcome of JSON extraction: a parsed object or the reason it failed."""

    value: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    def unwrap(self, subject: Optional[str] = None) -> Dict[str, Any]:
        if self.value is None:
            raise MalformedResponse(self.error or "no JSON object in response", subject=subject)
        return self.value


@dataclass(frozen=True)
class ItemFields:
    headline: str
    content: str
    tags: List[str]


def extract_json_object(text: str) -> ParseResult:
    """
    Parse the slice between the first ``{`` and the last ``}``.

    Anything around the object (prose, code fences) is ignored. The slice must
    decode to a JSON object.
    """
    raw = str(text or "")
    start = raw.find("{")
    end = raw.rfind("}")
    if start < 0 or end < start:
        return ParseResult(error="no JSON object in response")

    try:
        parsed = json.loads(raw[start : end + 1])
    except json.JSONDecodeError as exc:
        return ParseResult(error=f"invalid JSON: {exc.msg} at char {exc.pos}")

    if not isinstance(parsed, dict):
        return ParseResult(error=f"expected JSON object, got {type(parsed).__name__}")
    return ParseResult(value=parsed)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_fields(payload: Dict[str, Any], *, subject: Optional[str] = None) -> ItemFields:
    """Trim and cap headline/content/tags. Raises EmptyField on blank headline or content."""
    headline = _text(payload.get("headline"))[:HEADLINE_MAX_CHARS].strip()
    content = _text(payload.get("content")).strip()

    raw_tags = payload.get("tags")
    tags: List[str] = []
    if isinstance(raw_tags, list):
        tags = [str(tag).strip() for tag in raw_tags if tag is not None]
        tags = [tag for tag in tags if tag][:MAX_TAGS]

    missing = [name for name, value in (("headline", headline), ("content", content)) if not value]
    if missing:
        raise EmptyField(f"empty {', '.join(missing)} for {subject or 'subject'}", subject=subject, fields=missing)

    return ItemFields(headline=headline, content=content, tags=tags)
