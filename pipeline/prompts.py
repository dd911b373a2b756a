"""Prompt builders and file-name helpers for generation tasks."""

from __future__ import annotations

import re
from typing import Sequence


_IMAGE_STYLE = (
    "blurry paparazzi-style illustration",
    "nighttime urban street",
    "street lights, cinematic",
    "grainy tabloid vibe",
    "anonymous human silhouette from behind",
    "face not visible, no identifiable person",
    "no text, no logos",
)

_SLUG_TRANSLATE = str.maketrans({"ä": "a", "ö": "o", "å": "a"})
_SLUG_RE = re.compile(r"[^a-z0-9]+")


def subject_prompt(subject: str) -> str:
    """Prompt asking the text provider for one JSON gossip item about ``subject``."""
    return f"""
Write a short, light-hearted tabloid gossip item about a person called {subject}.
Style: Finnish, playful and surprising, in the spirit of a weekly gossip magazine.

Allowed themes: partying, karaoke mishaps, lucky or unlucky bets, harmless
innuendo (never graphic).

Hard limits:
- No minors.
- No violence, drugs or sexual crimes.
- No graphic or pornographic content.
- No serious criminal accusations.
- No hate speech and no mocking of appearance.

Return ONLY valid JSON, nothing else:
{{
  "headline": "string",
  "content": "string",
  "tags": ["string", "string", "string"]
}}
""".strip()


def image_prompt(tags: Sequence[str]) -> str:
    """Anonymous illustration prompt hinting at up to three tags."""
    vibe = ", ".join(_IMAGE_STYLE)
    hints = [str(tag) for tag in (tags or [])][:3]
    extra = f"subtle theme hints: {', '.join(hints)}" if hints else "subtle theme hints: mystery, humor"
    return f"{vibe}. {extra}."


def slugify(text: str, max_len: int = 60) -> str:
    slug = str(text).lower().strip().translate(_SLUG_TRANSLATE)
    slug = _SLUG_RE.sub("_", slug).strip("_")
    return slug[:max_len]
