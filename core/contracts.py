"""Canonical data contracts for the feed generation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


HEADLINE_MAX_CHARS = 140
MAX_TAGS = 10


def _utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Item(BaseModel):
    """One archived feed entry. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    subject: str = Field(validation_alias=AliasChoices("subject", "name"))
    headline: str = Field(max_length=HEADLINE_MAX_CHARS)
    content: str
    tags: List[str] = Field(default_factory=list, max_length=MAX_TAGS)
    created_at: str = Field(
        validation_alias=AliasChoices("createdAt", "created_at", "date"),
        serialization_alias="createdAt",
    )
    image: Optional[str] = None

    @field_validator("subject", "headline", "content", "created_at", mode="before")
    @classmethod
    def _non_empty_text(cls, value: Any) -> str:
        if isinstance(value, datetime):
            value = value.isoformat()
        text = str(value if value is not None else "").strip()
        if not text:
            raise ValueError("value is required")
        return text

    @field_validator("tags", mode="before")
    @classmethod
    def _clean_tags(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        cleaned = [str(tag).strip() for tag in value if tag is not None]
        return [tag for tag in cleaned if tag][:MAX_TAGS]

    @field_validator("image", mode="before")
    @classmethod
    def _optional_path(cls, value: Any) -> Optional[str]:
        text = str(value or "").strip()
        return text or None

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict with the archive's key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class GenerationOutcome:
    """Per-subject result: a finished item or a failure, never both."""

    subject: str
    item: Optional[Item] = None
    error_message: Optional[str] = None
    error_type: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.item is None) == (self.error_message is None):
            raise ValueError("GenerationOutcome needs exactly one of item or error_message")

    @property
    def ok(self) -> bool:
        return self.item is not None

    @classmethod
    def succeeded(cls, item: Item) -> "GenerationOutcome":
        return cls(subject=item.subject, item=item)

    @classmethod
    def failed(cls, subject: str, error: BaseException) -> "GenerationOutcome":
        message = str(error) or error.__class__.__name__
        return cls(subject=subject, error_message=message, error_type=error.__class__.__name__)


class ImagePolicyKind(str, Enum):
    """How image generation is gated during a run."""

    NONE = "none"
    PROBABILITY = "probability"
    FIXED_QUOTA = "fixed_quota"


class ImagePolicy(BaseModel):
    """Image gating policy: none, per-task probability, or a fixed per-run quota."""

    model_config = ConfigDict(frozen=True)

    kind: ImagePolicyKind = ImagePolicyKind.NONE
    chance: float = Field(default=0.0, ge=0.0, le=1.0)
    per_run: int = Field(default=0, ge=0)

    @classmethod
    def disabled(cls) -> "ImagePolicy":
        return cls(kind=ImagePolicyKind.NONE)

    @classmethod
    def with_probability(cls, chance: float) -> "ImagePolicy":
        return cls(kind=ImagePolicyKind.PROBABILITY, chance=chance)

    @classmethod
    def fixed_quota(cls, per_run: int) -> "ImagePolicy":
        return cls(kind=ImagePolicyKind.FIXED_QUOTA, per_run=per_run)


class PipelineConfig(BaseModel):
    """Explicit configuration handed to the pipeline entry point."""

    names_source: Path
    archive_path: Path
    images_dir: Path
    max_items: int = Field(default=200, ge=1)
    text_concurrency: int = Field(default=3, ge=1)
    image_policy: ImagePolicy = Field(default_factory=lambda: ImagePolicy.fixed_quota(1))
    image_size: str = "1024x1024"


class RunReport(BaseModel):
    """Counts reported at the end of a generation run."""

    started_at: str
    generated: int = 0
    added: int = 0
    skipped_duplicates: int = 0
    failed: int = 0
    failures: List[Dict[str, str]] = Field(default_factory=list)
    images_used: int = 0
    evicted: int = 0
    archive_size: int = 0


class BookingCreate(BaseModel):
    """Incoming booking payload."""

    model_config = ConfigDict(populate_by_name=True)

    driver: str
    date: str
    time_slot: str = Field(alias="timeSlot")
    location: str
    phone: str
    notes: str = ""

    @field_validator("driver", "date", "time_slot", "location", "phone", mode="before")
    @classmethod
    def _required(cls, value: Any) -> str:
        text = str(value if value is not None else "").strip()
        if not text:
            raise ValueError("value is required")
        return text

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, value: Any) -> str:
        return str(value or "")


class Booking(BookingCreate):
    """Stored booking record."""

    id: int
    created_at: str = Field(default_factory=_utc_iso, alias="createdAt")
    status: str = "pending"

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
