"""Core contracts and shared types."""

from .contracts import (
    HEADLINE_MAX_CHARS,
    MAX_TAGS,
    Booking,
    BookingCreate,
    GenerationOutcome,
    ImagePolicy,
    ImagePolicyKind,
    Item,
    PipelineConfig,
    RunReport,
)

__all__ = [
    "HEADLINE_MAX_CHARS",
    "MAX_TAGS",
    "Booking",
    "BookingCreate",
    "GenerationOutcome",
    "ImagePolicy",
    "ImagePolicyKind",
    "Item",
    "PipelineConfig",
    "RunReport",
]
