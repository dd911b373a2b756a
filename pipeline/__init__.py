"""Generation pipeline stages: parse, generate, dedup, merge."""

from .dedup import derive_key, key_set
from .generation import GenerationTask
from .merge import MergeResult, merge_and_persist, merge_outcomes
from .parsing import ItemFields, ParseResult, extract_json_object, normalize_fields
from .prompts import image_prompt, slugify, subject_prompt
from .runner import run_pipeline, run_pipeline_sync

__all__ = [
    "GenerationTask",
    "ItemFields",
    "MergeResult",
    "ParseResult",
    "derive_key",
    "extract_json_object",
    "image_prompt",
    "key_set",
    "merge_and_persist",
    "merge_outcomes",
    "normalize_fields",
    "run_pipeline",
    "run_pipeline_sync",
    "slugify",
    "subject_prompt",
]
