"""Concurrency primitives for generation runs."""

from .counters import GuardedCounter, ImageGate
from .limiter import run_limited

__all__ = [
    "GuardedCounter",
    "ImageGate",
    "run_limited",
]
