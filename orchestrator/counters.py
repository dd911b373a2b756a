"""Lock-guarded counters shared by concurrent generation tasks."""

from __future__ import annotations

import random
from threading import Lock
from typing import Optional

from core import ImagePolicy, ImagePolicyKind


class GuardedCounter:
    """Integer counter whose read-modify-write steps are atomic."""

    def __init__(self, start: int = 0, *, ceiling: Optional[int] = None) -> None:
        self._value = int(start)
        self._ceiling = ceiling
        self._lock = Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    @property
    def ceiling(self) -> Optional[int]:
        return self._ceiling

    def fetch_and_increment(self) -> int:
        """Return the current value and bump it by one."""
        with self._lock:
            current = self._value
            self._value += 1
            return current

    def try_increment(self) -> bool:
        """Increment only while below the ceiling. Returns True when incremented."""
        with self._lock:
            if self._ceiling is not None and self._value >= self._ceiling:
                return False
            self._value += 1
            return True

    def decrement(self) -> int:
        with self._lock:
            if self._value > 0:
                self._value -= 1
            return self._value


class ImageGate:
    """
    Run-wide image admission.

    ``try_acquire`` reserves a slot, ``commit`` records a saved image and
    ``release`` hands a reserved slot back after a failed attempt.
    """

    def __init__(self, policy: ImagePolicy, *, rng: Optional[random.Random] = None) -> None:
        self.policy = policy
        self._rng = rng or random.Random()
        ceiling = policy.per_run if policy.kind == ImagePolicyKind.FIXED_QUOTA else None
        self._reserved = GuardedCounter(ceiling=ceiling)
        self._used = GuardedCounter()

    @property
    def images_used(self) -> int:
        return self._used.value

    def try_acquire(self) -> bool:
        kind = self.policy.kind
        if kind == ImagePolicyKind.NONE:
            return False
        if kind == ImagePolicyKind.PROBABILITY:
            if self._rng.random() >= self.policy.chance:
                return False
            return self._reserved.try_increment()
        return self._reserved.try_increment()

    def commit(self) -> None:
        self._used.fetch_and_increment()

    def release(self) -> None:
        self._reserved.decrement()
