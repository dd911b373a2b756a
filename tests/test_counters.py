from __future__ import annotations

import random

from core import ImagePolicy
from orchestrator.counters import GuardedCounter, ImageGate


def test_fetch_and_increment_hands_out_each_value_once() -> None:
    counter = GuardedCounter()
    assert [counter.fetch_and_increment() for _ in range(4)] == [0, 1, 2, 3]
    assert counter.value == 4


def test_try_increment_respects_ceiling() -> None:
    counter = GuardedCounter(ceiling=2)
    assert counter.try_increment() is True
    assert counter.try_increment() is True
    assert counter.try_increment() is False
    assert counter.value == 2

    counter.decrement()
    assert counter.try_increment() is True


def test_decrement_never_goes_negative() -> None:
    counter = GuardedCounter()
    assert counter.decrement() == 0


def test_disabled_policy_never_admits() -> None:
    gate = ImageGate(ImagePolicy.disabled())
    assert not any(gate.try_acquire() for _ in range(10))


def test_fixed_quota_admits_up_to_quota_and_release_reopens_slot() -> None:
    gate = ImageGate(ImagePolicy.fixed_quota(2))
    assert [gate.try_acquire() for _ in range(4)] == [True, True, False, False]

    gate.release()
    assert gate.try_acquire() is True
    assert gate.try_acquire() is False


def test_zero_quota_admits_nothing() -> None:
    gate = ImageGate(ImagePolicy.fixed_quota(0))
    assert gate.try_acquire() is False


def test_probability_policy_uses_rng() -> None:
    always = ImageGate(ImagePolicy.with_probability(1.0), rng=random.Random(1))
    never = ImageGate(ImagePolicy.with_probability(0.0), rng=random.Random(1))

    assert all(always.try_acquire() for _ in range(20))
    assert not any(never.try_acquire() for _ in range(20))


def test_probability_policy_is_reproducible_with_seed() -> None:
    first = ImageGate(ImagePolicy.with_probability(0.5), rng=random.Random(42))
    second = ImageGate(ImagePolicy.with_probability(0.5), rng=random.Random(42))

    assert [first.try_acquire() for _ in range(30)] == [second.try_acquire() for _ in range(30)]


def test_images_used_counts_commits_only() -> None:
    gate = ImageGate(ImagePolicy.fixed_quota(3))
    gate.try_acquire()
    gate.try_acquire()
    gate.commit()
    gate.release()
    assert gate.images_used == 1
