from __future__ import annotations

from core import Item
from pipeline.dedup import derive_key, key_set


def _item(subject: str, headline: str, content: str = "body", created_at: str = "2026-10-19T08:15:00.000Z") -> Item:
    return Item(subject=subject, headline=headline, content=content, tags=[], created_at=created_at)


def test_key_is_subject_day_headline_lowercased() -> None:
    assert derive_key(_item("Matti", "Big News")) == "matti__2026-10-19__big news"


def test_key_ignores_case() -> None:
    a = _item("Matti Meikäläinen", "Karaoke Ilta")
    b = _item("MATTI MEIKÄLÄINEN", "karaoke ilta")
    assert derive_key(a) == derive_key(b)


def test_key_ignores_content() -> None:
    a = _item("Liisa", "Voitti lotossa", content="first version")
    b = _item("Liisa", "Voitti lotossa", content="completely different body")
    assert derive_key(a) == derive_key(b)


def test_key_uses_day_granularity() -> None:
    morning = _item("Liisa", "Sama otsikko", created_at="2026-10-19T06:00:00.000Z")
    evening = _item("Liisa", "Sama otsikko", created_at="2026-10-19T22:59:59.999Z")
    next_day = _item("Liisa", "Sama otsikko", created_at="2026-10-20T00:00:01.000Z")

    assert derive_key(morning) == derive_key(evening)
    assert derive_key(morning) != derive_key(next_day)


def test_key_accepts_plain_and_legacy_mappings() -> None:
    item = _item("Pekka", "Otsikko")
    current = {"subject": "Pekka", "createdAt": "2026-10-19T01:00:00Z", "headline": "Otsikko"}
    legacy = {"name": "pekka", "date": "2026-10-19T23:00:00Z", "headline": "OTSIKKO"}

    assert derive_key(current) == derive_key(item)
    assert derive_key(legacy) == derive_key(item)


def test_key_set_collects_unique_keys() -> None:
    items = [_item("A", "x"), _item("a", "X"), _item("B", "x")]
    assert key_set(items) == {"a__2026-10-19__x", "b__2026-10-19__x"}
