from __future__ import annotations

from pydantic import ValidationError
import pytest

from core import GenerationOutcome, ImagePolicy, ImagePolicyKind, Item
from utils.exceptions import EmptyField


def _item(**overrides) -> Item:
    values = dict(subject="Aino", headline="Otsikko", content="Teksti", tags=["a"], created_at="2026-10-19T08:00:00.000Z")
    values.update(overrides)
    return Item(**values)


def test_item_is_frozen() -> None:
    item = _item()
    with pytest.raises(ValidationError):
        item.headline = "changed"


def test_item_rejects_long_headline_and_blank_fields() -> None:
    with pytest.raises(ValidationError):
        _item(headline="x" * 141)
    with pytest.raises(ValidationError):
        _item(content="   ")
    with pytest.raises(ValidationError):
        _item(subject="")


def test_item_record_uses_archive_keys() -> None:
    record = _item().to_record()
    assert record == {
        "subject": "Aino",
        "headline": "Otsikko",
        "content": "Teksti",
        "tags": ["a"],
        "createdAt": "2026-10-19T08:00:00.000Z",
    }
    assert _item(image="images/a.png").to_record()["image"] == "images/a.png"


def test_outcome_is_item_or_failure_never_both() -> None:
    item = _item()
    ok = GenerationOutcome.succeeded(item)
    failed = GenerationOutcome.failed("Eero", EmptyField("empty headline for Eero"))

    assert ok.ok and ok.subject == "Aino"
    assert not failed.ok
    assert failed.error_type == "EmptyField"
    assert failed.error_message == "empty headline for Eero"

    with pytest.raises(ValueError):
        GenerationOutcome(subject="x", item=item, error_message="boom")
    with pytest.raises(ValueError):
        GenerationOutcome(subject="x")


def test_image_policy_constructors() -> None:
    assert ImagePolicy.disabled().kind == ImagePolicyKind.NONE
    assert ImagePolicy.with_probability(0.25).chance == 0.25
    assert ImagePolicy.fixed_quota(2).per_run == 2
    with pytest.raises(ValidationError):
        ImagePolicy.with_probability(1.5)
    with pytest.raises(ValidationError):
        ImagePolicy.fixed_quota(-1)
