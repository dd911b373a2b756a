from __future__ import annotations

import pytest

from pipeline.parsing import extract_json_object, normalize_fields
from utils.exceptions import EmptyField, MalformedResponse


def test_extracts_object_surrounded_by_prose() -> None:
    raw = 'Sure! Here it is:\n```json\n{"headline": "H", "content": "C", "tags": ["a"]}\n```\nEnjoy.'
    result = extract_json_object(raw)

    assert result.ok
    assert result.value == {"headline": "H", "content": "C", "tags": ["a"]}


def test_nested_braces_use_first_and_last() -> None:
    raw = 'x {"headline": "H", "meta": {"k": 1}, "content": "C"} y'
    result = extract_json_object(raw)
    assert result.value["meta"] == {"k": 1}


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "no json here at all",
        "} reversed {",
        "{not: valid json}",
        '{"headline": "H"} trailing } garbage {',
    ],
)
def test_unparsable_text_is_typed_failure(raw: str) -> None:
    result = extract_json_object(raw)

    assert not result.ok
    assert result.error
    with pytest.raises(MalformedResponse):
        result.unwrap("Matti")


def test_array_without_braces_is_malformed() -> None:
    assert not extract_json_object("[1, 2, 3]").ok


def test_object_inside_array_is_still_extracted() -> None:
    result = extract_json_object('[{"headline": "H", "content": "C"}]')
    assert result.value == {"headline": "H", "content": "C"}


def test_normalize_trims_and_caps_fields() -> None:
    payload = {
        "headline": "  " + "h" * 200,
        "content": "  body text  ",
        "tags": [" one ", "", "  ", None, "two", 3] + [f"t{i}" for i in range(20)],
    }
    fields = normalize_fields(payload, subject="Matti")

    assert fields.headline == "h" * 138
    assert fields.content == "body text"
    assert fields.tags[:3] == ["one", "two", "3"]
    assert len(fields.tags) == 10


def test_headline_is_truncated_before_trimming() -> None:
    payload = {"headline": "x" * 139 + "   tail", "content": "c"}
    assert normalize_fields(payload).headline == "x" * 139


def test_non_list_tags_become_empty() -> None:
    fields = normalize_fields({"headline": "h", "content": "c", "tags": "a,b"})
    assert fields.tags == []


@pytest.mark.parametrize(
    "payload",
    [
        {"headline": "   ", "content": "body"},
        {"headline": "ok", "content": ""},
        {"content": "body"},
        {"headline": None, "content": None},
    ],
)
def test_empty_required_fields_raise(payload: dict) -> None:
    with pytest.raises(EmptyField):
        normalize_fields(payload, subject="Matti")
