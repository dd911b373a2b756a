"""Identity keys for archive deduplication."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Set, Union

from core import Item


KEY_SEPARATOR = "__"


def _field(record: Mapping[str, Any], *names: str) -> str:
    for name in names:
        value = record.get(name)
        if value is not None:
            return str(value)
    return ""


def derive_key(item: Union[Item, Mapping[str, Any]]) -> str:
    """
    Case-insensitive ``subject__day__headline`` key.

    ``day`` is the first 10 characters of the timestamp, so same-day items with
    the same subject and headline collapse into one. Content is ignored.
    """
    if isinstance(item, Item):
        subject, stamp, headline = item.subject, item.created_at, item.headline
    else:
        subject = _field(item, "subject", "name")
        stamp = _field(item, "createdAt", "created_at", "date")
        headline = _field(item, "headline")

    day = stamp[:10]
    return KEY_SEPARATOR.join([subject, day, headline]).lower()


def key_set(items: Iterable[Union[Item, Mapping[str, Any]]]) -> Set[str]:
    return {derive_key(item) for item in items}
