"""Parsing of the ``tags`` header."""

from __future__ import annotations

TAG_SEPARATOR = ", "


def parse_tags(raw: str | None, *, empty_tag_placeholder: bool = False) -> list[str]:
    """Split a ``", "`` separated tags header, keeping order and duplicates.

    Trailing empty entries are dropped, so an absent or empty header yields
    ``[]``. With ``empty_tag_placeholder`` set, that case yields ``[""]``
    instead, matching consumers built against a naive split.
    """
    text = raw or ""
    if not text:
        return [""] if empty_tag_placeholder else []

    tags = text.split(TAG_SEPARATOR)
    while tags and not tags[-1]:
        tags.pop()
    return tags


__all__ = ["TAG_SEPARATOR", "parse_tags"]
