"""Interpretation of the ``metadata`` pseudo-header."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from mandrill_dm.core.config import MetadataMode
from mandrill_dm.core.interfaces import AdapterError

LOGGER = logging.getLogger(__name__)


class MetadataParseError(AdapterError):
    """Raised when the metadata header cannot be interpreted."""


@dataclass(frozen=True, slots=True)
class MetadataParsed:
    """Successfully decoded metadata object."""

    value: dict[str, Any]
    legacy: bool = False


@dataclass(frozen=True, slots=True)
class MetadataFailure:
    """Metadata that could not be decoded, with the reason."""

    reason: str


MetadataResult = MetadataParsed | MetadataFailure


def _decode_object(text: str) -> dict[str, Any]:
    value = json.loads(text)
    if not isinstance(value, dict):
        raise TypeError(f"expected a JSON object, got {type(value).__name__}")
    return value


def _parse_strict(raw: str) -> MetadataResult:
    try:
        return MetadataParsed(_decode_object(raw))
    except (TypeError, ValueError) as exc:
        return MetadataFailure(f"invalid JSON metadata: {exc}")


def _parse_legacy(raw: str) -> MetadataResult:
    # Hash#inspect style: {"key"=>"value"}. Values containing "=>" are mangled.
    try:
        return MetadataParsed(_decode_object(raw.replace("=>", ":")), legacy=True)
    except (TypeError, ValueError) as exc:
        return MetadataFailure(f"invalid legacy metadata: {exc}")


def parse_metadata(raw: str, mode: MetadataMode = MetadataMode.AUTO) -> MetadataResult:
    """Decode a metadata header value without raising.

    ``strict`` accepts JSON objects only. ``legacy`` replaces every ``=>``
    with ``:`` before decoding, which corrupts values that contain ``=>``.
    ``auto`` tries ``strict`` first and falls back to ``legacy``.
    """
    if mode is MetadataMode.STRICT:
        return _parse_strict(raw)
    if mode is MetadataMode.LEGACY:
        return _parse_legacy(raw)

    result = _parse_strict(raw)
    if isinstance(result, MetadataParsed):
        return result
    fallback = _parse_legacy(raw)
    if isinstance(fallback, MetadataParsed):
        LOGGER.warning(
            "Metadata header uses deprecated '=>' syntax; send a JSON object instead"
        )
        return fallback
    return result


__all__ = [
    "MetadataFailure",
    "MetadataParseError",
    "MetadataParsed",
    "MetadataResult",
    "parse_metadata",
]
