"""Static tables describing header-driven send API fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mandrill_dm.core.interfaces import MessageLike


class FieldKind(str, Enum):
    """How a control header value is normalised."""

    TRI_STATE = "tri-state"
    STRING = "string"
    FLAG = "flag"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Header backing one output key and its normalisation rule."""

    header: str
    kind: FieldKind


def _spec(key: str, kind: FieldKind) -> FieldSpec:
    return FieldSpec(header=key.replace("_", "-"), kind=kind)


FIELD_TABLE: dict[str, FieldSpec] = {
    "auto_html": _spec("auto_html", FieldKind.TRI_STATE),
    "auto_text": _spec("auto_text", FieldKind.TRI_STATE),
    "bcc_address": _spec("bcc_address", FieldKind.STRING),
    "important": _spec("important", FieldKind.FLAG),
    "inline_css": _spec("inline_css", FieldKind.TRI_STATE),
    "merge": _spec("merge", FieldKind.TRI_STATE),
    "merge_language": _spec("merge_language", FieldKind.STRING),
    "preserve_recipients": _spec("preserve_recipients", FieldKind.TRI_STATE),
    "return_path_domain": _spec("return_path_domain", FieldKind.STRING),
    "signing_domain": _spec("signing_domain", FieldKind.STRING),
    "subaccount": _spec("subaccount", FieldKind.STRING),
    "track_clicks": _spec("track_clicks", FieldKind.TRI_STATE),
    "track_opens": _spec("track_opens", FieldKind.TRI_STATE),
    "tracking_domain": _spec("tracking_domain", FieldKind.STRING),
    "url_strip_qs": _spec("url_strip_qs", FieldKind.TRI_STATE),
    "view_content_link": _spec("view_content_link", FieldKind.TRI_STATE),
}

# Copied verbatim into the document's ``headers`` when present.
HEADER_ALLOW_LIST: tuple[str, ...] = (
    "In-Reply-To",
    "Reply-To",
    "References",
    "X-MC-BccAddress",
    "X-MC-GoogleAnalytics",
    "X-MC-GoogleAnalyticsCampaign",
    "X-MC-Important",
    "X-MC-InlineCSS",
    "X-MC-IpPool",
    "X-MC-PreserveRecipients",
    "X-MC-ReturnPathDomain",
    "X-MC-SigningDomain",
    "X-MC-Subaccount",
    "X-MC-Track",
    "X-MC-TrackingDomain",
    "X-MC-URLStripQS",
    "X-MC-ViewContentLink",
)


def normalize_value(raw: str | None, kind: FieldKind) -> bool | str | None:
    """Apply a field kind's rule to a raw header value.

    Only the exact string ``"true"`` is truthy; anything else present is
    ``False``. Tri-state and string fields map absence to ``None`` while
    flags treat absence as ``False``.
    """
    if kind is FieldKind.FLAG:
        return raw == "true"
    if raw is None:
        return None
    if kind is FieldKind.TRI_STATE:
        return raw == "true"
    return raw


def read_field(message: MessageLike, spec: FieldSpec) -> bool | str | None:
    """Look up and normalise a single control field."""
    return normalize_value(message.header(spec.header), spec.kind)


def harvest_headers(message: MessageLike) -> dict[str, str]:
    """Collect allow-listed headers that are present on the message."""
    headers: dict[str, str] = {}
    for name in HEADER_ALLOW_LIST:
        value = message.header(name)
        if value is not None:
            headers[name] = value
    return headers


__all__ = [
    "FIELD_TABLE",
    "FieldKind",
    "FieldSpec",
    "HEADER_ALLOW_LIST",
    "harvest_headers",
    "normalize_value",
    "read_field",
]
