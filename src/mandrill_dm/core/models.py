"""Core domain models used across the application."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NotRequired, TypedDict


@dataclass(frozen=True, slots=True)
class AddressField:
    """A named address header holding one or more formatted addresses."""

    name: str
    formatted: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to an outgoing message."""

    filename: str | None
    mime_type: str
    raw_bytes: bytes


# pylint: disable=too-many-instance-attributes
@dataclass(slots=True)
class MailMessage:
    """In-memory message exposing the fields consumed by the adapter.

    ``text`` and ``html`` are the decoded body parts when the message carries
    them explicitly; ``raw_body`` is the decoded body of the message as a
    whole and is only consulted when no text part exists.
    """

    sender: AddressField | None = None
    to: AddressField | None = None
    cc: AddressField | None = None
    bcc: AddressField | None = None
    subject: str | None = None
    text: str | None = None
    html: str | None = None
    raw_body: str = ""
    files: tuple[Attachment, ...] = ()
    headers: Mapping[str, str] = field(default_factory=dict)

    def address_field(self, name: str) -> AddressField | None:
        """Return the ``from``, ``to``, ``cc`` or ``bcc`` field."""
        lookup = {
            "from": self.sender,
            "to": self.to,
            "cc": self.cc,
            "bcc": self.bcc,
        }
        return lookup.get(name.lower())

    def text_body(self) -> str | None:
        return self.text

    def html_body(self) -> str | None:
        return self.html

    def body(self) -> str:
        return self.raw_body

    def attachments(self) -> tuple[Attachment, ...]:
        return self.files

    def header(self, name: str) -> str | None:
        """Return a header value, matching names case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class Recipient(TypedDict):
    """Send API recipient entry."""

    email: str
    name: str | None
    type: str


class EncodedAttachment(TypedDict):
    """Send API attachment entry."""

    name: str | None
    type: str
    content: str


class OutputDocument(TypedDict):
    """Send API message document."""

    auto_html: bool | None
    auto_text: bool | None
    bcc_address: str | None
    from_email: str | None
    from_name: str | None
    headers: dict[str, str]
    html: str | None
    important: bool
    inline_css: bool | None
    merge: bool | None
    merge_language: str | None
    metadata: dict[str, Any] | None
    preserve_recipients: bool | None
    return_path_domain: str | None
    signing_domain: str | None
    subaccount: str | None
    subject: str | None
    tags: list[str]
    text: str | None
    to: list[Recipient]
    track_clicks: bool | None
    track_opens: bool | None
    tracking_domain: str | None
    url_strip_qs: bool | None
    view_content_link: bool | None
    attachments: NotRequired[list[EncodedAttachment]]


__all__ = [
    "AddressField",
    "Attachment",
    "EncodedAttachment",
    "MailMessage",
    "OutputDocument",
    "Recipient",
]
