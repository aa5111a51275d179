"""Base64 encoding of message attachments."""

from __future__ import annotations

import base64

from mandrill_dm.core.interfaces import MessageLike
from mandrill_dm.core.models import EncodedAttachment

LINE_LENGTH = 60


def encode64(raw: bytes) -> str:
    """Encode bytes as MIME base64 with 60 character, newline-terminated lines."""
    encoded = base64.b64encode(raw).decode("ascii")
    return "".join(
        encoded[start : start + LINE_LENGTH] + "\n"
        for start in range(0, len(encoded), LINE_LENGTH)
    )


def encode_attachments(message: MessageLike) -> list[EncodedAttachment] | None:
    """Return send API attachment entries, or ``None`` when there are none."""
    attachments = message.attachments()
    if not attachments:
        return None
    return [
        {
            "name": attachment.filename,
            "type": attachment.mime_type,
            "content": encode64(attachment.raw_bytes),
        }
        for attachment in attachments
    ]


__all__ = ["LINE_LENGTH", "encode64", "encode_attachments"]
