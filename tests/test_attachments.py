"""Tests for attachment encoding."""

from __future__ import annotations

import base64

from mandrill_dm.adapter.attachments import LINE_LENGTH, encode64, encode_attachments
from mandrill_dm.core.models import Attachment, MailMessage


def test_encode64_empty_input() -> None:
    assert encode64(b"") == ""


def test_encode64_short_input_has_trailing_newline() -> None:
    assert encode64(b"hello") == "aGVsbG8=\n"


def test_encode64_wraps_lines_at_sixty_characters() -> None:
    raw = bytes(range(256))

    encoded = encode64(raw)
    lines = encoded.split("\n")

    assert encoded.endswith("\n")
    assert lines[-1] == ""
    assert all(len(line) == LINE_LENGTH for line in lines[:-2])
    assert 0 < len(lines[-2]) <= LINE_LENGTH
    assert base64.b64decode(encoded) == raw


def test_encode64_exact_multiple_of_line_length() -> None:
    encoded = encode64(b"x" * 45)

    assert encoded.count("\n") == 1
    assert len(encoded) == LINE_LENGTH + 1


def test_encode_attachments_none_without_attachments() -> None:
    assert encode_attachments(MailMessage()) is None


def test_encode_attachments_maps_each_file() -> None:
    message = MailMessage(
        files=(
            Attachment(filename="a.txt", mime_type="text/plain", raw_bytes=b"alpha"),
            Attachment(
                filename="b.bin",
                mime_type="application/octet-stream",
                raw_bytes=b"\x00\x01",
            ),
        )
    )

    encoded = encode_attachments(message)

    assert encoded is not None
    assert [entry["name"] for entry in encoded] == ["a.txt", "b.bin"]
    assert [entry["type"] for entry in encoded] == [
        "text/plain",
        "application/octet-stream",
    ]
    assert base64.b64decode(encoded[0]["content"]) == b"alpha"
    assert base64.b64decode(encoded[1]["content"]) == b"\x00\x01"
