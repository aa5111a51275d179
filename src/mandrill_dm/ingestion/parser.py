"""Utilities for exposing parsed RFC822 messages to the adapter."""

from __future__ import annotations

from collections.abc import Iterable
from email import policy
from email.message import EmailMessage
from email.parser import BytesParser

from ..core.models import AddressField, Attachment

_ADDRESS_HEADERS = {"from": "From", "to": "To", "cc": "Cc", "bcc": "Bcc"}


class EmailMessageSource:
    """Read-only view over a stdlib :class:`EmailMessage`.

    Body parts are only looked up inside multipart messages; the content of a
    single-part message is reachable through :meth:`body` alone.
    """

    def __init__(self, message: EmailMessage) -> None:
        self._message = message

    @property
    def subject(self) -> str | None:
        subject = self._message.get("Subject")
        return str(subject) if subject is not None else None

    def address_field(self, name: str) -> AddressField | None:
        header_name = _ADDRESS_HEADERS.get(name.lower())
        if header_name is None:
            return None
        values = self._message.get_all(header_name)
        if not values:
            return None
        return AddressField(
            name=header_name,
            formatted=tuple(_format_addresses(values)),
        )

    def text_body(self) -> str | None:
        return _find_part(self._message, "text/plain")

    def html_body(self) -> str | None:
        return _find_part(self._message, "text/html")

    def body(self) -> str:
        if not self._message.is_multipart():
            content = _decode_text(self._message)
            return content if content is not None else ""
        for part in _body_leaves(self._message):
            content = _decode_text(part)
            if content is not None:
                return content
        return ""

    def attachments(self) -> tuple[Attachment, ...]:
        return tuple(_collect_attachments(self._message))

    def header(self, name: str) -> str | None:
        value = self._message.get(name)
        return str(value) if value is not None else None


class EmailParser:
    """Convert raw email payloads into adapter-ready message sources."""

    def __init__(self) -> None:
        """Prepare internal parser instance."""
        self._parser = BytesParser(policy=policy.default)

    def parse(self, payload: bytes) -> EmailMessageSource:
        """Parse raw RFC822 bytes into an :class:`EmailMessageSource`."""
        message = self._parser.parsebytes(payload)
        return EmailMessageSource(message)  # type: ignore[arg-type]


def _format_addresses(values: Iterable[object]) -> Iterable[str]:
    for value in values:
        addresses = getattr(value, "addresses", None)
        if addresses is None:
            yield str(value)
            continue
        for address in addresses:
            yield str(address)


def _is_attachment(part: EmailMessage) -> bool:
    return part.is_attachment() or part.get_filename() is not None


def _leaves(message: EmailMessage) -> Iterable[EmailMessage]:
    for part in message.walk():
        if not part.is_multipart():
            yield part


def _body_leaves(message: EmailMessage) -> Iterable[EmailMessage]:
    for part in _leaves(message):
        if not _is_attachment(part):
            yield part


def _decode_text(part: EmailMessage) -> str | None:
    try:
        content = part.get_content()
    except LookupError:
        return None
    return content if isinstance(content, str) else None


def _find_part(message: EmailMessage, content_type: str) -> str | None:
    if not message.is_multipart():
        return None
    for part in _body_leaves(message):
        if part.get_content_type() == content_type:
            return _decode_text(part)
    return None


def _collect_attachments(message: EmailMessage) -> Iterable[Attachment]:
    # Searches the whole tree; unnamed inline parts stay part of the body.
    if not message.is_multipart():
        return
    for part in _leaves(message):
        if not _is_attachment(part):
            continue
        payload = part.get_payload(decode=True) or b""
        yield Attachment(
            filename=part.get_filename(),
            mime_type=part.get_content_type(),
            raw_bytes=payload,
        )


__all__ = ["EmailMessageSource", "EmailParser"]
