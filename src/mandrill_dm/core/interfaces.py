"""Protocol interfaces for decoupling components."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import AddressField, Attachment


class AdapterError(ValueError):
    """Raised when a message cannot be mapped to a send API document."""


class MessageLike(Protocol):
    """Read-only view of a mail message consumed by the adapter."""

    @property
    def subject(self) -> str | None:
        """Return the decoded subject line."""
        raise NotImplementedError

    def address_field(self, name: str) -> AddressField | None:
        """Return the named address field (``from``/``to``/``cc``/``bcc``)."""
        raise NotImplementedError

    def text_body(self) -> str | None:
        """Return the decoded plain-text part, or ``None`` without one."""
        raise NotImplementedError

    def html_body(self) -> str | None:
        """Return the decoded HTML part, or ``None`` without one."""
        raise NotImplementedError

    def body(self) -> str:
        """Return the decoded body of the message as a whole."""
        raise NotImplementedError

    def attachments(self) -> Sequence[Attachment]:
        """Return attachments in message order."""
        raise NotImplementedError

    def header(self, name: str) -> str | None:
        """Return the value of a header, matched case-insensitively."""
        raise NotImplementedError


__all__ = ["AdapterError", "MessageLike"]
