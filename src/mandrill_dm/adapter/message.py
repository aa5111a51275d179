"""Mapping of a mail message onto the send API message document."""

from __future__ import annotations

import json
import logging
from functools import cached_property
from typing import Any

from mandrill_dm.core.config import AdapterSettings
from mandrill_dm.core.interfaces import MessageLike
from mandrill_dm.core.models import EncodedAttachment, OutputDocument, Recipient

from .addresses import (
    RECIPIENT_FIELDS,
    ParsedAddress,
    combine_recipients,
    parse_address,
)
from .attachments import encode_attachments
from .fields import FIELD_TABLE, harvest_headers, read_field
from .metadata import MetadataFailure, MetadataParseError, parse_metadata
from .tags import parse_tags

LOGGER = logging.getLogger(__name__)


class MessageAdapter:
    """Build the send API document for a single message.

    Each property corresponds to one key of the document. An adapter serves
    one message; the parsed sender is cached on first use.

    Example:
        >>> adapter = MessageAdapter(message)
        >>> document = adapter.to_document()
    """

    def __init__(
        self, message: MessageLike, settings: AdapterSettings | None = None
    ) -> None:
        self._message = message
        self._settings = settings or AdapterSettings()

    def _field(self, key: str) -> Any:
        return read_field(self._message, FIELD_TABLE[key])

    @cached_property
    def _sender(self) -> ParsedAddress | None:
        field = self._message.address_field("from")
        if field is None or not field.formatted:
            return None
        return parse_address(field.formatted[0])

    @property
    def attachments(self) -> list[EncodedAttachment] | None:
        return encode_attachments(self._message)

    @property
    def auto_html(self) -> bool | None:
        return self._field("auto_html")

    @property
    def auto_text(self) -> bool | None:
        return self._field("auto_text")

    @property
    def bcc_address(self) -> str | None:
        return self._field("bcc_address")

    @property
    def from_email(self) -> str | None:
        sender = self._sender
        return sender.email if sender else None

    @property
    def from_name(self) -> str | None:
        sender = self._sender
        return sender.display_name if sender else None

    @property
    def headers(self) -> dict[str, str]:
        return harvest_headers(self._message)

    @property
    def html(self) -> str | None:
        return self._message.html_body()

    @property
    def important(self) -> bool:
        return self._field("important")

    @property
    def inline_css(self) -> bool | None:
        return self._field("inline_css")

    @property
    def merge(self) -> bool | None:
        return self._field("merge")

    @property
    def merge_language(self) -> str | None:
        return self._field("merge_language")

    @property
    def metadata(self) -> dict[str, Any] | None:
        """Decode the metadata header.

        Raises:
            MetadataParseError: If the header is present but undecodable.
        """
        raw = self._message.header("metadata")
        if raw is None:
            return None
        result = parse_metadata(raw, self._settings.metadata_mode)
        if isinstance(result, MetadataFailure):
            raise MetadataParseError(result.reason)
        return result.value

    @property
    def preserve_recipients(self) -> bool | None:
        return self._field("preserve_recipients")

    @property
    def return_path_domain(self) -> str | None:
        return self._field("return_path_domain")

    @property
    def signing_domain(self) -> str | None:
        return self._field("signing_domain")

    @property
    def subaccount(self) -> str | None:
        return self._field("subaccount")

    @property
    def subject(self) -> str | None:
        return self._message.subject

    @property
    def tags(self) -> list[str]:
        return parse_tags(
            self._message.header("tags"),
            empty_tag_placeholder=self._settings.empty_tag_placeholder,
        )

    @property
    def text(self) -> str:
        text = self._message.text_body()
        if text is not None:
            return text
        return self._message.body()

    @property
    def to(self) -> list[Recipient]:
        return combine_recipients(
            *(self._message.address_field(name) for name in RECIPIENT_FIELDS)
        )

    @property
    def track_clicks(self) -> bool | None:
        return self._field("track_clicks")

    @property
    def track_opens(self) -> bool | None:
        return self._field("track_opens")

    @property
    def tracking_domain(self) -> str | None:
        return self._field("tracking_domain")

    @property
    def url_strip_qs(self) -> bool | None:
        return self._field("url_strip_qs")

    @property
    def view_content_link(self) -> bool | None:
        return self._field("view_content_link")

    def to_document(self) -> OutputDocument:
        """Assemble the full document.

        Raises:
            AddressParseError: If any sender or recipient address is malformed.
            MetadataParseError: If the metadata header cannot be decoded.
        """
        document: OutputDocument = {
            "auto_html": self.auto_html,
            "auto_text": self.auto_text,
            "bcc_address": self.bcc_address,
            "from_email": self.from_email,
            "from_name": self.from_name,
            "headers": self.headers,
            "html": self.html,
            "important": self.important,
            "inline_css": self.inline_css,
            "merge": self.merge,
            "merge_language": self.merge_language,
            "metadata": self.metadata,
            "preserve_recipients": self.preserve_recipients,
            "return_path_domain": self.return_path_domain,
            "signing_domain": self.signing_domain,
            "subaccount": self.subaccount,
            "subject": self.subject,
            "tags": self.tags,
            "text": self.text,
            "to": self.to,
            "track_clicks": self.track_clicks,
            "track_opens": self.track_opens,
            "tracking_domain": self.tracking_domain,
            "url_strip_qs": self.url_strip_qs,
            "view_content_link": self.view_content_link,
        }

        attachments = self.attachments
        if attachments is not None:
            document["attachments"] = attachments

        LOGGER.debug(
            "Assembled document for %r: %d recipient(s), %d attachment(s)",
            document["subject"],
            len(document["to"]),
            len(attachments or ()),
        )
        return document

    def to_json(self, **dumps_kwargs: Any) -> str:
        """Serialise :meth:`to_document` with :func:`json.dumps`."""
        return json.dumps(self.to_document(), **dumps_kwargs)


__all__ = ["MessageAdapter"]
