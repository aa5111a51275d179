"""Parsing of formatted addresses into send API recipient entries."""

from __future__ import annotations

from dataclasses import dataclass
from email import errors, policy

from mandrill_dm.core.interfaces import AdapterError
from mandrill_dm.core.models import AddressField, Recipient

RECIPIENT_FIELDS = ("to", "cc", "bcc")


class AddressParseError(AdapterError):
    """Raised when a formatted address cannot be parsed."""


@dataclass(frozen=True, slots=True)
class ParsedAddress:
    """Email address and optional display name of one mailbox."""

    email: str
    display_name: str | None


def parse_address(raw: str) -> ParsedAddress:
    """Parse a single RFC 5322 ``name-addr`` or ``addr-spec``.

    ``"Jane Doe <jane@example.com>"`` yields the display name ``"Jane Doe"``;
    a bare ``"jane@example.com"`` yields a display name of ``None``.

    Raises:
        AddressParseError: If the string is empty, holds more or fewer than
            one mailbox, or the mailbox lacks a local part or domain.
    """
    if not raw or not raw.strip():
        raise AddressParseError("Empty address")
    try:
        header = policy.default.header_factory("to", raw)
    except (errors.HeaderParseError, IndexError, TypeError, ValueError) as exc:
        raise AddressParseError(f"Unparseable address {raw!r}: {exc}") from exc

    addresses = header.addresses
    if len(addresses) != 1:
        raise AddressParseError(
            f"Expected exactly one address in {raw!r}, found {len(addresses)}"
        )
    if header.defects:
        raise AddressParseError(f"Malformed address {raw!r}: {header.defects[0]}")

    address = addresses[0]
    if not address.username or not address.domain:
        raise AddressParseError(f"Address {raw!r} is missing a local part or domain")
    return ParsedAddress(
        email=address.addr_spec,
        display_name=address.display_name or None,
    )


def hash_addresses(address_field: AddressField | None) -> list[Recipient] | None:
    """Convert an address field into recipient entries tagged with its name."""
    if address_field is None:
        return None

    field_type = address_field.name.lower()
    recipients: list[Recipient] = []
    for formatted in address_field.formatted:
        parsed = parse_address(formatted)
        recipients.append(
            {
                "email": parsed.email,
                "name": parsed.display_name,
                "type": field_type,
            }
        )
    return recipients


def combine_recipients(*address_fields: AddressField | None) -> list[Recipient]:
    """Flatten recipient lists in argument order, skipping absent fields."""
    combined: list[Recipient] = []
    for address_field in address_fields:
        recipients = hash_addresses(address_field)
        if recipients is not None:
            combined.extend(recipients)
    return combined


__all__ = [
    "AddressParseError",
    "ParsedAddress",
    "RECIPIENT_FIELDS",
    "combine_recipients",
    "hash_addresses",
    "parse_address",
]
