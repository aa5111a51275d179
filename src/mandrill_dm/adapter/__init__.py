"""Field-mapping engine turning mail messages into send API documents."""

from mandrill_dm.core.interfaces import AdapterError

from .addresses import AddressParseError, ParsedAddress, parse_address
from .attachments import encode64
from .fields import FIELD_TABLE, HEADER_ALLOW_LIST, FieldKind, FieldSpec
from .message import MessageAdapter
from .metadata import (
    MetadataFailure,
    MetadataParseError,
    MetadataParsed,
    parse_metadata,
)
from .tags import parse_tags

__all__ = [
    "AdapterError",
    "AddressParseError",
    "FIELD_TABLE",
    "FieldKind",
    "FieldSpec",
    "HEADER_ALLOW_LIST",
    "MessageAdapter",
    "MetadataFailure",
    "MetadataParseError",
    "MetadataParsed",
    "ParsedAddress",
    "encode64",
    "parse_address",
    "parse_metadata",
    "parse_tags",
]
