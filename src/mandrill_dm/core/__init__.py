"""Core utilities for configuration, logging, and shared models."""

from .config import (
    AdapterSettings,
    AppSettings,
    LoggingSettings,
    MetadataMode,
    load_app_settings,
)
from .interfaces import AdapterError, MessageLike
from .logging import configure_logging
from .models import AddressField, Attachment, MailMessage, OutputDocument

__all__ = [
    "AdapterError",
    "AdapterSettings",
    "AddressField",
    "AppSettings",
    "Attachment",
    "LoggingSettings",
    "MailMessage",
    "MessageLike",
    "MetadataMode",
    "OutputDocument",
    "configure_logging",
    "load_app_settings",
]
