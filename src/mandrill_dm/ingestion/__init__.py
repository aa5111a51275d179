"""Ingestion of raw RFC822 payloads."""

from .parser import EmailMessageSource, EmailParser

__all__ = ["EmailMessageSource", "EmailParser"]
