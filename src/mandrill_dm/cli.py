"""Command-line entry point for mandrill-dm."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mandrill_dm.adapter import AdapterError, MessageAdapter
from mandrill_dm.core import AppSettings, configure_logging, load_app_settings
from mandrill_dm.ingestion import EmailParser

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Render RFC822 messages as Mandrill send API documents"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="info",
        choices=["info", "render"],
        help="Operation to execute.",
    )
    parser.add_argument(
        "message_file",
        nargs="?",
        type=Path,
        default=None,
        help="Message (.eml) to render; required by the render command.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation for the rendered JSON (default: compact).",
    )
    return parser


def execute(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the requested CLI command and return the exit status."""
    if args.command == "info":
        print(f"Metadata mode: {settings.adapter.metadata_mode.value}")
        print(f"Empty tag placeholder: {settings.adapter.empty_tag_placeholder}")
        print(f"Log level: {settings.logging.level}")
        return 0
    if args.message_file is None:
        print("render requires a message file", file=sys.stderr)
        return 2
    return _run_render(settings, args.message_file, indent=args.indent)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    return execute(args, settings)


def _run_render(settings: AppSettings, path: Path, *, indent: int | None) -> int:
    """Parse a message file and print its document."""
    try:
        payload = path.read_bytes()
    except OSError as exc:
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        return 1

    message = EmailParser().parse(payload)
    adapter = MessageAdapter(message, settings.adapter)
    try:
        rendered = adapter.to_json(indent=indent)
    except AdapterError as exc:
        LOGGER.debug("Rendering %s failed", path, exc_info=True)
        print(f"Render failed: {exc}", file=sys.stderr)
        return 1

    print(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
