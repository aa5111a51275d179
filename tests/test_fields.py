"""Tests for control field normalisation and header harvesting."""

from __future__ import annotations

import pytest

from mandrill_dm.adapter.fields import (
    FIELD_TABLE,
    HEADER_ALLOW_LIST,
    FieldKind,
    harvest_headers,
    normalize_value,
    read_field,
)
from mandrill_dm.core.models import MailMessage

TRI_STATE_KEYS = [
    key for key, spec in FIELD_TABLE.items() if spec.kind is FieldKind.TRI_STATE
]
STRING_KEYS = [
    key for key, spec in FIELD_TABLE.items() if spec.kind is FieldKind.STRING
]


def test_field_table_kinds() -> None:
    assert sorted(TRI_STATE_KEYS) == [
        "auto_html",
        "auto_text",
        "inline_css",
        "merge",
        "preserve_recipients",
        "track_clicks",
        "track_opens",
        "url_strip_qs",
        "view_content_link",
    ]
    assert sorted(STRING_KEYS) == [
        "bcc_address",
        "merge_language",
        "return_path_domain",
        "signing_domain",
        "subaccount",
        "tracking_domain",
    ]
    assert FIELD_TABLE["important"].kind is FieldKind.FLAG
    assert FIELD_TABLE["track_clicks"].header == "track-clicks"


@pytest.mark.parametrize("key", TRI_STATE_KEYS)
@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("false", False), ("yes", False), ("1", False), ("True", False)],
)
def test_tri_state_fields(key: str, raw: str, expected: bool) -> None:
    message = MailMessage(headers={FIELD_TABLE[key].header: raw})

    assert read_field(message, FIELD_TABLE[key]) is expected


@pytest.mark.parametrize("key", TRI_STATE_KEYS + STRING_KEYS)
def test_absent_tri_state_and_string_fields_are_none(key: str) -> None:
    assert read_field(MailMessage(), FIELD_TABLE[key]) is None


@pytest.mark.parametrize("key", STRING_KEYS)
def test_string_fields_pass_through(key: str) -> None:
    message = MailMessage(headers={FIELD_TABLE[key].header: "mail.example.com"})

    assert read_field(message, FIELD_TABLE[key]) == "mail.example.com"


def test_string_field_keeps_empty_value() -> None:
    assert normalize_value("", FieldKind.STRING) == ""


@pytest.mark.parametrize(
    ("raw", "expected"), [(None, False), ("true", True), ("false", False), ("", False)]
)
def test_flag_treats_absence_as_false(raw: str | None, expected: bool) -> None:
    assert normalize_value(raw, FieldKind.FLAG) is expected


def test_headers_are_matched_case_insensitively() -> None:
    message = MailMessage(headers={"Track-Opens": "true"})

    assert read_field(message, FIELD_TABLE["track_opens"]) is True


def test_harvest_headers_keeps_only_present_allow_listed_headers() -> None:
    message = MailMessage(
        headers={
            "x-mc-track": "opens",
            "Reply-To": "",
            "X-Custom": "ignored",
        }
    )

    assert harvest_headers(message) == {"X-MC-Track": "opens", "Reply-To": ""}


def test_harvest_headers_covers_full_allow_list() -> None:
    message = MailMessage(headers={name: name.lower() for name in HEADER_ALLOW_LIST})

    harvested = harvest_headers(message)

    assert list(harvested) == list(HEADER_ALLOW_LIST)
    assert len(harvested) == 17
