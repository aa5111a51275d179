"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mandrill_dm.core.config import MetadataMode, load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.adapter.metadata_mode is MetadataMode.AUTO
    assert settings.adapter.empty_tag_placeholder is False
    assert settings.logging.level == "INFO"


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "MANDRILL_DM_ADAPTER__METADATA_MODE=strict\n"
        "MANDRILL_DM_ADAPTER__EMPTY_TAG_PLACEHOLDER=TRUE\n"
        "OTHER_SETTING=ignored\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.adapter.metadata_mode is MetadataMode.STRICT
    assert settings.adapter.empty_tag_placeholder is True


def test_environment_overrides_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment variables should win over env file values."""

    env_file = tmp_path / "test.env"
    env_file.write_text("MANDRILL_DM_LOGGING__LEVEL=WARNING\n", encoding="utf-8")
    monkeypatch.setenv("MANDRILL_DM_LOGGING__LEVEL", "DEBUG")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "DEBUG"
