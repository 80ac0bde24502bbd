"""Tests for settings and the exception hierarchy."""

import pytest

from mushaf.config import DEFAULT_API_BASE_URL, MushafSettings, configure, get_settings
from mushaf.exceptions import (
    ConfigurationError,
    ContentFetchError,
    InvalidChapterError,
    MushafError,
    ProviderError,
)
from mushaf.providers import AlQuranCloudProvider


def test_defaults():
    settings = get_settings()

    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert AlQuranCloudProvider(settings=settings).editions == ["quran-uthmani", "en.transliteration", "en.sahih"]
    assert settings.initial_chapter == 1
    assert get_settings() is settings


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("MUSHAF_TRANSLATION_EDITION", "en.pickthall")
    monkeypatch.setenv("MUSHAF_INITIAL_CHAPTER", "18")

    settings = MushafSettings()

    assert settings.translation_edition == "en.pickthall"
    assert settings.initial_chapter == 18


def test_configure_replaces_settings():
    settings = configure(transliteration_edition="", api_base_url="http://localhost:9000/v1/")

    assert get_settings() is settings
    assert settings.api_base_url == "http://localhost:9000/v1"
    assert AlQuranCloudProvider().editions == ["quran-uthmani", "en.sahih"]


@pytest.mark.parametrize(
    "overrides, setting",
    [
        ({"initial_chapter": 115}, "initial_chapter"),
        ({"request_timeout": 0}, "request_timeout"),
        ({"api_base_url": "ftp://example.org"}, "api_base_url"),
    ],
)
def test_configure_rejects_invalid_values(overrides, setting):
    with pytest.raises(ConfigurationError) as info:
        configure(**overrides)

    assert info.value.setting_name == setting
    assert f"setting={setting}" in str(info.value)


def test_exception_hierarchy():
    error = ContentFetchError("down", chapter_number=3, url="http://x/surah/3", status_code=502)

    assert isinstance(error, ProviderError)
    assert isinstance(error, MushafError)
    assert str(error) == "down (chapter=3, url=http://x/surah/3, status_code=502)"

    invalid = InvalidChapterError(0)
    assert isinstance(invalid, ValueError)
    assert invalid.chapter_number == 0
    assert str(MushafError("plain")) == "plain"
