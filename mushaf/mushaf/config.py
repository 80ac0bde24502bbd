"""
Configuration for Mushaf library.

Settings are read from environment variables prefixed with ``MUSHAF_``
(or a local ``.env`` file) and can be overridden programmatically:

    from mushaf import configure

    configure(translation_edition="en.pickthall", request_timeout=10)
"""

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mushaf.exceptions import ConfigurationError


DEFAULT_API_BASE_URL = "https://api.alquran.cloud/v1"


class MushafSettings(BaseSettings):
    """
    Runtime settings for the reader.

    Attributes:
        api_base_url: Base URL of the alquran.cloud compatible API
        arabic_edition: Edition identifier for the native-script text
        transliteration_edition: Edition for transliterated text ("" to skip)
        translation_edition: Edition for translated text ("" to skip)
        request_timeout: Total timeout for a single request (seconds)
        connect_timeout: Connection timeout (seconds)
        initial_chapter: Chapter shown when a reader session starts
        tajweed_class_prefix: Class prefix identifying tajweed rule spans
        user_agent: User-Agent header sent with every request
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSHAF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the Quran API",
    )
    arabic_edition: str = Field(
        default="quran-uthmani",
        description="Edition identifier for the native-script text",
        min_length=1,
    )
    transliteration_edition: str = Field(
        default="en.transliteration",
        description="Edition identifier for transliterated text",
    )
    translation_edition: str = Field(
        default="en.sahih",
        description="Edition identifier for translated text",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Total timeout for a single request (seconds)",
        gt=0.0,
    )
    connect_timeout: float = Field(
        default=10.0,
        description="Connection timeout (seconds)",
        gt=0.0,
    )
    initial_chapter: int = Field(
        default=1,
        description="Chapter shown when a reader session starts",
        ge=1,
        le=114,
    )
    tajweed_class_prefix: str = Field(
        default="tajweed-",
        description="Class prefix identifying tajweed rule spans",
        min_length=1,
    )
    user_agent: str = Field(
        default="mushaf/0.1.0",
        description="User-Agent header sent with every request",
    )

    @field_validator("api_base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_base_url must start with http:// or https://")
        return value.rstrip("/")


_settings: MushafSettings | None = None


def _build(**overrides: Any) -> MushafSettings:
    try:
        return MushafSettings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ConfigurationError(
            f"Invalid Mushaf settings: {first.get('msg', e)}",
            setting_name=setting,
        ) from e


def get_settings() -> MushafSettings:
    """
    Get the process-wide settings, loading them from the environment on first use.

    Returns:
        The current MushafSettings instance
    """
    global _settings
    if _settings is None:
        _settings = _build()
    return _settings


def configure(**overrides: Any) -> MushafSettings:
    """
    Replace the process-wide settings.

    Unspecified settings fall back to environment variables and defaults.

    Raises:
        ConfigurationError: If any value is invalid
    """
    global _settings
    _settings = _build(**overrides)
    return _settings


def reset_settings() -> None:
    """Forget the current settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
