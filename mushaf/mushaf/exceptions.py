"""
Custom exceptions for Mushaf library.

All exceptions inherit from MushafError for easy catching of library-specific errors.
"""

from typing import Any


class MushafError(Exception):
    """Base exception for all Mushaf errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ProviderError(MushafError):
    """Raised when a request to the remote Quran API fails."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if url:
            ctx["url"] = url
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message, ctx)
        self.url = url
        self.status_code = status_code


class DirectoryFetchError(ProviderError):
    """Raised when the chapter directory cannot be fetched."""


class ContentFetchError(ProviderError):
    """Raised when a chapter's content cannot be fetched."""

    def __init__(
        self,
        message: str,
        chapter_number: int | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        ctx: dict[str, Any] = {}
        if chapter_number is not None:
            ctx["chapter"] = chapter_number
        super().__init__(message, url=url, status_code=status_code, context=ctx)
        self.chapter_number = chapter_number


class ConfigurationError(MushafError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name


class InvalidChapterError(MushafError, ValueError):
    """Raised when a chapter number falls outside 1-114."""

    def __init__(self, chapter_number: int) -> None:
        super().__init__(
            f"Invalid chapter number: {chapter_number}. Must be 1-114.",
            {"chapter": chapter_number},
        )
        self.chapter_number = chapter_number
