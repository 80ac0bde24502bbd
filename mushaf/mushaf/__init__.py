"""
Mushaf: a Python reader for the Quran backed by a public HTTP API.

Usage:
    import asyncio

    from mushaf import ReaderController
    from mushaf.providers import AlQuranCloudProvider

    async def main():
        async with ReaderController(AlQuranCloudProvider()) as reader:
            await reader.wait_until_idle()
            for verse in reader.state.chapter.verses:
                print(verse.number, verse.translation)

            # Local search over the loaded chapter
            for result in reader.search("Lord") or []:
                print(result.reference, result.text)

    asyncio.run(main())
"""

from mushaf.models import (
    Chapter,
    ChapterSummary,
    NavigationState,
    RevelationType,
    SearchResult,
    SearchResultKind,
    Verse,
)
from mushaf.config import MushafSettings, get_settings, configure
from mushaf.exceptions import (
    MushafError,
    ProviderError,
    DirectoryFetchError,
    ContentFetchError,
    ConfigurationError,
    InvalidChapterError,
)
from mushaf.core import ReaderController, search_chapter

__version__ = "0.1.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Chapter",
    "ChapterSummary",
    "NavigationState",
    "RevelationType",
    "SearchResult",
    "SearchResultKind",
    "Verse",
    # Config
    "MushafSettings",
    "get_settings",
    "configure",
    # Core
    "ReaderController",
    "search_chapter",
    # Exceptions
    "MushafError",
    "ProviderError",
    "DirectoryFetchError",
    "ContentFetchError",
    "ConfigurationError",
    "InvalidChapterError",
]
