"""
Abstract base class for Quran content providers.

A provider maps one remote API's schema into ChapterSummary / Chapter / Verse.
The reader core only ever talks to this interface.
"""

from abc import ABC, abstractmethod

from mushaf.models import Chapter, ChapterSummary


class BaseProvider(ABC):
    """
    Abstract interface for fetching Quran content.

    Example:
        class MyProvider(BaseProvider):
            async def fetch_chapter(self, number: int) -> Chapter:
                # Custom implementation
                ...
    """

    @abstractmethod
    async def fetch_directory(self) -> list[ChapterSummary]:
        """
        Fetch the ordered list of all chapters.

        Raises:
            DirectoryFetchError: If the directory cannot be fetched
        """
        pass

    @abstractmethod
    async def fetch_chapter(self, number: int) -> Chapter:
        """
        Fetch one chapter with all of its verses.

        Args:
            number: Chapter number (1-114)

        Raises:
            ContentFetchError: If the chapter cannot be fetched
        """
        pass

    @abstractmethod
    def load(self) -> None:
        """Prepare network resources (HTTP client)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass

    @property
    @abstractmethod
    def is_loaded(self) -> bool:
        """Whether network resources are ready."""
        pass

    async def __aenter__(self) -> "BaseProvider":
        self.load()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
