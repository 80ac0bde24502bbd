"""
Reader navigation state.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mushaf.models.chapter import Chapter, ChapterSummary
from mushaf.models.result import SearchResult


FIRST_CHAPTER = 1
LAST_CHAPTER = 114


class NavigationState(BaseModel):
    """
    Everything a presentation layer needs to draw the reader.

    Written only by ReaderController; presentation code reads it.

    Attributes:
        current_chapter: Selected chapter number (1-114)
        loading: Whether a chapter fetch is in flight
        query: Active search query, None if no search was run
        results: Search results; None means no search, [] means no match
        chapter: Loaded chapter, None until the first successful load
        directory: Chapter directory, empty until (or if never) fetched
        error: Message of the last failed fetch, cleared on the next success
    """

    model_config = ConfigDict(validate_assignment=True)

    current_chapter: int = Field(
        default=FIRST_CHAPTER,
        ge=FIRST_CHAPTER,
        le=LAST_CHAPTER,
    )
    loading: bool = False
    query: Optional[str] = None
    results: Optional[list[SearchResult]] = None
    chapter: Optional[Chapter] = None
    directory: list[ChapterSummary] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def can_go_previous(self) -> bool:
        return self.current_chapter > FIRST_CHAPTER

    @property
    def can_go_next(self) -> bool:
        return self.current_chapter < LAST_CHAPTER

    @property
    def failed(self) -> bool:
        """Nothing has ever loaded and the last attempt failed."""
        return self.chapter is None and not self.loading and self.error is not None

    def __str__(self) -> str:
        return (
            f"NavigationState(chapter={self.current_chapter}, loading={self.loading}, "
            f"results={'-' if self.results is None else len(self.results)})"
        )
