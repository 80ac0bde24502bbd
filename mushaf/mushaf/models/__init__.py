"""
Pydantic data models for Mushaf library.

These models represent the core data structures used throughout the library:
- ChapterSummary: Directory entry for a chapter
- Chapter: Full chapter content with its verses
- Verse: A single verse with native text, transliteration and translation
- SearchResult: A match from the local search
- NavigationState: The reader's state, as seen by presentation code
"""

from mushaf.models.chapter import Chapter, ChapterSummary, RevelationType, Verse
from mushaf.models.result import SearchResult, SearchResultKind
from mushaf.models.state import FIRST_CHAPTER, LAST_CHAPTER, NavigationState

__all__ = [
    "Chapter",
    "ChapterSummary",
    "RevelationType",
    "Verse",
    "SearchResult",
    "SearchResultKind",
    "NavigationState",
    "FIRST_CHAPTER",
    "LAST_CHAPTER",
]
