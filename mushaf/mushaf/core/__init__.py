"""
Core modules for Mushaf library.

This package contains the reader's business logic:
- Local search over the loaded chapter
- The reader controller (navigation state, guarded chapter loading)
"""

from mushaf.core.search import (
    normalize_query,
    chapter_matches,
    verse_matches,
    search_chapter,
)
from mushaf.core.controller import ReaderController

__all__ = [
    # Search
    "normalize_query",
    "chapter_matches",
    "verse_matches",
    "search_chapter",
    # Controller
    "ReaderController",
]
