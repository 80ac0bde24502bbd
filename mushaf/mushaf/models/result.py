"""
Search result data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchResultKind(str, Enum):
    """What a search result points at."""

    CHAPTER = "chapter"
    VERSE = "verse"


class SearchResult(BaseModel):
    """
    A single match from a local search over the loaded chapter.

    Attributes:
        kind: Chapter-level or verse-level match
        chapter_number: Chapter the match belongs to
        verse_number: Matching verse (verse-level results only)
        text: Display text
    """

    kind: SearchResultKind = Field(..., description="Chapter-level or verse-level match")
    chapter_number: int = Field(..., description="Chapter number (1-114)", ge=1, le=114)
    verse_number: Optional[int] = Field(default=None, description="Verse number", ge=1)
    text: str = Field(..., description="Display text")

    @model_validator(mode="after")
    def _check_verse_number(self) -> "SearchResult":
        if self.kind == SearchResultKind.VERSE and self.verse_number is None:
            raise ValueError("verse-level results need a verse_number")
        if self.kind == SearchResultKind.CHAPTER and self.verse_number is not None:
            raise ValueError("chapter-level results cannot carry a verse_number")
        return self

    @property
    def reference(self) -> str:
        """Short reference, "2" for a chapter or "2:255" for a verse."""
        if self.verse_number is None:
            return str(self.chapter_number)
        return f"{self.chapter_number}:{self.verse_number}"

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "kind": "verse",
                    "chapter_number": 1,
                    "verse_number": 2,
                    "text": "[All] praise is [due] to Allah, Lord of the worlds -",
                }
            ]
        },
    )

    def __str__(self) -> str:
        return f"SearchResult({self.kind.value}, {self.reference})"
