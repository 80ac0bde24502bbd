"""
Chapter (surah) and verse (ayah) data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mushaf.markup import strip_markup


class RevelationType(str, Enum):
    """Where a chapter was revealed."""

    MECCAN = "meccan"
    MEDINAN = "medinan"


class Verse(BaseModel):
    """
    A single verse (ayah) within a chapter.

    Attributes:
        number: Verse number within the chapter (1-based)
        text: Native-script text, may embed tajweed span markup
        transliteration: Transliterated text ("" if not fetched)
        translation: Translated text ("" if not fetched)
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(
        ...,
        description="Verse number within the chapter (1-based)",
        ge=1,
    )
    text: str = Field(
        ...,
        description="Native-script text, may embed tajweed span markup",
    )
    transliteration: str = Field(
        default="",
        description="Transliterated text",
    )
    translation: str = Field(
        default="",
        description="Translated text",
    )

    @property
    def plain_text(self) -> str:
        """Native-script text with markup removed."""
        return strip_markup(self.text)

    def __str__(self) -> str:
        return f"Verse({self.number})"


class ChapterSummary(BaseModel):
    """
    Directory entry for a chapter, used to populate chapter selectors.

    Attributes:
        number: Chapter number (1-114)
        name: Native-script name
        english_name: Transliterated name
        meaning: Short translated meaning of the name
        verse_count: Number of verses, when the provider reports it
        revelation_type: Revelation place, when the provider reports it
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Chapter number (1-114)", ge=1, le=114)
    name: str = Field(..., description="Native-script name")
    english_name: str = Field(..., description="Transliterated name")
    meaning: str = Field(default="", description="Short translated meaning")
    verse_count: Optional[int] = Field(default=None, description="Number of verses", ge=1)
    revelation_type: Optional[RevelationType] = Field(default=None)

    @property
    def label(self) -> str:
        """Selector text, e.g. "1. Al-Faatiha (سُورَةُ ٱلْفَاتِحَةِ)"."""
        return f"{self.number}. {self.english_name} ({self.name})"

    def __str__(self) -> str:
        return f"ChapterSummary({self.number}, {self.english_name})"


class Chapter(BaseModel):
    """
    Full content of one chapter.

    A Chapter is never updated in place: navigation replaces it wholesale.

    Attributes:
        number: Chapter number (1-114)
        name: Native-script name
        english_name: Transliterated name
        meaning: Short translated meaning
        revelation_type: Revelation place category
        verse_count: Number of verses as reported by the provider
        description: Optional long free-text description
        verses: Verses in natural order
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Chapter number (1-114)", ge=1, le=114)
    name: str = Field(..., description="Native-script name")
    english_name: str = Field(..., description="Transliterated name")
    meaning: str = Field(default="", description="Short translated meaning")
    revelation_type: RevelationType = Field(..., description="Revelation place")
    verse_count: int = Field(..., description="Number of verses", ge=0)
    description: Optional[str] = Field(default=None, description="Long description")
    verses: list[Verse] = Field(default_factory=list, description="Verses in order")

    @model_validator(mode="after")
    def _check_verse_order(self) -> "Chapter":
        previous = 0
        for verse in self.verses:
            if verse.number <= previous:
                raise ValueError(
                    f"Verse numbers must be strictly increasing "
                    f"(got {verse.number} after {previous})"
                )
            previous = verse.number
        return self

    def get_verse(self, number: int) -> Optional[Verse]:
        """Get a verse by its number, None if absent."""
        for verse in self.verses:
            if verse.number == number:
                return verse
        return None

    def summary(self) -> ChapterSummary:
        """Directory entry describing this chapter."""
        return ChapterSummary(
            number=self.number,
            name=self.name,
            english_name=self.english_name,
            meaning=self.meaning,
            verse_count=self.verse_count or None,
            revelation_type=self.revelation_type,
        )

    def __str__(self) -> str:
        return f"Chapter({self.number}, {self.english_name}, verses={len(self.verses)})"
