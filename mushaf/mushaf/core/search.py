"""
Local search over the loaded chapter.

Matching is case-insensitive substring containment: no tokenizing, no
scoring. Results are the chapter-level match (if any) followed by verse
matches in verse order.
"""

from typing import Optional

from mushaf.models import Chapter, SearchResult, SearchResultKind, Verse


def normalize_query(query: Optional[str]) -> Optional[str]:
    """
    Trim and case-fold a query.

    Returns:
        The normalized query, or None if it is empty or whitespace-only
    """
    if query is None:
        return None
    stripped = query.strip()
    if not stripped:
        return None
    return stripped.casefold()


def _contains(needle: str, *fields: Optional[str]) -> bool:
    return any(field and needle in field.casefold() for field in fields)


def chapter_matches(chapter: Chapter, needle: str) -> bool:
    """Whether a normalized query matches the chapter's own metadata."""
    return _contains(
        needle,
        chapter.name,
        chapter.english_name,
        chapter.meaning,
        chapter.description,
    )


def verse_matches(verse: Verse, needle: str) -> bool:
    """Whether a normalized query matches any text of the verse."""
    return _contains(needle, verse.plain_text, verse.transliteration, verse.translation)


def _verse_display_text(verse: Verse) -> str:
    return verse.translation or verse.transliteration or verse.plain_text


def search_chapter(
    chapter: Optional[Chapter],
    query: Optional[str],
) -> Optional[list[SearchResult]]:
    """
    Search one chapter for a query.

    Args:
        chapter: The loaded chapter (None if nothing is loaded yet)
        query: Free-text query

    Returns:
        None for an empty or whitespace-only query, otherwise the list of
        matches (possibly empty)
    """
    needle = normalize_query(query)
    if needle is None:
        return None
    if chapter is None:
        return []

    results: list[SearchResult] = []

    if chapter_matches(chapter, needle):
        results.append(
            SearchResult(
                kind=SearchResultKind.CHAPTER,
                chapter_number=chapter.number,
                text=f"{chapter.english_name} ({chapter.meaning})",
            )
        )

    for verse in chapter.verses:
        if verse_matches(verse, needle):
            results.append(
                SearchResult(
                    kind=SearchResultKind.VERSE,
                    chapter_number=chapter.number,
                    verse_number=verse.number,
                    text=_verse_display_text(verse),
                )
            )

    return results
