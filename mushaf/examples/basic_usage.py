"""
Basic usage example for Mushaf library.

This example demonstrates the core workflow:
1. Start a reader session (directory + first chapter)
2. Page to the next chapter
3. Search the loaded chapter and jump to a result's chapter
"""

import asyncio
import sys

from mushaf import ReaderController, NavigationState
from mushaf.providers import AlQuranCloudProvider


def show(state: NavigationState) -> None:
    """Observer: print a one-line status whenever the state changes."""
    if state.loading:
        print(f"   ... loading chapter {state.current_chapter}")
    elif state.chapter is not None:
        print(f"   showing {state.chapter.english_name} ({len(state.chapter.verses)} verses)")


async def tour(start: int, query: str) -> None:
    print(f"Reading from chapter {start}")
    print("=" * 50)

    async with ReaderController(AlQuranCloudProvider(), initial_chapter=start) as reader:
        reader.subscribe(show)

        # Step 1: initial load
        print("\n📖 Step 1: Loading directory and first chapter...")
        await reader.wait_until_idle()
        print(f"   Directory has {len(reader.state.directory)} chapters")

        if reader.state.failed:
            print("   Failed to load surah")
            return

        # Step 2: paging
        print("\n➡️  Step 2: Next chapter...")
        if reader.go_to_next():
            await reader.wait_until_idle()

        # Step 3: search
        print(f"\n🔍 Step 3: Searching for {query!r}...")
        results = reader.search(query) or []
        for result in results[:5]:
            print(f"   {result.reference}: {result.text[:60]}")
        if len(results) > 5:
            print(f"   ... and {len(results) - 5} more")

        if results:
            print("\n↩️  Jumping back to the first chapter...")
            reader.go_to_chapter(start)
            await reader.wait_until_idle()


# Example usage
if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <chapter> [query]")
        print("Example: python basic_usage.py 1 mercy")
        sys.exit(1)

    chapter = int(sys.argv[1])
    search_query = sys.argv[2] if len(sys.argv) > 2 else "Lord"

    asyncio.run(tour(chapter, search_query))

    print("\n🎉 Done!")
