"""Command-line reader for Mushaf.

    mushaf chapters                 list all chapters
    mushaf read 36 [--tajweed]      print a chapter
    mushaf search 2 "light"         search inside a chapter
    mushaf browse [N]               interactive reader
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, Optional, TextIO

import httpx

from mushaf import __version__
from mushaf._logging import (
    configure_logging,
    enable_debug_logging,
    log_fetch_failed,
    log_warning,
)
from mushaf.config import MushafSettings, configure
from mushaf.core import ReaderController
from mushaf.exceptions import ConfigurationError, DirectoryFetchError, InvalidChapterError
from mushaf.markup import parse_tajweed, render_ansi, strip_markup
from mushaf.models import Chapter, NavigationState, SearchResult, Verse
from mushaf.providers import AlQuranCloudProvider


BROWSE_HELP = """Commands:
  n            next chapter
  p            previous chapter
  g N          go to chapter N
  s QUERY      search the current chapter
  r K          go to the chapter of search result K
  l            list chapters
  q            quit"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mushaf", description="Read the Quran from the terminal")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--base-url", default=None, help="Quran API base URL")
    parser.add_argument("--arabic-edition", default=None, help="Arabic edition (e.g. quran-tajweed)")
    parser.add_argument("--transliteration", default=None, help="Transliteration edition, '' to skip")
    parser.add_argument("--translation", default=None, help="Translation edition, '' to skip")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("chapters", help="List all chapters")

    read = commands.add_parser("read", help="Print a chapter")
    read.add_argument("chapter", type=int, help="Chapter number (1-114)")
    read.add_argument("--tajweed", action="store_true", help="Colour tajweed rules")
    read.add_argument("--arabic-only", action="store_true", help="Hide transliteration and translation")

    search = commands.add_parser("search", help="Search inside a chapter")
    search.add_argument("chapter", type=int, help="Chapter number (1-114)")
    search.add_argument("query", help="Text to look for (case-insensitive)")

    browse = commands.add_parser("browse", help="Interactive reader")
    browse.add_argument("chapter", type=int, nargs="?", default=None, help="Chapter to start at")
    browse.add_argument("--tajweed", action="store_true", help="Colour tajweed rules")

    return parser


def _settings_from_args(args: argparse.Namespace) -> MushafSettings:
    overrides = {
        "api_base_url": args.base_url,
        "arabic_edition": args.arabic_edition,
        "transliteration_edition": args.transliteration,
        "translation_edition": args.translation,
    }
    return configure(**{k: v for k, v in overrides.items() if v is not None})


def format_header(chapter: Chapter) -> list[str]:
    return [
        chapter.name,
        chapter.english_name,
        chapter.meaning,
        f"{chapter.revelation_type.value.title()} - {chapter.verse_count} Verses",
        "",
    ]


def format_verse(
    verse: Verse,
    tajweed: bool = False,
    arabic_only: bool = False,
    prefix: str = "tajweed-",
) -> list[str]:
    if tajweed:
        text = render_ansi(parse_tajweed(verse.text, prefix))
    else:
        text = strip_markup(verse.text)

    lines = [f"[{verse.number}] {text}"]
    if not arabic_only:
        if verse.transliteration:
            lines.append(f"    {verse.transliteration}")
        if verse.translation:
            lines.append(f"    {verse.translation}")
    return lines


def format_result(index: int, result: SearchResult) -> str:
    return f"{index:>3}. {result.reference:<8} {result.text}"


def print_chapter(
    state: NavigationState,
    out: TextIO,
    tajweed: bool = False,
    arabic_only: bool = False,
    prefix: str = "tajweed-",
) -> bool:
    """Print the loaded chapter. Returns False if nothing could be shown."""
    if state.failed or state.chapter is None:
        print("Failed to load surah", file=out)
        return False

    if state.error:
        # Refetch failed, the previous chapter is still on screen
        log_warning(
            f"Could not load chapter {state.current_chapter}, "
            f"showing chapter {state.chapter.number}",
            error=state.error,
        )

    lines = format_header(state.chapter)
    for verse in state.chapter.verses:
        lines.extend(format_verse(verse, tajweed, arabic_only, prefix))
    print("\n".join(lines), file=out)
    return True


def print_results(results: Optional[list[SearchResult]], out: TextIO) -> None:
    if results is None:
        print("Empty query", file=out)
    elif not results:
        print("No matches", file=out)
    else:
        for index, result in enumerate(results, 1):
            print(format_result(index, result), file=out)


async def _browse(
    reader: ReaderController,
    out: TextIO,
    read_line: Callable[[str], str],
    tajweed: bool,
    prefix: str,
) -> int:
    await reader.wait_until_idle()
    print_chapter(reader.state, out, tajweed=tajweed, prefix=prefix)

    while True:
        try:
            line = await asyncio.to_thread(read_line, "mushaf> ")
        except EOFError:
            break

        command, _, argument = line.strip().partition(" ")
        argument = argument.strip()
        changed = False

        if command in ("q", "quit"):
            break
        elif command == "n":
            changed = reader.go_to_next()
            if not changed:
                print("Already at the last chapter", file=out)
        elif command == "p":
            changed = reader.go_to_previous()
            if not changed:
                print("Already at the first chapter", file=out)
        elif command == "g":
            try:
                changed = reader.go_to_chapter(int(argument))
            except ValueError as e:
                # InvalidChapterError is a ValueError too
                message = str(e) if isinstance(e, InvalidChapterError) else "Usage: g N"
                print(message, file=out)
        elif command == "s":
            print_results(reader.search(argument), out)
        elif command == "r":
            results = reader.state.results or []
            try:
                result = results[int(argument) - 1]
            except (ValueError, IndexError):
                print("Usage: r K, with K from the last search", file=out)
            else:
                changed = reader.go_to_result(result)
        elif command == "l":
            for summary in reader.state.directory:
                print(summary.label, file=out)
        elif command:
            print(BROWSE_HELP, file=out)

        if changed:
            await reader.wait_until_idle()
            print_chapter(reader.state, out, tajweed=tajweed, prefix=prefix)

    return 0


async def _list_chapters(provider: AlQuranCloudProvider, out: TextIO) -> int:
    async with provider:
        try:
            directory = await provider.fetch_directory()
        except DirectoryFetchError as e:
            log_fetch_failed("chapter directory", e)
            print("Failed to load chapter list", file=out)
            return 1

    for summary in directory:
        print(summary.label, file=out)
    return 0


async def run(
    args: argparse.Namespace,
    out: TextIO = sys.stdout,
    transport: httpx.AsyncBaseTransport | None = None,
    read_line: Callable[[str], str] = input,
) -> int:
    """Run a parsed command. Returns the process exit code."""
    settings = _settings_from_args(args)
    provider = AlQuranCloudProvider(settings=settings, transport=transport)

    if args.command == "chapters":
        return await _list_chapters(provider, out)

    initial = getattr(args, "chapter", None)

    async with ReaderController(provider, initial_chapter=initial, settings=settings) as reader:
        if args.command == "browse":
            return await _browse(reader, out, read_line, args.tajweed, settings.tajweed_class_prefix)

        await reader.wait_until_idle()
        state = reader.state

        if args.command == "read":
            shown = print_chapter(
                state,
                out,
                tajweed=args.tajweed,
                arabic_only=args.arabic_only,
                prefix=settings.tajweed_class_prefix,
            )
            return 0 if shown else 1

        # search
        if state.chapter is None:
            print("Failed to load surah", file=out)
            return 1
        print_results(reader.search(args.query), out)
        return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        enable_debug_logging()
    else:
        configure_logging(level=logging.WARNING)

    try:
        return asyncio.run(run(args))
    except (ConfigurationError, InvalidChapterError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
