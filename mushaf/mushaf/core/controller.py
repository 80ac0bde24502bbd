"""
Reader controller.

Owns the NavigationState and is its only writer. Presentation code calls the
action methods (go_to_previous, go_to_next, go_to_chapter, search) and
subscribes to state changes.

Runs on an asyncio event loop. The chapter directory is fetched once per
session; a chapter is fetched on every change of the current chapter number.
Every content fetch gets a sequence number and only the latest one may write
the state, so a slow response for an earlier chapter can never overwrite a
newer one. Superseded fetches are also cancelled.
"""

import asyncio
import time
from typing import Callable, Optional

from mushaf._logging import (
    log_chapter_loaded,
    log_chapter_requested,
    log_directory_loaded,
    log_fetch_failed,
    log_stale_response,
)
from mushaf.config import MushafSettings, get_settings
from mushaf.core.search import search_chapter
from mushaf.exceptions import ContentFetchError, DirectoryFetchError, InvalidChapterError
from mushaf.models import FIRST_CHAPTER, LAST_CHAPTER, NavigationState, SearchResult
from mushaf.providers.base import BaseProvider


Observer = Callable[[NavigationState], None]


def _check_chapter(number: int) -> None:
    if number < FIRST_CHAPTER or number > LAST_CHAPTER:
        raise InvalidChapterError(number)


class ReaderController:
    """
    Single-writer state container for a reading session.

    Example:
        async with ReaderController(AlQuranCloudProvider()) as reader:
            await reader.wait_until_idle()
            print(reader.state.chapter.english_name)

            reader.go_to_next()
            await reader.wait_until_idle()

            results = reader.search("mercy")
    """

    def __init__(
        self,
        provider: BaseProvider,
        initial_chapter: Optional[int] = None,
        settings: Optional[MushafSettings] = None,
    ):
        """
        Args:
            provider: Where chapters come from
            initial_chapter: First chapter to show (default: settings.initial_chapter)
            settings: Settings instance to use
        """
        self._settings = settings or get_settings()
        number = initial_chapter if initial_chapter is not None else self._settings.initial_chapter
        _check_chapter(number)

        self._provider = provider
        self._state = NavigationState(current_chapter=number)
        self._observers: list[Observer] = []

        self._started = False
        self._sequence = 0
        self._directory_task: Optional[asyncio.Task] = None
        self._content_task: Optional[asyncio.Task] = None

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def provider(self) -> BaseProvider:
        return self._provider

    # Observers

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Call observer with the state after every change.

        Returns:
            A function that removes the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self._state)

    # Lifecycle

    def start(self) -> None:
        """
        Fetch the directory and the current chapter.

        Must be called from a running event loop. Calling it again is a no-op.
        """
        if self._started:
            return
        self._started = True

        self._directory_task = asyncio.create_task(self._load_directory())
        self._load_chapter()

    async def wait_until_idle(self) -> None:
        """
        Wait until no fetch is in flight.

        Raises:
            Exception: Any unexpected error raised inside a fetch
        """
        while True:
            pending = [
                task
                for task in (self._directory_task, self._content_task)
                if task is not None and not task.done()
            ]
            if not pending:
                break
            await asyncio.wait(pending)

        for task in (self._directory_task, self._content_task):
            if task is not None and not task.cancelled() and task.exception() is not None:
                raise task.exception()

    async def aclose(self) -> None:
        """Cancel in-flight fetches and close the provider."""
        tasks = [
            task
            for task in (self._directory_task, self._content_task)
            if task is not None
        ]
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        await self._provider.close()

    async def __aenter__(self) -> "ReaderController":
        self._provider.load()
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # Navigation

    def go_to_previous(self) -> bool:
        """Show the previous chapter. No-op at chapter 1."""
        if not self._state.can_go_previous:
            return False
        return self.go_to_chapter(self._state.current_chapter - 1)

    def go_to_next(self) -> bool:
        """Show the next chapter. No-op at chapter 114."""
        if not self._state.can_go_next:
            return False
        return self.go_to_chapter(self._state.current_chapter + 1)

    def go_to_chapter(self, number: int) -> bool:
        """
        Show a specific chapter.

        Args:
            number: Chapter number (1-114)

        Returns:
            True if the current chapter changed

        Raises:
            InvalidChapterError: If number is outside 1-114
        """
        _check_chapter(number)
        if number == self._state.current_chapter:
            return False

        self._state.current_chapter = number
        self._state.query = None
        self._state.results = None
        self._state.error = None

        if self._started:
            self._load_chapter()
        else:
            self._notify()
        return True

    def go_to_result(self, result: SearchResult) -> bool:
        """Show the chapter a search result belongs to."""
        return self.go_to_chapter(result.chapter_number)

    # Search

    def search(self, query: Optional[str]) -> Optional[list[SearchResult]]:
        """
        Search the loaded chapter.

        Returns:
            None for an empty query, otherwise the (possibly empty) result list
        """
        results = search_chapter(self._state.chapter, query)
        self._state.query = query if results is not None else None
        self._state.results = results
        self._notify()
        return results

    # Loaders

    async def _load_directory(self) -> None:
        started = time.perf_counter()
        try:
            directory = await self._provider.fetch_directory()
        except DirectoryFetchError as e:
            log_fetch_failed("chapter directory", e)
            return

        self._state.directory = directory
        log_directory_loaded(len(directory), time.perf_counter() - started)
        self._notify()

    def _load_chapter(self) -> None:
        self._sequence += 1
        sequence = self._sequence
        number = self._state.current_chapter

        if self._content_task is not None and not self._content_task.done():
            self._content_task.cancel()

        self._state.loading = True
        log_chapter_requested(number, sequence)
        self._content_task = asyncio.create_task(self._fetch_chapter(number, sequence))
        self._notify()

    async def _fetch_chapter(self, number: int, sequence: int) -> None:
        started = time.perf_counter()
        try:
            try:
                chapter = await self._provider.fetch_chapter(number)
            except ContentFetchError as e:
                if sequence != self._sequence:
                    log_stale_response(number, sequence, self._sequence)
                    return
                # Keep showing the previous chapter, if any
                log_fetch_failed(f"chapter {number}", e)
                self._state.error = str(e)
                return

            if sequence != self._sequence:
                log_stale_response(number, sequence, self._sequence)
                return

            self._state.chapter = chapter
            self._state.query = None
            self._state.results = None
            self._state.error = None
            log_chapter_loaded(number, len(chapter.verses), time.perf_counter() - started)
        finally:
            # Only the latest request owns the loading flag
            if sequence == self._sequence and self._state.loading:
                self._state.loading = False
                self._notify()
