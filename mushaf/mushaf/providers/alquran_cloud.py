"""
alquran.cloud provider.

Uses the public alquran.cloud REST API (https://alquran.cloud/api):

    GET /surah                                 -> chapter directory
    GET /surah/{n}/editions/{e1},{e2},{e3}     -> one chapter in several editions

Editions are merged verse by verse (``numberInSurah``) into a single Chapter.
"""

from typing import Any

import httpx

from mushaf.config import MushafSettings, get_settings
from mushaf.exceptions import (
    ConfigurationError,
    ContentFetchError,
    DirectoryFetchError,
    InvalidChapterError,
    ProviderError,
)
from mushaf.markup import convert_tajweed_notation
from mushaf.models import Chapter, ChapterSummary, Verse
from mushaf.models.state import FIRST_CHAPTER, LAST_CHAPTER
from mushaf.providers.base import BaseProvider


# Schema and transport failures that all count as "fetch failed"
_FETCH_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError)


class AlQuranCloudProvider(BaseProvider):
    """
    Provider backed by the alquran.cloud API.

    Example:
        async with AlQuranCloudProvider(translation_edition="en.pickthall") as provider:
            chapter = await provider.fetch_chapter(1)

    Or using environment variables:
        export MUSHAF_TRANSLATION_EDITION="en.pickthall"

        provider = AlQuranCloudProvider()
    """

    def __init__(
        self,
        base_url: str | None = None,
        arabic_edition: str | None = None,
        transliteration_edition: str | None = None,
        translation_edition: str | None = None,
        settings: MushafSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the provider.

        Args:
            base_url: API base URL (overrides settings)
            arabic_edition: Native-script edition (overrides settings)
            transliteration_edition: Transliteration edition, "" to skip (overrides settings)
            translation_edition: Translation edition, "" to skip (overrides settings)
            settings: Settings instance to use
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._settings = settings or get_settings()

        self._base_url = (base_url or self._settings.api_base_url).rstrip("/")

        arabic = arabic_edition or self._settings.arabic_edition
        if not arabic:
            raise ConfigurationError(
                "An Arabic edition is required.",
                setting_name="arabic_edition",
            )

        if transliteration_edition is None:
            transliteration_edition = self._settings.transliteration_edition
        if translation_edition is None:
            translation_edition = self._settings.translation_edition

        # (verse field, edition) in request order; the Arabic edition comes first
        self._editions: list[tuple[str, str]] = [("text", arabic)]
        if transliteration_edition:
            self._editions.append(("transliteration", transliteration_edition))
        if translation_edition:
            self._editions.append(("translation", translation_edition))

        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_loaded(self) -> bool:
        return self._client is not None

    @property
    def base_url(self) -> str:
        """Current API base URL."""
        return self._base_url

    @property
    def editions(self) -> list[str]:
        """Edition identifiers requested for each chapter."""
        return [edition for _, edition in self._editions]

    def load(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(
                self._settings.request_timeout,
                connect=self._settings.connect_timeout,
            ),
            headers={
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            },
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path}"

    async def _get(self, path: str) -> Any:
        """
        GET an API path and unwrap the ``{"code", "status", "data"}`` envelope.

        Raises:
            ProviderError: On a non-200 HTTP status or envelope code
            httpx.HTTPError: On transport failures
            ValueError: If the body is not JSON
        """
        if self._client is None:
            self.load()

        url = self._url(path)
        response = await self._client.get(url)

        if response.status_code != 200:
            raise ProviderError(
                f"HTTP {response.status_code} from API",
                url=url,
                status_code=response.status_code,
            )

        payload = response.json()
        if not isinstance(payload, dict) or payload.get("code") != 200:
            status = payload.get("status") if isinstance(payload, dict) else None
            raise ProviderError(
                f"API error: {status or 'malformed response'}",
                url=url,
                status_code=response.status_code,
            )

        return payload["data"]

    async def fetch_directory(self) -> list[ChapterSummary]:
        """
        Fetch all 114 chapter summaries.

        Raises:
            DirectoryFetchError: If the request fails or the payload is malformed
        """
        url = self._url("surah")
        try:
            data = await self._get("surah")
            return [self._to_summary(item) for item in data]
        except ProviderError as e:
            raise DirectoryFetchError(e.message, url=e.url, status_code=e.status_code) from e
        except _FETCH_ERRORS as e:
            raise DirectoryFetchError(f"Failed to fetch chapter directory: {e}", url=url) from e

    async def fetch_chapter(self, number: int) -> Chapter:
        """
        Fetch one chapter in every configured edition.

        Args:
            number: Chapter number (1-114)

        Raises:
            InvalidChapterError: If number is outside 1-114
            ContentFetchError: If the request fails or the payload is malformed
        """
        if number < FIRST_CHAPTER or number > LAST_CHAPTER:
            raise InvalidChapterError(number)

        path = f"surah/{number}/editions/{','.join(self.editions)}"
        url = self._url(path)
        try:
            data = await self._get(path)
            return self._to_chapter(number, data)
        except ProviderError as e:
            raise ContentFetchError(
                e.message,
                chapter_number=number,
                url=e.url,
                status_code=e.status_code,
            ) from e
        except _FETCH_ERRORS as e:
            raise ContentFetchError(
                f"Failed to fetch chapter: {e}",
                chapter_number=number,
                url=url,
            ) from e

    @staticmethod
    def _to_summary(item: dict[str, Any]) -> ChapterSummary:
        revelation = item.get("revelationType")
        return ChapterSummary(
            number=item["number"],
            name=item["name"],
            english_name=item["englishName"],
            meaning=item.get("englishNameTranslation") or "",
            verse_count=item.get("numberOfAyahs"),
            revelation_type=revelation.lower() if revelation else None,
        )

    def _to_chapter(self, number: int, data: Any) -> Chapter:
        # A single edition may come back unwrapped
        payloads = data if isinstance(data, list) else [data]
        if len(payloads) != len(self._editions):
            raise ValueError(
                f"expected {len(self._editions)} editions, got {len(payloads)}"
            )

        head = payloads[0]
        if head["number"] != number:
            raise ValueError(f"asked for chapter {number}, got {head['number']}")

        texts: dict[str, dict[int, str]] = {}
        for (field, _), payload in zip(self._editions, payloads):
            texts[field] = {
                ayah["numberInSurah"]: ayah["text"] for ayah in payload["ayahs"]
            }

        prefix = self._settings.tajweed_class_prefix
        transliterations = texts.get("transliteration", {})
        translations = texts.get("translation", {})

        verses = [
            Verse(
                number=verse_number,
                text=convert_tajweed_notation(text, prefix),
                transliteration=transliterations.get(verse_number, ""),
                translation=translations.get(verse_number, ""),
            )
            for verse_number, text in sorted(texts["text"].items())
        ]

        return Chapter(
            number=head["number"],
            name=head["name"],
            english_name=head["englishName"],
            meaning=head.get("englishNameTranslation") or "",
            revelation_type=str(head["revelationType"]).lower(),
            verse_count=head.get("numberOfAyahs", len(verses)),
            description=head.get("description"),
            verses=verses,
        )
