"""Shared fixtures: Al-Fatiha data, alquran.cloud payloads and a fake provider."""

import asyncio
import logging
import os
from typing import Any

import httpx
import pytest

from mushaf.config import MushafSettings, reset_settings
from mushaf.exceptions import ContentFetchError, DirectoryFetchError
from mushaf.models import Chapter, ChapterSummary, Verse
from mushaf.providers.base import BaseProvider


FATIHA_ARABIC = [
    "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَٰلَمِينَ",
    "ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "مَٰلِكِ يَوْمِ ٱلدِّينِ",
    "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ",
    "ٱهْدِنَا ٱلصِّرَٰطَ ٱلْمُسْتَقِيمَ",
    "صِرَٰطَ ٱلَّذِينَ أَنْعَمْتَ عَلَيْهِمْ غَيْرِ ٱلْمَغْضُوبِ عَلَيْهِمْ وَلَا ٱلضَّآلِّينَ",
]

FATIHA_TRANSLITERATION = [
    "Bismi Allahi alrrahmani alrraheemi",
    "Alhamdu lillahi rabbi alAAalameena",
    "Alrrahmani alrraheemi",
    "Maliki yawmi alddeeni",
    "Iyyaka naAAbudu wa-iyyaka nastaAAeenu",
    "Ihdina alssirata almustaqeema",
    "Sirata allatheena anAAamta AAalayhim ghayri almaghdoobi AAalayhim wala alddalleena",
]

FATIHA_TRANSLATION = [
    "In the name of Allah, the Entirely Merciful, the Especially Merciful.",
    "[All] praise is [due] to Allah, Lord of the worlds -",
    "The Entirely Merciful, the Especially Merciful,",
    "Sovereign of the Day of Recompense.",
    "It is You we worship and You we ask for help.",
    "Guide us to the straight path -",
    "The path of those upon whom You have bestowed favor, not of those who have "
    "evoked [Your] anger or of those who are astray.",
]

FATIHA_META = {
    "number": 1,
    "name": "سُورَةُ ٱلْفَاتِحَةِ",
    "englishName": "Al-Faatiha",
    "englishNameTranslation": "The Opening",
    "numberOfAyahs": 7,
    "revelationType": "Meccan",
}


def chapter_meta(number: int) -> dict[str, Any]:
    """alquran.cloud chapter metadata; Al-Fatiha is real, the rest synthetic."""
    if number == 1:
        return dict(FATIHA_META)
    return {
        "number": number,
        "name": f"سورة {number}",
        "englishName": f"Surah-{number}",
        "englishNameTranslation": f"Meaning {number}",
        "numberOfAyahs": 3,
        "revelationType": "Medinan" if number % 2 == 0 else "Meccan",
    }


def verse_texts(number: int) -> tuple[list[str], list[str], list[str]]:
    if number == 1:
        return FATIHA_ARABIC, FATIHA_TRANSLITERATION, FATIHA_TRANSLATION
    count = chapter_meta(number)["numberOfAyahs"]
    return (
        [f"نص {number}:{i}" for i in range(1, count + 1)],
        [f"nass {number}:{i}" for i in range(1, count + 1)],
        [f"Text of {number}:{i}" for i in range(1, count + 1)],
    )


def edition_payload(number: int, texts: list[str], identifier: str) -> dict[str, Any]:
    payload = chapter_meta(number)
    payload["ayahs"] = [
        {"number": 1000 * number + i, "text": text, "numberInSurah": i, "juz": 1}
        for i, text in enumerate(texts, 1)
    ]
    payload["edition"] = {"identifier": identifier}
    return payload


def envelope(data: Any, code: int = 200, status: str = "OK") -> dict[str, Any]:
    return {"code": code, "status": status, "data": data}


def directory_payload() -> dict[str, Any]:
    return envelope([chapter_meta(n) for n in range(1, 115)])


def chapter_payload(number: int, editions: list[str]) -> dict[str, Any]:
    arabic, transliteration, translation = verse_texts(number)
    data = []
    for index, identifier in enumerate(editions):
        if "transliteration" in identifier:
            texts = transliteration
        elif index == 0:
            texts = arabic
        else:
            texts = translation
        data.append(edition_payload(number, texts, identifier))
    return envelope(data)


def make_handler(fail_paths: dict[str, int] | None = None, seen: list | None = None):
    """
    Build an httpx.MockTransport handler serving /surah and /surah/{n}/editions/...

    fail_paths maps a path to an HTTP status to return instead. A path ending
    in "/" matches everything below it.
    """
    fail_paths = fail_paths or {}

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path
        for prefix, status in fail_paths.items():
            if path == prefix or (prefix.endswith("/") and path.startswith(prefix)):
                return httpx.Response(status, json=envelope("error", code=status, status="ERROR"))

        parts = path.strip("/").split("/")
        # ["v1", "surah"] or ["v1", "surah", "1", "editions", "a,b,c"]
        if parts[-1] == "surah":
            return httpx.Response(200, json=directory_payload())
        if len(parts) == 5 and parts[1] == "surah" and parts[3] == "editions":
            number = int(parts[2])
            if not 1 <= number <= 114:
                return httpx.Response(404, json=envelope("Not found", code=404, status="NOT FOUND"))
            return httpx.Response(200, json=chapter_payload(number, parts[4].split(",")))
        return httpx.Response(404, json=envelope("Not found", code=404, status="NOT FOUND"))

    return handler


def build_chapter(number: int, description: str | None = None) -> Chapter:
    meta = chapter_meta(number)
    arabic, transliteration, translation = verse_texts(number)
    return Chapter(
        number=number,
        name=meta["name"],
        english_name=meta["englishName"],
        meaning=meta["englishNameTranslation"],
        revelation_type=meta["revelationType"].lower(),
        verse_count=meta["numberOfAyahs"],
        description=description,
        verses=[
            Verse(number=i, text=a, transliteration=t, translation=tr)
            for i, (a, t, tr) in enumerate(zip(arabic, transliteration, translation), 1)
        ],
    )


class FakeProvider(BaseProvider):
    """In-memory provider with per-chapter latency and failures."""

    def __init__(
        self,
        delays: dict[int, float] | None = None,
        failing: set[int] | None = None,
        fail_directory: bool = False,
    ):
        self.delays = delays or {}
        self.failing = set(failing or ())
        self.fail_directory = fail_directory
        self.requests: list[int] = []
        self.directory_requests = 0
        self.loaded = False
        self.closed = False

    async def fetch_directory(self) -> list[ChapterSummary]:
        self.directory_requests += 1
        await asyncio.sleep(0)
        if self.fail_directory:
            raise DirectoryFetchError("directory unavailable")
        return [build_chapter(n).summary() for n in range(1, 115)]

    async def fetch_chapter(self, number: int) -> Chapter:
        self.requests.append(number)
        await asyncio.sleep(self.delays.get(number, 0))
        if number in self.failing:
            raise ContentFetchError("chapter unavailable", chapter_number=number)
        return build_chapter(number)

    def load(self) -> None:
        self.loaded = True

    async def close(self) -> None:
        self.closed = True

    @property
    def is_loaded(self) -> bool:
        return self.loaded


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Keep process-wide settings and MUSHAF_ env vars from leaking between tests."""
    for name in list(os.environ):
        if name.startswith("MUSHAF_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _reset_logging():
    """main() installs a stream handler; drop it so later tests don't write to a closed capture."""
    yield
    logging.getLogger("mushaf").handlers.clear()


@pytest.fixture
def settings() -> MushafSettings:
    return MushafSettings()


@pytest.fixture
def fatiha() -> Chapter:
    return build_chapter(1)


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()
