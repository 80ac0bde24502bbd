"""
Tajweed markup handling.

Native-script verse text may embed recitation-rule spans of the form
``<span class="tajweed-ham_wasl">ٱ</span>``. Only spans whose class carries the
tajweed prefix are interpreted; any other markup is kept verbatim.
"""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


TAJWEED_CLASS_PREFIX = "tajweed-"

# alquran.cloud "quran-tajweed" edition: [h:9421[ٱ] or [n[ـٰ]
_NOTATION_PATTERN = re.compile(r"\[([a-z])(?::\d+)?\[([^\[\]]*)\]")

_SPAN_PATTERN = re.compile(
    r"<span\s+class\s*=\s*(?P<quote>[\"']?)(?P<cls>[^\"'\s>]+)(?P=quote)\s*>"
    r"(?P<text>.*?)</span>",
    re.DOTALL,
)

_TAG_PATTERN = re.compile(r"<[^>]+>")

NOTATION_RULES = {
    "h": "ham_wasl",
    "s": "slnt",
    "l": "laam_shamsiyah",
    "n": "madda_normal",
    "p": "madda_permissible",
    "m": "madda_necessary",
    "o": "madda_obligatory",
    "q": "qalaqah",
    "c": "ikhafa_shafawi",
    "f": "ikhafa",
    "w": "idgham_shafawi",
    "i": "iqlab",
    "a": "idgham_ghunnah",
    "u": "idgham_wo_ghunnah",
    "d": "idgham_mutajanisayn",
    "b": "idgham_mutaqaribayn",
    "g": "ghunnah",
}

# 256-colour foregrounds approximating the usual printed tajweed palette
ANSI_COLORS = {
    "ham_wasl": 245,
    "slnt": 245,
    "laam_shamsiyah": 245,
    "madda_normal": 172,
    "madda_permissible": 208,
    "madda_necessary": 124,
    "madda_obligatory": 160,
    "qalaqah": 33,
    "ikhafa_shafawi": 170,
    "ikhafa": 97,
    "idgham_shafawi": 77,
    "iqlab": 39,
    "idgham_ghunnah": 169,
    "idgham_wo_ghunnah": 67,
    "idgham_mutajanisayn": 103,
    "idgham_mutaqaribayn": 67,
    "ghunnah": 208,
}

ANSI_RESET = "\x1b[0m"


class MarkupSpan(BaseModel):
    """
    A run of verse text with an optional tajweed rule.

    Attributes:
        text: The text of the run
        rule: Tajweed rule name (class name without prefix), None for plain text
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The text of the run")
    rule: Optional[str] = Field(default=None, description="Tajweed rule name")

    @property
    def is_plain(self) -> bool:
        return self.rule is None


def parse_tajweed(markup: str, prefix: str = TAJWEED_CLASS_PREFIX) -> list[MarkupSpan]:
    """
    Split marked-up verse text into spans.

    Args:
        markup: Raw verse text, possibly containing span markup
        prefix: Class prefix identifying a tajweed rule

    Returns:
        Spans in text order. Concatenating rule span texts with the plain
        span texts reproduces the input minus the recognized span tags.
    """
    spans: list[MarkupSpan] = []
    plain: list[str] = []
    position = 0

    def flush_plain() -> None:
        text = "".join(plain)
        if text:
            spans.append(MarkupSpan(text=text))
        plain.clear()

    for match in _SPAN_PATTERN.finditer(markup):
        class_name = match.group("cls")
        plain.append(markup[position:match.start()])
        position = match.end()

        if class_name.startswith(prefix) and len(class_name) > len(prefix):
            flush_plain()
            spans.append(MarkupSpan(text=match.group("text"), rule=class_name[len(prefix):]))
        else:
            plain.append(match.group(0))

    plain.append(markup[position:])
    flush_plain()
    return spans


def strip_markup(text: str) -> str:
    """Remove every markup tag, keeping the enclosed text."""
    if "<" not in text:
        return text
    return _TAG_PATTERN.sub("", text)


def convert_tajweed_notation(text: str, prefix: str = TAJWEED_CLASS_PREFIX) -> str:
    """
    Convert alquran.cloud bracket notation into span markup.

    ``[h:9421[ٱ]`` becomes ``<span class="tajweed-ham_wasl">ٱ</span>``.
    Unknown rule letters are left untouched.
    """
    if "[" not in text:
        return text

    def replace(match: re.Match) -> str:
        rule = NOTATION_RULES.get(match.group(1))
        if rule is None:
            return match.group(0)
        return f'<span class="{prefix}{rule}">{match.group(2)}</span>'

    return _NOTATION_PATTERN.sub(replace, text)


def render_ansi(spans: list[MarkupSpan]) -> str:
    """Render spans for a terminal, colouring known tajweed rules."""
    parts = []
    for span in spans:
        color = ANSI_COLORS.get(span.rule) if span.rule else None
        if color is None:
            parts.append(span.text)
        else:
            parts.append(f"\x1b[38;5;{color}m{span.text}{ANSI_RESET}")
    return "".join(parts)
