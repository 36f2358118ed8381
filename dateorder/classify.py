from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

from .locale import LocaleTable
from .types import Token

# Dates carry at most day, month and year; anything past the third token is dropped.
MAX_TOKENS = 3

BARE_NUMBER_RE = re.compile(r"[0-9]{1,4}")


def _is_separator(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch).startswith("P")


def split_fragments(text: str) -> list[str]:
    """Split on Unicode punctuation and whitespace, dropping empty pieces."""

    out: list[str] = []
    cur: list[str] = []
    for ch in text:
        if _is_separator(ch):
            if cur:
                out.append("".join(cur))
                cur = []
        else:
            cur.append(ch)
    if cur:
        out.append("".join(cur))
    return out


def _ordinal_re(markers: frozenset[str]) -> re.Pattern[str] | None:
    if not markers:
        return None
    # Longest first so "ème" wins over "e".
    alts = "|".join(re.escape(m) for m in sorted(markers, key=lambda m: (-len(m), m)))
    return re.compile(rf"(?P<day>[0-9]{{1,2}})(?:{alts})", re.IGNORECASE)


@dataclass(frozen=True)
class TokenClassifier:
    """Turns a raw date string into at most three typed tokens."""

    table: LocaleTable
    _ordinal: re.Pattern[str] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ordinal", _ordinal_re(self.table.ordinal_markers))

    def classify_fragment(self, frag: str) -> Token | None:
        if self._ordinal is not None:
            m = self._ordinal.fullmatch(frag)
            if m:
                return Token(tag="day", value=int(m.group("day")), text=frag)

        month = self.table.months.get(frag.lower())
        if month is not None:
            return Token(tag="month", value=month, text=frag)

        if BARE_NUMBER_RE.fullmatch(frag):
            return Token(tag="unknown", value=int(frag), text=frag)

        return None

    def classify(self, text: str) -> tuple[Token, ...]:
        tokens: list[Token] = []
        for frag in split_fragments(text):
            tok = self.classify_fragment(frag)
            if tok is not None:
                tokens.append(tok)
        return tuple(tokens[:MAX_TOKENS])
