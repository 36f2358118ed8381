from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

TokenTag = Literal["day", "month", "year", "unknown"]
Reliability = Literal["unambiguous", "resolved-unambiguously", "resolved-ambiguously", "unclear/invalid"]
Calendar = Literal["gregorian"]


class FieldKind(Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    INVALID = "invalid"


PossibilitySet = frozenset[FieldKind]

# One possibility set per token, in input order.
Pattern = tuple[PossibilitySet, ...]


@dataclass(frozen=True)
class Token:
    """A classified fragment of a date string."""

    tag: TokenTag
    value: int
    text: str = ""  # the fragment it was read from


@dataclass(frozen=True)
class ParsedDate:
    """Result of parsing one date string.

    day/month/year hold the numbers exactly as written; they are all None when
    the field order could not be determined.
    """

    reliability: Reliability
    day: int | None = None
    month: int | None = None
    year: int | None = None
    calendar: Calendar = "gregorian"

    @property
    def is_valid(self) -> bool:
        return self.reliability != "unclear/invalid"

    def as_dict(self) -> dict[str, object]:
        out: dict[str, object] = {"reliability": self.reliability, "calendar": self.calendar}
        for name in ("day", "month", "year"):
            v = getattr(self, name)
            if v is not None:
                out[name] = v
        return out


INVALID_DATE = ParsedDate(reliability="unclear/invalid")
