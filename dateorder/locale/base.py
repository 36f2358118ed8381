from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)


class LocaleConfigError(ValueError):
    """Raised when locale data is missing or malformed at parser construction."""


def normalize_month_name(name: str) -> str:
    name = name.strip()
    if name.endswith("."):
        name = name[:-1]
    return name.lower()


@dataclass(frozen=True)
class LocaleTable:
    """Month names/abbreviations -> month number, plus ordinal markers ("st", "nd", ...)."""

    months: Mapping[str, int] = field(default_factory=dict)
    ordinal_markers: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        months: dict[str, int] = {}
        for name, num in self.months.items():
            key = normalize_month_name(str(name))
            if not key:
                raise LocaleConfigError(f"Empty month name in locale table (month {num})")
            if not isinstance(num, int) or not 1 <= num <= 12:
                raise LocaleConfigError(f"Month number out of range for {name!r}: {num!r}")
            months[key] = num
        markers = frozenset(m.strip().lower() for m in self.ordinal_markers if m and m.strip())
        object.__setattr__(self, "months", MappingProxyType(months))
        object.__setattr__(self, "ordinal_markers", markers)


class LocaleProvider(ABC):
    name: str

    @abstractmethod
    def locale_table(self, codes: Sequence[str]) -> LocaleTable:
        """Return the merged month/ordinal table for the given language codes."""
        raise NotImplementedError


def merge_locale_tables(named_tables: Iterable[tuple[str, LocaleTable]]) -> LocaleTable:
    """Merge per-language tables into one.

    Later tables win when two languages map the same month name to different
    numbers; each such conflict is logged as a warning.
    """

    months: dict[str, int] = {}
    owner: dict[str, str] = {}
    markers: set[str] = set()

    for code, table in named_tables:
        for name, num in table.months.items():
            prev = months.get(name)
            if prev is not None and prev != num:
                logger.warning(
                    "Month name %r is %d in %s but %d in %s; using %d",
                    name,
                    prev,
                    owner[name],
                    num,
                    code,
                    num,
                )
            months[name] = num
            owner[name] = code
        markers.update(table.ordinal_markers)

    return LocaleTable(months=months, ordinal_markers=frozenset(markers))
