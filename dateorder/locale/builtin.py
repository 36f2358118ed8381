from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .base import LocaleConfigError, LocaleProvider, LocaleTable, merge_locale_tables


def _months(*groups: tuple[str, ...]) -> dict[str, int]:
    out: dict[str, int] = {}
    for num, names in enumerate(groups, start=1):
        for name in names:
            out[name] = num
    return out


# Full names first, then common abbreviations (without trailing period).
MONTHS: dict[str, dict[str, int]] = {
    "en": _months(
        ("january", "jan"),
        ("february", "feb"),
        ("march", "mar"),
        ("april", "apr"),
        ("may",),
        ("june", "jun"),
        ("july", "jul"),
        ("august", "aug"),
        ("september", "sep", "sept"),
        ("october", "oct"),
        ("november", "nov"),
        ("december", "dec"),
    ),
    "fr": _months(
        ("janvier", "janv"),
        ("février", "févr"),
        ("mars",),
        ("avril", "avr"),
        ("mai",),
        ("juin",),
        ("juillet", "juil"),
        ("août",),
        ("septembre", "sept"),
        ("octobre", "oct"),
        ("novembre", "nov"),
        ("décembre", "déc"),
    ),
    "de": _months(
        ("januar", "jan"),
        ("februar", "feb"),
        ("märz", "mär"),
        ("april", "apr"),
        ("mai",),
        ("juni", "jun"),
        ("juli", "jul"),
        ("august", "aug"),
        ("september", "sep", "sept"),
        ("oktober", "okt"),
        ("november", "nov"),
        ("dezember", "dez"),
    ),
    "es": _months(
        ("enero", "ene"),
        ("febrero", "feb"),
        ("marzo", "mar"),
        ("abril", "abr"),
        ("mayo", "may"),
        ("junio", "jun"),
        ("julio", "jul"),
        ("agosto", "ago"),
        ("septiembre", "setiembre", "sept", "sep"),
        ("octubre", "oct"),
        ("noviembre", "nov"),
        ("diciembre", "dic"),
    ),
    "it": _months(
        ("gennaio", "gen"),
        ("febbraio", "feb"),
        ("marzo", "mar"),
        ("aprile", "apr"),
        ("maggio", "mag"),
        ("giugno", "giu"),
        ("luglio", "lug"),
        ("agosto", "ago"),
        ("settembre", "set"),
        ("ottobre", "ott"),
        ("novembre", "nov"),
        ("dicembre", "dic"),
    ),
    "nl": _months(
        ("januari", "jan"),
        ("februari", "feb"),
        ("maart", "mrt"),
        ("april", "apr"),
        ("mei",),
        ("juni", "jun"),
        ("juli", "jul"),
        ("augustus", "aug"),
        ("september", "sep", "sept"),
        ("oktober", "okt"),
        ("november", "nov"),
        ("december", "dec"),
    ),
    "pt": _months(
        ("janeiro", "jan"),
        ("fevereiro", "fev"),
        ("março", "mar"),
        ("abril", "abr"),
        ("maio", "mai"),
        ("junho", "jun"),
        ("julho", "jul"),
        ("agosto", "ago"),
        ("setembro", "set"),
        ("outubro", "out"),
        ("novembro", "nov"),
        ("dezembro", "dez"),
    ),
}

ORDINAL_MARKERS: dict[str, frozenset[str]] = {
    "en": frozenset({"st", "nd", "rd", "th"}),
    "fr": frozenset({"er", "re", "e", "ème", "eme"}),
    "de": frozenset(),  # "1." loses its period when the string is split
    "es": frozenset({"º", "ª", "o"}),
    "it": frozenset({"º", "°"}),
    "nl": frozenset({"e", "ste", "de"}),
    "pt": frozenset({"º", "ª", "o"}),
}


def _primary_subtag(code: str) -> str:
    return code.strip().replace("_", "-").split("-", 1)[0].lower()


@dataclass
class BuiltinLocaleProvider(LocaleProvider):
    """Month and ordinal tables bundled with the package."""

    name: str = "builtin"

    @staticmethod
    def supported() -> list[str]:
        return sorted(MONTHS)

    def locale_table(self, codes: Sequence[str]) -> LocaleTable:
        if not codes:
            raise LocaleConfigError("No locale codes given")

        named: list[tuple[str, LocaleTable]] = []
        for code in codes:
            lang = _primary_subtag(str(code))
            if lang not in MONTHS:
                raise LocaleConfigError(
                    f"Unsupported locale: {code!r} (builtin locales: {', '.join(self.supported())})"
                )
            named.append((lang, LocaleTable(months=MONTHS[lang], ordinal_markers=ORDINAL_MARKERS[lang])))
        return merge_locale_tables(named)


@dataclass
class StaticLocaleProvider(LocaleProvider):
    """Returns one fixed table whatever codes are asked for."""

    table: LocaleTable
    name: str = "static"

    def locale_table(self, codes: Sequence[str]) -> LocaleTable:
        return self.table
