from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .classify import TokenClassifier
from .config import ParserPolicy
from .expand import expand_tokens
from .locale import BuiltinLocaleProvider, LocaleConfigError, LocaleProvider, LocaleTable, build_provider
from .reduce import is_unambiguous, pattern_kinds, reduce_pattern
from .train import Candidates, TrainedModel, train
from .types import INVALID_DATE, FieldKind, ParsedDate, Pattern, Reliability, Token


@dataclass(frozen=True)
class ParseTrace:
    """Every intermediate step of one parse, for diagnostics."""

    text: str
    tokens: tuple[Token, ...]
    pattern: Pattern
    reduced: Pattern
    candidates: Candidates
    result: ParsedDate


def _assign(tokens: Sequence[Token], kinds: Sequence[FieldKind], reliability: Reliability) -> ParsedDate:
    fields: dict[str, int] = {}
    for tok, kind in zip(tokens, kinds):
        fields[kind.value] = tok.value
    return ParsedDate(
        reliability=reliability,
        day=fields.get("day"),
        month=fields.get("month"),
        year=fields.get("year"),
    )


@dataclass(frozen=True)
class DateParser:
    """Parses date strings using field order learned from exemplars.

    Immutable once built; safe to share between threads.
    """

    classifier: TokenClassifier
    model: TrainedModel

    def __call__(self, text: str) -> ParsedDate:
        return self.trace(text).result

    def parse(self, text: str) -> ParsedDate:
        return self.trace(text).result

    def parse_many(self, texts: Iterable[str]) -> list[ParsedDate]:
        return [self.parse(t) for t in texts]

    def trace(self, text: str) -> ParseTrace:
        tokens = self.classifier.classify(text)
        pattern = expand_tokens(tokens)
        reduced = reduce_pattern(pattern)

        if is_unambiguous(reduced):
            res = _assign(tokens, pattern_kinds(reduced), "unambiguous")
            return ParseTrace(text, tokens, pattern, reduced, (), res)

        cands = self.model.candidates(reduced)
        if not cands:
            return ParseTrace(text, tokens, pattern, reduced, (), INVALID_DATE)

        reliability: Reliability = "resolved-unambiguously" if len(cands) == 1 else "resolved-ambiguously"
        best, _count = cands[0]
        res = _assign(tokens, pattern_kinds(best), reliability)
        return ParseTrace(text, tokens, pattern, reduced, cands, res)


def _require_sequence(value: object, what: str) -> None:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"{what} must be a sequence of strings, not a single string: {value!r}")


def create_date_parser(
    training_dates: Sequence[str],
    locale_codes: Sequence[str],
    *,
    provider: LocaleProvider | None = None,
) -> DateParser:
    """Build a parser trained on `training_dates`.

    An empty training list is allowed; every ambiguous input then parses as
    unclear/invalid.
    """

    _require_sequence(training_dates, "training_dates")
    _require_sequence(locale_codes, "locale_codes")

    prov = provider if provider is not None else BuiltinLocaleProvider()
    table = prov.locale_table(list(locale_codes))
    if not isinstance(table, LocaleTable):
        raise LocaleConfigError(f"Locale provider {prov.name!r} returned no table for {list(locale_codes)}")

    classifier = TokenClassifier(table)
    return DateParser(classifier=classifier, model=train(list(training_dates), classifier))


def create_date_parser_from_env(
    training_dates: Sequence[str],
    *,
    policy: ParserPolicy | None = None,
) -> DateParser:
    pol = policy if policy is not None else ParserPolicy.from_env()
    return create_date_parser(training_dates, pol.locales, provider=build_provider(pol.provider))
