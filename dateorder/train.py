"""Learn field order from a list of exemplar dates.

Every exemplar is reduced to a pattern. Patterns that came out unambiguous are
evidence for a field order; ambiguous ones are mapped to the unambiguous
patterns they could be an instance of, most frequent first.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from .classify import TokenClassifier
from .expand import expand_tokens
from .reduce import format_pattern, is_unambiguous, reduce_pattern
from .types import FieldKind, Pattern

logger = logging.getLogger(__name__)

Candidates = tuple[tuple[Pattern, int], ...]
ResolutionTable = Mapping[Pattern, Candidates]


def tally_patterns(patterns: Iterable[Pattern]) -> Counter[Pattern]:
    """Count patterns by structural equality, keeping first-seen order."""

    counts: Counter[Pattern] = Counter()
    for p in patterns:
        counts[reduce_pattern(p)] += 1
    return counts


def formats_consistent(ambiguous: Pattern, unambiguous: Pattern) -> bool:
    """True if the unambiguous pattern is one possible reading of the ambiguous one."""

    if len(ambiguous) != len(unambiguous):
        return False
    return all(a & u for a, u in zip(ambiguous, unambiguous))


def build_resolution_table(frequencies: Mapping[Pattern, int]) -> dict[Pattern, Candidates]:
    resolved = [(p, n) for p, n in frequencies.items() if is_unambiguous(p)]
    table: dict[Pattern, Candidates] = {}

    for p in frequencies:
        if is_unambiguous(p) or any(FieldKind.INVALID in kinds for kinds in p):
            continue
        cands = [(u, n) for u, n in resolved if formats_consistent(p, u)]
        if not cands:
            logger.debug("No consistent training pattern for %s", format_pattern(p))
            continue
        # sort is stable: equal counts stay in discovery order
        cands.sort(key=lambda c: c[1], reverse=True)
        table[p] = tuple(cands)

    return table


def pattern_of(text: str, classifier: TokenClassifier) -> Pattern:
    return reduce_pattern(expand_tokens(classifier.classify(text)))


@dataclass(frozen=True)
class TrainedModel:
    """Pattern frequencies and the resolution table learned from exemplars."""

    frequencies: Mapping[Pattern, int]
    table: ResolutionTable
    size: int

    def candidates(self, pattern: Pattern) -> Candidates:
        return self.table.get(pattern, ())


def train(training_dates: Sequence[str], classifier: TokenClassifier) -> TrainedModel:
    freq = tally_patterns(pattern_of(s, classifier) for s in training_dates)
    table = build_resolution_table(freq)

    n_ambiguous = sum(1 for p in freq if not is_unambiguous(p))
    logger.debug(
        "Trained on %d dates: %d patterns, %d ambiguous (%d resolvable)",
        len(training_dates),
        len(freq),
        n_ambiguous,
        len(table),
    )

    return TrainedModel(
        frequencies=MappingProxyType(dict(freq)),
        table=MappingProxyType(table),
        size=len(training_dates),
    )
