from __future__ import annotations

from typing import Iterable

from .types import FieldKind, Pattern, PossibilitySet, Token

DAY = frozenset({FieldKind.DAY})
MONTH = frozenset({FieldKind.MONTH})
YEAR = frozenset({FieldKind.YEAR})
DAY_OR_YEAR = frozenset({FieldKind.DAY, FieldKind.YEAR})
ANY_FIELD = frozenset({FieldKind.DAY, FieldKind.MONTH, FieldKind.YEAR})
INVALID = frozenset({FieldKind.INVALID})


def expand_token(token: Token) -> PossibilitySet:
    """Return the field kinds a token could stand for."""

    if token.tag == "day":
        return DAY
    if token.tag == "month":
        return MONTH
    if token.tag == "year":
        return YEAR
    if token.tag == "unknown":
        v = token.value
        if v > 31:
            return YEAR
        if v > 12:
            return DAY_OR_YEAR
        if v > 0:
            return ANY_FIELD
        return INVALID
    raise ValueError(f"Unknown token tag: {token.tag!r}")


def expand_tokens(tokens: Iterable[Token]) -> Pattern:
    return tuple(expand_token(t) for t in tokens)
