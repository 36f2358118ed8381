from __future__ import annotations

import pytest

from dateorder.expand import expand_token, expand_tokens
from dateorder.reduce import format_pattern, is_unambiguous, pattern_kinds, reduce_pattern
from dateorder.types import FieldKind, Token

D, M, Y, X = FieldKind.DAY, FieldKind.MONTH, FieldKind.YEAR, FieldKind.INVALID


def _p(*sets: set) -> tuple[frozenset, ...]:
    return tuple(frozenset(s) for s in sets)


def _unknown(v: int) -> Token:
    return Token(tag="unknown", value=v)


def test_expand_explicit_tags() -> None:
    assert expand_token(Token(tag="day", value=40)) == {D}
    assert expand_token(Token(tag="month", value=3)) == {M}
    assert expand_token(Token(tag="year", value=5)) == {Y}


def test_expand_unknown_by_magnitude() -> None:
    assert expand_token(_unknown(2012)) == {Y}
    assert expand_token(_unknown(32)) == {Y}
    assert expand_token(_unknown(31)) == {D, Y}
    assert expand_token(_unknown(13)) == {D, Y}
    assert expand_token(_unknown(12)) == {D, M, Y}
    assert expand_token(_unknown(1)) == {D, M, Y}
    assert expand_token(_unknown(0)) == {X}


def test_expand_rejects_unknown_tag() -> None:
    with pytest.raises(ValueError):
        expand_token(Token(tag="weekday", value=1))  # type: ignore[arg-type]


def test_reduce_resolves_day_first() -> None:
    raw = expand_tokens([_unknown(14), _unknown(3), _unknown(2012)])
    assert raw == _p({D, Y}, {D, M, Y}, {Y})
    assert reduce_pattern(raw) == _p({D}, {M}, {Y})


def test_reduce_stops_at_fixed_point() -> None:
    raw = _p({D, M, Y}, {D, M, Y}, {Y})
    assert reduce_pattern(raw) == _p({D, M}, {D, M}, {Y})


def test_reduce_leaves_forced_position_untouched() -> None:
    assert reduce_pattern(_p({M}, {D, M, Y}, {Y})) == _p({M}, {D}, {Y})


def test_reduce_conflicting_singletons_empty_a_position() -> None:
    out = reduce_pattern(_p({Y}, {Y}, {D, M}))
    assert out == _p({Y}, set(), {D, M})
    assert not is_unambiguous(out)


def test_reduce_is_idempotent() -> None:
    samples = [
        _p({D, Y}, {D, M, Y}, {Y}),
        _p({D, M, Y}, {D, M, Y}, {Y}),
        _p({Y}, {Y}, {D, M}),
        _p({X}, {D, M, Y}),
        _p(),
    ]
    for p in samples:
        once = reduce_pattern(p)
        assert reduce_pattern(once) == once


def test_is_unambiguous() -> None:
    assert is_unambiguous(_p({D}, {M}, {Y}))
    assert is_unambiguous(_p({M}, {Y}))
    assert not is_unambiguous(_p())
    assert not is_unambiguous(_p({X}, {M}, {Y}))
    assert not is_unambiguous(_p({D, M}, {D, M}, {Y}))


def test_pattern_kinds() -> None:
    assert pattern_kinds(_p({M}, {D}, {Y})) == (M, D, Y)
    with pytest.raises(ValueError):
        pattern_kinds(_p({D, M}, {Y}))


def test_format_pattern() -> None:
    assert format_pattern(_p({M, D}, {D, M}, {Y})) == "[day|month] [day|month] [year]"
    assert format_pattern(_p()) == "[]"
