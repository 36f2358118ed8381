from __future__ import annotations

from .types import FieldKind, Pattern


def reduce_pattern(pattern: Pattern) -> Pattern:
    """Narrow a pattern by constraint propagation.

    Whenever a position holds a single kind not seen before, that kind is
    removed from every other position. Stops when no new singleton turns up;
    the result may still hold several kinds per position (or none at all, when
    two positions were forced to the same kind).
    """

    work = [set(kinds) for kinds in pattern]
    resolved: set[FieldKind] = set()

    while True:
        found: tuple[int, FieldKind] | None = None
        for i, kinds in enumerate(work):
            if len(kinds) == 1:
                (kind,) = kinds
                if kind not in resolved:
                    found = (i, kind)
                    break
        if found is None:
            break

        i, kind = found
        resolved.add(kind)
        for j, kinds in enumerate(work):
            if j != i:
                kinds.discard(kind)

    return tuple(frozenset(kinds) for kinds in work)


def is_unambiguous(pattern: Pattern) -> bool:
    if not pattern:
        return False
    for kinds in pattern:
        if len(kinds) != 1 or FieldKind.INVALID in kinds:
            return False
    return True


def pattern_kinds(pattern: Pattern) -> tuple[FieldKind, ...]:
    """Single kind per position of an unambiguous pattern."""

    if not is_unambiguous(pattern):
        raise ValueError(f"Pattern is ambiguous: {format_pattern(pattern)}")
    return tuple(next(iter(kinds)) for kinds in pattern)


def format_pattern(pattern: Pattern) -> str:
    """Compact text form, e.g. "[day|month] [day|month] [year]"."""

    order = {FieldKind.DAY: 0, FieldKind.MONTH: 1, FieldKind.YEAR: 2, FieldKind.INVALID: 3}
    parts = []
    for kinds in pattern:
        names = [k.value for k in sorted(kinds, key=order.__getitem__)]
        parts.append("[" + "|".join(names) + "]")
    return " ".join(parts) or "[]"
