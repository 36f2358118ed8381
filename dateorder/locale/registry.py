from __future__ import annotations

from .base import LocaleConfigError, LocaleProvider, LocaleTable
from .builtin import BuiltinLocaleProvider, StaticLocaleProvider


def build_provider(name: str, **kwargs) -> LocaleProvider:
    """Locale provider factory.

    "static" needs a ready-made table=LocaleTable(...).
    """
    n = (name or "builtin").lower()
    if n in ("builtin", "bundled", "default"):
        return BuiltinLocaleProvider()
    if n == "static":
        table = kwargs.get("table")
        if not isinstance(table, LocaleTable):
            raise LocaleConfigError("Static locale provider needs table=LocaleTable(...)")
        return StaticLocaleProvider(table=table)

    raise ValueError(f"Unsupported locale provider: {name} (expected 'builtin' or 'static')")
