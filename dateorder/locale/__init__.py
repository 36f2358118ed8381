"""Month-name and ordinal-marker tables used by the token classifier."""

from .base import LocaleConfigError, LocaleProvider, LocaleTable, merge_locale_tables, normalize_month_name
from .builtin import BuiltinLocaleProvider, StaticLocaleProvider
from .registry import build_provider
