"""Infer day/month/year order of numeric dates from the company they keep.

"2/3/2012" is ambiguous on its own. Trained on a list that also holds
"3/26/2012", the parser knows this source writes month before day.
"""

from .config import ParserPolicy
from .locale import LocaleConfigError, LocaleProvider, LocaleTable, build_provider
from .parser import DateParser, ParseTrace, create_date_parser, create_date_parser_from_env
from .types import FieldKind, ParsedDate, Token
