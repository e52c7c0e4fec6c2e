"""
date-fragments

Composable recognizers for dates at the front of short text fragments:
numeric dates ("13/07/2024", "07-13", "9"), quick offsets ("+ 10") and
language-specific words ("завтра", "Wednesday").

Every recognizer takes the remaining input and returns (remaining, value), or
raises a DateParseError subclass.
"""

from date_fragments.errors import (
    DateParseError,
    DayOutOfRange,
    IntParseError,
    MonthOutOfRange,
    NoMatch,
    NonExistentDate,
)
from date_fragments.numeric import (
    dd,
    dd_mm,
    dd_mm_only,
    dd_mm_y4,
    dd_only,
    mm,
    mm_dd,
    mm_dd_only,
    mm_dd_y4,
    numeric_date_parts_separator,
    y4,
    y4_mm_dd,
)
from date_fragments import quick
from date_fragments.i18n import en, get_bundle, ru
from date_fragments.types import local_today, make_date

__version__ = "1.1.0"
