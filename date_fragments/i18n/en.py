"""
English Date Words

Relative days ("yesterday", "today", "tomorrow"), weekday names ("Mon",
"tues.", "Wednesday") and the English bundles combining them with the numeric
parsers in day-month-year and month-day-year order.
"""

from types import MappingProxyType

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE

from date_fragments.combinators import alt, terminated, word_table
from date_fragments.i18n.words import current_weekday, numeric_bundle, relative_day
from date_fragments.numeric import dd_mm_only, dd_mm_y4, dd_only, mm_dd_only, mm_dd_y4

# Offsets in days from today
RELATIVE_DAYS = MappingProxyType({
    'yesterday': -1,
    'today': 0,
    'tomorrow': 1,
})

SHORT_WEEKDAYS = MappingProxyType({
    'mon': MO,
    'tue': TU, 'tues': TU,
    'wed': WE,
    'thu': TH, 'thur': TH, 'thurs': TH,
    'fri': FR,
    'sat': SA,
    'sun': SU,
})

FULL_WEEKDAYS = MappingProxyType({
    'monday': MO,
    'tuesday': TU,
    'wednesday': WE,
    'thursday': TH,
    'friday': FR,
    'saturday': SA,
    'sunday': SU,
})

yesterday = relative_day(RELATIVE_DAYS, 'yesterday')
today = relative_day(RELATIVE_DAYS, 'today')
tomorrow = relative_day(RELATIVE_DAYS, 'tomorrow')

short_named_weekday = word_table(SHORT_WEEKDAYS, 'short_named_weekday')
short_named_weekday_dot = terminated(short_named_weekday, '.')
full_named_weekday = word_table(FULL_WEEKDAYS, 'full_named_weekday')

# Full names first, otherwise "monday" would stop after "mon"
named_weekday = alt(full_named_weekday, short_named_weekday_dot, short_named_weekday)

current_named_weekday_only = current_weekday(named_weekday)

WORDS = (yesterday, today, tomorrow, current_named_weekday_only)

bundle_dmy = alt(*numeric_bundle(dd_mm_y4, dd_mm_only, dd_only), *WORDS)

bundle_mdy = alt(*numeric_bundle(mm_dd_y4, mm_dd_only, dd_only), *WORDS)
