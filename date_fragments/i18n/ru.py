"""
Russian Date Words

Relative days ("позавчера" .. "послезавтра"), weekday names ("пн", "Ср.",
"пятница") and the Russian bundles.
"""

from types import MappingProxyType

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE

from date_fragments.combinators import alt, terminated, word_table
from date_fragments.i18n.words import current_weekday, numeric_bundle, relative_day
from date_fragments.numeric import dd_mm_only, dd_mm_y4, dd_only, mm_dd_only, mm_dd_y4

RELATIVE_DAYS = MappingProxyType({
    'позавчера': -2,
    'вчера': -1,
    'сегодня': 0,
    'завтра': 1,
    'послезавтра': 2,
})

SHORT_WEEKDAYS = MappingProxyType({
    'пн': MO,
    'вт': TU,
    'ср': WE,
    'чт': TH,
    'пт': FR,
    'сб': SA,
    'вс': SU,
})

FULL_WEEKDAYS = MappingProxyType({
    'понедельник': MO,
    'вторник': TU,
    'среда': WE,
    'четверг': TH,
    'пятница': FR,
    'суббота': SA,
    'воскресенье': SU,
})

day_before_yesterday = relative_day(RELATIVE_DAYS, 'позавчера')
yesterday = relative_day(RELATIVE_DAYS, 'вчера')
today = relative_day(RELATIVE_DAYS, 'сегодня')
tomorrow = relative_day(RELATIVE_DAYS, 'завтра')
day_after_tomorrow = relative_day(RELATIVE_DAYS, 'послезавтра')

short_named_weekday = word_table(SHORT_WEEKDAYS, 'short_named_weekday')
short_named_weekday_dot = terminated(short_named_weekday, '.')
full_named_weekday = word_table(FULL_WEEKDAYS, 'full_named_weekday')

named_weekday = alt(full_named_weekday, short_named_weekday_dot, short_named_weekday)

current_named_weekday_only = current_weekday(named_weekday)

WORDS = (
    day_before_yesterday,
    yesterday,
    today,
    tomorrow,
    day_after_tomorrow,
    current_named_weekday_only,
)

bundle_dmy = alt(*numeric_bundle(dd_mm_y4, dd_mm_only, dd_only), *WORDS)

bundle_mdy = alt(*numeric_bundle(mm_dd_y4, mm_dd_only, dd_only), *WORDS)

# Day-first is the Russian convention
bundle = bundle_dmy
