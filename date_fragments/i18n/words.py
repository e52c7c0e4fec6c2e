"""
Word Recognizers

Builders for the language-specific recognizers. Every locale module declares
its vocabulary as immutable tables and turns them into parsers with these
helpers:
- relative_day: a fixed word meaning "today shifted by N days"
- current_weekday: a weekday name resolved inside the current week
- numeric_bundle: the strict numeric alternatives a bundle starts with
"""

from datetime import date
from typing import Callable, Mapping, Tuple

from dateutil.relativedelta import relativedelta, weekday

from date_fragments.combinators import require_date, tag_no_case
from date_fragments.errors import NonExistentDate
from date_fragments.types import Clock, ParseResult, local_today


def date_for_weekday(day: weekday, clock: Clock = local_today) -> date:
    """
    Date of the given weekday within the current Monday-based week

    Suppose today is Tuesday 16/07/2024: MO gives 15/07/2024 and SA gives
    20/07/2024. The result never wraps into the previous or next week.
    """
    today = clock()
    return today + relativedelta(days=day.weekday - today.weekday())


def relative_day(table: Mapping[str, int], literal: str) -> Callable[..., ParseResult[date]]:
    """Build a recognizer for ``literal`` returning today shifted by its table offset"""
    offset = table[literal]
    word = tag_no_case(literal)

    def parser(text: str, clock: Clock = local_today) -> ParseResult[date]:
        rest, _ = word(text)
        try:
            return rest, clock() + relativedelta(days=offset)
        except OverflowError:
            raise NonExistentDate(_consumed(text, rest))

    parser.__name__ = literal
    return parser


def current_weekday(named: Callable[[str], ParseResult[weekday]]) -> Callable[..., ParseResult[date]]:
    """Build a recognizer mapping a weekday name to its date in the current week"""

    def current_named_weekday_only(text: str, clock: Clock = local_today) -> ParseResult[date]:
        rest, day = named(text)
        try:
            return rest, date_for_weekday(day, clock)
        except OverflowError:
            # Week runs past date.min or date.max
            raise NonExistentDate(_consumed(text, rest))

    return current_named_weekday_only


def numeric_bundle(*parsers: Callable[..., ParseResult]) -> Tuple[Callable[..., ParseResult[date]], ...]:
    """Wrap numeric composites so that an absent date fails the alternative"""
    return tuple(require_date(p) for p in parsers)


def _consumed(text: str, rest: str) -> str:
    return text[:len(text) - len(rest)]
