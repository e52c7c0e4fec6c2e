"""
Numeric Date Parsers

Recognizes numeric dates at the front of the input:
- Field recognizers: dd, mm, y4
- Separator: "/", "-", "." or a run of whitespace
- Composites: dd_only, dd_mm_only, mm_dd_only, y4_mm_dd, dd_mm_y4, mm_dd_y4

Field range violations (day 42, month 13) fail immediately. A combination that
passes the field checks but is not a real date (31/02) is not a failure: the
composite succeeds and yields None.
"""

import re
from datetime import date
from typing import Optional, Tuple

from date_fragments.combinators import parse_unsigned, take
from date_fragments.errors import DateParseError, DayOutOfRange, IntParseError, MonthOutOfRange, NoMatch
from date_fragments.types import Clock, ParseResult, local_today, make_date

SEPARATORS = ("/", "-", ".")
WHITESPACE_RE = re.compile(r"\s+")


def numeric_date_parts_separator(text: str) -> ParseResult[None]:
    """
    Recognize the separator between numeric date parts

    Accepts one of "/", "-", "." or one or more whitespace characters, so
    "13/07/2024", "13.07.2024" and "13  07\\t2024" are equivalent.
    """
    if text[:1] in SEPARATORS:
        return text[1:], None
    m = WHITESPACE_RE.match(text)
    if m:
        return text[m.end():], None
    raise NoMatch(text, "date parts separator")


def _one_or_two_digits(text: str) -> ParseResult[int]:
    # Two characters first, then a single one
    last_error: Optional[DateParseError] = None
    for width in (2, 1):
        try:
            rest, chunk = take(text, width)
        except NoMatch as e:
            last_error = e
            continue
        try:
            return rest, parse_unsigned(chunk)
        except ValueError as e:
            last_error = IntParseError(chunk, e)
    raise last_error


def dd(text: str) -> ParseResult[int]:
    """
    Recognize one or two digits of a day part

    Accepts 1..31 regardless of month, otherwise raises DayOutOfRange.
    """
    rest, day = _one_or_two_digits(text)
    if day == 0 or day > 31:
        raise DayOutOfRange(text, day)
    return rest, day


def mm(text: str) -> ParseResult[int]:
    """
    Recognize one or two digits of a month part

    Accepts 1..12, otherwise raises MonthOutOfRange.
    """
    rest, month = _one_or_two_digits(text)
    if month == 0 or month > 12:
        raise MonthOutOfRange(text, month)
    return rest, month


def y4(text: str) -> ParseResult[int]:
    """Recognize exactly four characters of a year part, 0000..9999"""
    rest, chunk = take(text, 4)
    try:
        return rest, parse_unsigned(chunk)
    except ValueError as e:
        raise IntParseError(chunk, e)


def dd_only(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """
    Recognize a day and complete it with the current month and year

    Returns None as the date if that day does not exist in the current month.
    """
    rest, day = dd(text)
    today = clock()
    return rest, make_date(today.year, today.month, day)


def dd_mm(text: str) -> ParseResult[Tuple[int, int]]:
    """Recognize the (day, month) parts separated by a date parts separator"""
    text, day = dd(text)
    text, _ = numeric_date_parts_separator(text)
    text, month = mm(text)
    return text, (day, month)


def dd_mm_only(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """Recognize day and month, completed with the current year"""
    rest, (day, month) = dd_mm(text)
    return rest, make_date(clock().year, month, day)


def mm_dd(text: str) -> ParseResult[Tuple[int, int]]:
    """Recognize the (month, day) parts separated by a date parts separator"""
    text, month = mm(text)
    text, _ = numeric_date_parts_separator(text)
    text, day = dd(text)
    return text, (month, day)


def mm_dd_only(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """Recognize month and day, completed with the current year"""
    rest, (month, day) = mm_dd(text)
    return rest, make_date(clock().year, month, day)


def y4_mm_dd(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """Recognize year-month-day, e.g. "2024-07-13" """
    text, year = y4(text)
    text, _ = numeric_date_parts_separator(text)
    text, month = mm(text)
    text, _ = numeric_date_parts_separator(text)
    text, day = dd(text)
    return text, make_date(year, month, day)


def dd_mm_y4(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """Recognize day-month-year, e.g. "13/07/2024" """
    text, day = dd(text)
    text, _ = numeric_date_parts_separator(text)
    text, month = mm(text)
    text, _ = numeric_date_parts_separator(text)
    text, year = y4(text)
    return text, make_date(year, month, day)


def mm_dd_y4(text: str, clock: Clock = local_today) -> ParseResult[Optional[date]]:
    """Recognize month-day-year, e.g. "07-13-2024" """
    text, month = mm(text)
    text, _ = numeric_date_parts_separator(text)
    text, day = dd(text)
    text, _ = numeric_date_parts_separator(text)
    text, year = y4(text)
    return text, make_date(year, month, day)
