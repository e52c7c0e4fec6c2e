"""
Quick Offset Parsers

Recognizes "+ N" and "- N": the date N days after or before today.
"""

import re
from datetime import date

from dateutil.relativedelta import relativedelta

from date_fragments.combinators import alt
from date_fragments.errors import IntParseError, NoMatch, NonExistentDate
from date_fragments.types import Clock, ParseResult, local_today

FORWARD_RE = re.compile(r"\+[ \t]*([0-9]+)")
BACKWARD_RE = re.compile(r"-[ \t]*([0-9]+)")


def _shift(text: str, pattern: re.Pattern, sign: int, clock: Clock) -> ParseResult[date]:
    m = pattern.match(text)
    if not m:
        raise NoMatch(text, pattern.pattern)
    try:
        days = int(m.group(1))
    except ValueError as e:
        # Digit run past the interpreter's integer conversion limit
        raise IntParseError(m.group(1), e)
    try:
        shifted = clock() + relativedelta(days=sign * days)
    except (OverflowError, ValueError):
        # Offset leaves the representable calendar
        raise NonExistentDate(m.group(0))
    return text[m.end():], shifted


def forward_from_now(text: str, clock: Clock = local_today) -> ParseResult[date]:
    """
    Recognize "+ <days>" and return today plus that many days

    Spaces or tabs between the sign and the number are optional: "+42",
    "+ 42" and "+\\t42" are the same.
    """
    return _shift(text, FORWARD_RE, 1, clock)


def backward_from_now(text: str, clock: Clock = local_today) -> ParseResult[date]:
    """Recognize "- <days>" and return today minus that many days"""
    return _shift(text, BACKWARD_RE, -1, clock)


# "+ N" first, then "- N"
bundle = alt(forward_from_now, backward_from_now)
