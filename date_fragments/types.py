"""Shared types: parse results, the clock and safe date construction."""

from datetime import date
from typing import Callable, Optional, Tuple, TypeVar

T = TypeVar("T")

# (remaining input, produced value)
ParseResult = Tuple[str, T]

Clock = Callable[[], date]


def local_today() -> date:
    """Current local date, the default clock for every recognizer"""
    return date.today()


def make_date(year: int, month: int, day: int) -> Optional[date]:
    """Build a date, or return None if the combination does not exist"""
    try:
        return date(year, month, day)
    except ValueError:
        return None
