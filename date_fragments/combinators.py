"""
Parser Combinators

Small building blocks shared by the numeric and language-specific recognizers.

A parser is a callable taking the remaining input (plus, for date-yielding
parsers, a ``clock`` keyword) and returning ``(remaining, value)``. Failures
are raised as DateParseError subclasses, so that ``alt`` can retry the next
alternative from the very same input.
"""

import logging
import re
from functools import wraps
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, TypeVar

from date_fragments.errors import DateParseError, NoMatch, NonExistentDate
from date_fragments.types import Clock, ParseResult, local_today

logger = logging.getLogger("date_fragments.combinators")

T = TypeVar("T")

# Unsigned integer conversion: optional plus sign, then ASCII digits
UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(chunk: str) -> int:
    """Convert a chunk to an unsigned integer, raising ValueError otherwise"""
    if not UNSIGNED_RE.fullmatch(chunk):
        raise ValueError(f"invalid digit found in {chunk!r}")
    return int(chunk)


def take(text: str, count: int) -> Tuple[str, str]:
    """Split off exactly ``count`` characters from the front of the input"""
    if len(text) < count:
        raise NoMatch(text, f"{count} characters")
    return text[count:], text[:count]


def tag_no_case(literal: str) -> Callable[[str], ParseResult[str]]:
    """Build a parser recognizing ``literal`` case-insensitively"""
    lowered = literal.lower()
    size = len(literal)

    def parser(text: str) -> ParseResult[str]:
        head = text[:size]
        if head.lower() != lowered:
            raise NoMatch(text, repr(literal))
        return text[size:], head

    parser.__name__ = f"tag_no_case({literal!r})"
    return parser


def word_table(table: Dict[str, T], name: str) -> Callable[[str], ParseResult[T]]:
    """
    Build a parser over an immutable word table

    Literals are matched case-insensitively at the front of the input, longest
    literal first, and the matched literal's tag is returned.

    Args:
        table: Mapping from literal to semantic tag
        name: Parser name used in errors and logs

    Returns:
        Parser yielding the tag of the matched literal
    """
    frozen: Mapping[str, T] = MappingProxyType({k.lower(): v for k, v in table.items()})
    literals = sorted(frozen, key=len, reverse=True)

    def parser(text: str) -> ParseResult[T]:
        for literal in literals:
            head = text[:len(literal)]
            if head.lower() == literal:
                return text[len(literal):], frozen[literal]
        raise NoMatch(text, name)

    parser.__name__ = name
    parser.table = frozen
    return parser


def terminated(parser: Callable[[str], ParseResult[T]], literal: str) -> Callable[[str], ParseResult[T]]:
    """Run ``parser`` and then require ``literal`` right after it"""

    def terminated_parser(text: str) -> ParseResult[T]:
        rest, value = parser(text)
        if not rest.startswith(literal):
            raise NoMatch(rest, repr(literal))
        return rest[len(literal):], value

    terminated_parser.__name__ = f"{_name(parser)}+{literal!r}"
    return terminated_parser


def alt(*parsers: Callable[..., ParseResult[Any]]) -> Callable[..., ParseResult[Any]]:
    """
    Ordered alternation

    Tries every parser in order against the same input and returns the first
    success. If every alternative fails, the failure of the last one is
    raised; earlier failures are discarded.
    """
    if not parsers:
        raise ValueError("alt() requires at least one parser")

    def alternation(text: str, **kwargs) -> ParseResult[Any]:
        last_error: Optional[DateParseError] = None
        for parser in parsers:
            try:
                result = parser(text, **kwargs)
            except DateParseError as e:
                last_error = e
                continue
            logger.debug(f"{_name(parser)} matched {text!r}")
            return result
        raise last_error

    alternation.__name__ = "alt(" + ", ".join(_name(p) for p in parsers) + ")"
    alternation.alternatives = parsers
    return alternation


def require_date(parser: Callable[..., ParseResult[Any]]) -> Callable[..., ParseResult[Any]]:
    """Turn an absent date produced by ``parser`` into a NonExistentDate failure"""

    @wraps(parser)
    def strict(text: str, clock: Clock = local_today) -> ParseResult[Any]:
        rest, value = parser(text, clock=clock)
        if value is None:
            raise NonExistentDate(text[:len(text) - len(rest)])
        return rest, value

    return strict


def _name(parser: Callable) -> str:
    return getattr(parser, "__name__", repr(parser))
