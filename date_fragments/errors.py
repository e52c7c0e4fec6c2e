"""
Parse Errors

Every recognizer in the package fails by raising one of the exceptions below.
They all derive from DateParseError, which is what the ordered alternation
catches; anything else propagates untouched.
"""

from typing import Optional


class DateParseError(ValueError):
    """Base class for recognition failures"""

    def __init__(self, input: str, message: Optional[str] = None):
        """
        Args:
            input: The input the failure refers to
            message: Optional human readable description
        """
        self.input = input
        super().__init__(message or f"{self.__class__.__name__} at {input!r}")


class DayOutOfRange(DateParseError):
    """Day field outside 1..31"""

    def __init__(self, input: str, value: int):
        self.value = value
        super().__init__(input, f"day {value} is out of range 1..31")


class MonthOutOfRange(DateParseError):
    """Month field outside 1..12"""

    def __init__(self, input: str, value: int):
        self.value = value
        super().__init__(input, f"month {value} is out of range 1..12")


class NonExistentDate(DateParseError):
    """Recognized fields do not form a real calendar date"""

    def __init__(self, input: str):
        super().__init__(input, f"no such calendar date: {input!r}")


class IntParseError(DateParseError):
    """Field characters could not be converted to an unsigned integer"""

    def __init__(self, input: str, cause: ValueError):
        self.cause = cause
        super().__init__(input, f"cannot parse integer from {input!r}: {cause}")
        self.__cause__ = cause


class NoMatch(DateParseError):
    """The pattern does not apply to the input"""

    def __init__(self, input: str, expected: str):
        self.expected = expected
        super().__init__(input, f"expected {expected} at {input!r}")
