from __future__ import annotations

import numbers
import re
from typing import Any, List, Optional, Pattern, Tuple, Union

Number = Union[int, float, numbers.Number]


class Str:
    """String helper class for scalar conversions used by the collection."""

    _numeric: Pattern[str] = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')
    _leading_numeric: Pattern[str] = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?')
    _digits: Pattern[str] = re.compile(r'(\d+)')

    @staticmethod
    def of(value: Any) -> str:
        """Convert a scalar to its string form (True -> "1", False/None -> "")."""
        if value is None or value is False:
            return ""
        if value is True:
            return "1"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @staticmethod
    def lower(value: str) -> str:
        """Convert the given string to lower-case."""
        return value.lower()

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """Determine if a value is a number or a numeric string."""
        if isinstance(value, bool):
            return False
        if isinstance(value, numbers.Number):
            return True
        return isinstance(value, str) and Str._numeric.match(value) is not None

    @staticmethod
    def _parse(text: str) -> Number:
        text = text.strip()
        if re.fullmatch(r'[+-]?\d+', text):
            return int(text)
        return float(text)

    @staticmethod
    def to_number(value: Any) -> Optional[Number]:
        """
        Convert a number-like value to a number, or None when it is not numeric.

        Numbers of any type (int, float, Decimal, Fraction) are returned as is,
        None counts as 0 and numeric strings are parsed to int or float.
        """
        if value is None:
            return 0
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, numbers.Number):
            return value
        if isinstance(value, str) and Str._numeric.match(value):
            return Str._parse(value)
        return None

    @staticmethod
    def leading_number(value: Any) -> Number:
        """Get the leading numeric portion of a value ("12abc" -> 12), 0 if none."""
        number = Str.to_number(value)
        if number is not None:
            return number

        match = Str._leading_numeric.match(value) if isinstance(value, str) else None
        if match:
            return Str._parse(match.group(0))
        return 0

    @staticmethod
    def natural_key(value: Any, case_sensitive: bool = True) -> List[Union[str, int]]:
        """Split a string into text and integer chunks for natural ordering.

        The result always alternates text, number, text, ... starting with a
        (possibly empty) text chunk, so two keys are comparable position by
        position.
        """
        text = Str.of(value).lstrip()
        if not case_sensitive:
            text = Str.lower(text)

        parts: List[Union[str, int]] = []
        for index, chunk in enumerate(Str._digits.split(text)):
            parts.append(int(chunk) if index % 2 else chunk)
        return parts

    @staticmethod
    def natural_compare(left: Any, right: Any, case_sensitive: bool = True) -> int:
        """Compare two values in natural order."""
        a = Str.natural_key(left, case_sensitive)
        b = Str.natural_key(right, case_sensitive)
        return (a > b) - (a < b)

    @staticmethod
    def split_last(subject: str, search: str) -> Tuple[str, str]:
        """Split a string at the last occurrence of a given value."""
        pos = subject.rfind(search)
        if pos == -1:
            return "", subject
        return subject[:pos], subject[pos + len(search):]
