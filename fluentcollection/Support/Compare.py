from __future__ import annotations

import locale
from typing import Any, Callable, Mapping

from .Exceptions import InvalidArgumentException
from .Str import Str

# Sort directions
SORT_ASC = 4
SORT_DESC = 3

# Sort flags
SORT_REGULAR = 0
SORT_NUMERIC = 1
SORT_STRING = 2
SORT_LOCALE_STRING = 5
SORT_NATURAL = 6
SORT_FLAG_CASE = 8

Comparator = Callable[[Any, Any], int]


def _cmp(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _falsy(value: Any) -> bool:
    """Truthiness where the string "0" counts as false."""
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, Mapping):
        return len(value) == 0
    return not value


def compare_regular(left: Any, right: Any) -> int:
    """Compare two values the way a loosely typed sort would."""
    if left is None or right is None or isinstance(left, bool) or isinstance(right, bool):
        if isinstance(left, str) and right is None:
            return _cmp(left, "")
        if isinstance(right, str) and left is None:
            return _cmp("", right)
        return _cmp(not _falsy(left), not _falsy(right))

    if Str.is_numeric(left) and Str.is_numeric(right):
        return _cmp(Str.to_number(left), Str.to_number(right))

    if isinstance(left, str) and isinstance(right, str):
        return _cmp(left, right)

    try:
        return _cmp(left, right)
    except TypeError:
        # Incomparable types are grouped by type name
        if type(left) is not type(right):
            return _cmp(type(left).__name__, type(right).__name__)
        return _cmp(repr(left), repr(right))


def comparator(flag: int = SORT_REGULAR) -> Comparator:
    """Build a three-way comparison function for a sort flag."""
    case_insensitive = bool(flag & SORT_FLAG_CASE)
    mode = flag & ~SORT_FLAG_CASE

    if mode == SORT_REGULAR:
        return compare_regular

    if mode == SORT_NUMERIC:
        return lambda a, b: _cmp(Str.leading_number(a), Str.leading_number(b))

    if mode == SORT_STRING:
        if case_insensitive:
            return lambda a, b: _cmp(Str.lower(Str.of(a)), Str.lower(Str.of(b)))
        return lambda a, b: _cmp(Str.of(a), Str.of(b))

    if mode == SORT_LOCALE_STRING:
        return lambda a, b: locale.strcoll(Str.of(a), Str.of(b))

    if mode == SORT_NATURAL:
        return lambda a, b: Str.natural_compare(a, b, case_sensitive=not case_insensitive)

    raise InvalidArgumentException(f"Unsupported sort flag `{flag}`.")


def is_descending(direction: int) -> bool:
    """Check a sort direction, returning True for descending order."""
    if direction == SORT_ASC:
        return False
    if direction == SORT_DESC:
        return True
    raise InvalidArgumentException(
        f"Sort direction must be SORT_ASC ({SORT_ASC}) or SORT_DESC ({SORT_DESC}), got `{direction}`."
    )


def loose_equals(left: Any, right: Any) -> bool:
    """Loose equality: numeric strings equal numbers, None and bools compare by truthiness."""
    if left is None or right is None or isinstance(left, bool) or isinstance(right, bool):
        if left is None and isinstance(right, str):
            return right == ""
        if right is None and isinstance(left, str):
            return left == ""
        return _falsy(left) == _falsy(right)

    if Str.is_numeric(left) and Str.is_numeric(right):
        return Str.to_number(left) == Str.to_number(right)

    return bool(left == right)


def strict_equals(left: Any, right: Any) -> bool:
    """Strict equality: identical, or the same type and equal."""
    return left is right or (type(left) is type(right) and bool(left == right))
