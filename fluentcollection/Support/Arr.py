from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Union

from ..Contracts.ArrayAccess import ArrayAccess
from ..Utils.Logger import get_logger
from .Compare import SORT_ASC, SORT_REGULAR, comparator, is_descending
from .Exceptions import InvalidArgumentException, TypeMismatchException
from .Str import Str

Key = Union[int, str]

logger = get_logger()


class Arr:
    """Array helper class with dot notation and merge support."""

    @staticmethod
    def accessible(value: Any) -> bool:
        """Determine whether the given value is array accessible."""
        return isinstance(value, (Mapping, list, tuple, ArrayAccess))

    @staticmethod
    def to_dict(value: Any) -> Dict[Key, Any]:
        """Convert an array accessible value into an ordered dict."""
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, ArrayAccess):
            return dict(iter(value))
        if isinstance(value, (list, tuple)):
            return dict(enumerate(value))
        raise TypeMismatchException(
            "Value can not be used as an array.",
            expected="a mapping, list, tuple or collection",
            actual=value,
        )

    @staticmethod
    def next_index(data: Mapping[Key, Any]) -> int:
        """Get the integer key an appended value would receive."""
        indexes = [k for k in data if isinstance(k, int)]
        return max(indexes) + 1 if indexes and max(indexes) >= 0 else 0

    @staticmethod
    def normalize_key(value: Any, strict: bool = False) -> Key:
        """Cast a value to a valid array key.

        Integers and strings are kept. Unless ``strict`` is set, booleans and
        floats are cast to int and None becomes the empty string.
        """
        if isinstance(value, str) or (isinstance(value, int) and not isinstance(value, bool)):
            return value
        if not strict:
            if isinstance(value, bool):
                return int(value)
            if isinstance(value, float):
                return int(value)
            if value is None:
                return ""
        raise TypeMismatchException("Illegal offset type.", expected="int or str", actual=value)

    @staticmethod
    def _lookup(item: Any, key: Any, default: Any) -> Any:
        if isinstance(item, Mapping):
            return item[key] if key in item else default
        if isinstance(item, ArrayAccess):
            return Arr._lookup(Arr.to_dict(item), key, default)
        if isinstance(item, (list, tuple)):
            if isinstance(key, str) and key.isdigit():
                key = int(key)
            if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(item):
                return item[key]
            return default
        if item is None or isinstance(item, (str, int, float, bool)):
            return default
        if isinstance(key, str):
            return getattr(item, key, default)
        return default

    @staticmethod
    def get_value(item: Any, key: Any, default: Any = None) -> Any:
        """
        Retrieve the value of an array element or object property.

        ``key`` may be a callable receiving the item, a sequence of path
        segments, or a key. A string key is first looked up as-is; if that
        fails and it contains dots it is treated as a path, e.g. ``"x.y.z"``
        returns ``item["x"]["y"]["z"]``.
        """
        if callable(key):
            return key(item)

        if isinstance(key, (list, tuple)):
            if not key:
                return item
            *parents, key = key
            for segment in parents:
                item = Arr.get_value(item, segment)

        if isinstance(item, ArrayAccess):
            item = Arr.to_dict(item)

        if isinstance(item, Mapping) and not isinstance(key, (list, dict)) and key in item:
            return item[key]

        if isinstance(key, str) and '.' in key:
            prefix, key = Str.split_last(key, '.')
            item = Arr.get_value(item, prefix)

        return Arr._lookup(item, key, default)

    @staticmethod
    def merge(first: Any, *others: Any) -> Dict[Key, Any]:
        """
        Recursively merge two or more arrays.

        Integer keys that already exist get the value appended instead, string
        keys are overwritten, and array values under the same string key are
        merged recursively. A pair of lists merges into a list.
        """
        result = Arr.to_dict(first)

        for other in others:
            next_index = Arr.next_index(result)
            for key, value in Arr.to_dict(other).items():
                if isinstance(key, int):
                    if key in result:
                        result[next_index] = value
                        next_index += 1
                    else:
                        result[key] = value
                        next_index = max(next_index, key + 1)
                elif key in result and Arr.accessible(value) and Arr.accessible(result[key]):
                    result[key] = Arr._merge_nested(result[key], value)
                else:
                    result[key] = value

        return result

    @staticmethod
    def _merge_nested(first: Any, second: Any) -> Any:
        merged = Arr.merge(first, second)
        if isinstance(first, (list, tuple)) and isinstance(second, (list, tuple)):
            return list(merged.values())
        return merged

    @staticmethod
    def collapse(values: Iterable[Any]) -> Dict[Key, Any]:
        """Collapse an iterable of arrays into a single array.

        Integer keys are renumbered in order of appearance; later string keys
        overwrite earlier ones.
        """
        result: Dict[Key, Any] = {}
        index = 0
        for value in values:
            for key, item in Arr.to_dict(value).items():
                if isinstance(key, int):
                    result[index] = item
                    index += 1
                else:
                    result[key] = item
        return result

    @staticmethod
    def map(items: Iterable[Any], key_from: Callable[[Any], Any], value_from: Callable[[Any], Any]) -> Dict[Key, Any]:
        """Build a map (key-value pairs) from a list of arrays or objects."""
        result: Dict[Key, Any] = {}
        for item in items:
            key = Arr.normalize_key(key_from(item))
            if key in result:
                logger.debug("Duplicate key overwritten by remap", {'key': key})
            result[key] = value_from(item)
        return result

    @staticmethod
    def multisort(
        items: Sequence[Any],
        keys: Sequence[Callable[[Any], Any]],
        direction: Union[int, Sequence[int]] = SORT_ASC,
        flag: Union[int, Sequence[int]] = SORT_REGULAR,
    ) -> List[Any]:
        """
        Sort a list of arrays or objects by one or several keys.

        ``direction`` and ``flag`` apply to every key when scalar; when given
        as lists they must have one entry per key.
        """
        if not keys or not items:
            return list(items)

        count = len(keys)
        directions = Arr._per_key(direction, count, 'direction')
        flags = Arr._per_key(flag, count, 'flag')

        columns = [
            (extract, comparator(sort_flag), is_descending(sort_direction))
            for extract, sort_direction, sort_flag in zip(keys, directions, flags)
        ]

        def compare(left: Any, right: Any) -> int:
            for extract, compare_values, descending in columns:
                result = compare_values(extract(left), extract(right))
                if result:
                    return -result if descending else result
            return 0

        return sorted(items, key=cmp_to_key(compare))

    @staticmethod
    def _per_key(value: Union[int, Sequence[int]], count: int, name: str) -> List[int]:
        if isinstance(value, int):
            return [value] * count
        if len(value) != count:
            raise InvalidArgumentException(
                f"The length of the {name} parameter must be the same as that of the keys."
            )
        return list(value)
