from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Tuple, Union, TYPE_CHECKING
from functools import cmp_to_key, partial, reduce
from types import BuiltinFunctionType, FunctionType, MappingProxyType, MethodType
import inspect
import json

from ..Contracts.ArrayAccess import ArrayAccess
from ..Utils.Logger import get_logger
from .Arr import Arr
from .Compare import (
    SORT_ASC,
    SORT_FLAG_CASE,
    SORT_NATURAL,
    SORT_REGULAR,
    compare_regular,
    comparator,
    is_descending,
    loose_equals,
    strict_equals,
)
from .Exceptions import KeyNotFoundException, TypeMismatchException
from .Str import Number, Str
from .Types import FieldLike, Key, T, U, field

if TYPE_CHECKING:
    from typing_extensions import Self

logger = get_logger()

Items = Union[Mapping[Key, T], Iterable[T], 'Collection[T]', None]


def _is_matcher(item: Any) -> bool:
    """Check whether a search item is a function to call rather than a value to compare."""
    return isinstance(item, (FunctionType, BuiltinFunctionType, MethodType, partial))


def _wants_key(callback: Callable[..., Any]) -> bool:
    """Check whether a callback accepts a second positional argument."""
    try:
        parameters = inspect.signature(callback).parameters.values()
    except (TypeError, ValueError):
        return False

    positional = 0
    for parameter in parameters:
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


class Collection(ArrayAccess, Generic[T]):
    """
    Immutable, ordered key/value collection.

    Every transformation returns a new collection and leaves the original
    untouched::

        Collection([1, 2, 3]).map(lambda i: i + 1).filter(lambda i: i < 4).sum()  # 5

    Keys are integers or strings. Lists and other iterables are indexed from 0.
    Bracket access reads, writes and deletes single keys; writes and deletes
    swap in a new internal dict so a mapping handed to the constructor is
    never modified.
    """

    def __init__(self, data: Items[T] = None):
        if data is None:
            self._data: Dict[Key, T] = {}
        elif isinstance(data, dict):
            self._data = data
        elif isinstance(data, Collection):
            self._data = data._data
        elif isinstance(data, Mapping):
            self._data = dict(data)
        elif isinstance(data, (str, bytes)):
            raise TypeMismatchException(
                "Collection data must be a mapping or an iterable of items.",
                expected="a mapping or iterable",
                actual=data,
            )
        else:
            self._data = dict(enumerate(data))

    @classmethod
    def make(cls, data: Items[T] = None) -> 'Collection[T]':
        """Create a new collection instance."""
        return cls(data)

    def _new(self, data: Any) -> 'Self':
        return type(self)(data)

    # Accessors
    def get_data(self) -> Mapping[Key, T]:
        """Get a read-only view of the data contained in this collection."""
        return MappingProxyType(self._data)

    def has(self, key: Key) -> bool:
        """Check if a key exists and holds a value other than None."""
        try:
            key = Arr.normalize_key(key)
        except TypeMismatchException:
            return False
        return self._data.get(key) is not None

    def get(self, key: Key) -> T:
        """Get the value stored at a key."""
        try:
            return self._data[Arr.normalize_key(key)]
        except KeyError:
            logger.debug("Undefined collection key", {'key': key})
            raise KeyNotFoundException(key) from None

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return self.count() == 0

    def count(self) -> int:
        """Get the number of items."""
        return len(self._data)

    def all(self) -> List[T]:
        """Get all values as a list."""
        return list(self._data.values())

    def to_list(self) -> List[T]:
        """Convert to list."""
        return self.all()

    def to_dict(self) -> Dict[Key, T]:
        """Get a shallow copy of the data."""
        return dict(self._data)

    def to_json(self) -> str:
        """Convert collection to JSON."""
        def encode(value: Any) -> Any:
            if isinstance(value, Collection):
                return value.to_dict()
            if hasattr(value, 'to_dict'):
                return value.to_dict()
            if hasattr(value, '__dict__'):
                return vars(value)
            return str(value)

        return json.dumps(self._data, default=encode)

    # Transforming
    def map(self, callback: Callable[[T], U]) -> 'Collection[U]':
        """Apply a callback to every value, keeping keys."""
        return self._new({key: callback(value) for key, value in self._data.items()})

    def flat_map(self, callback: Callable[[T], Any]) -> 'Collection[Any]':
        """Map every value to an array and merge the results into one collection."""
        return self.map(callback).collapse()

    def collapse(self) -> 'Collection[Any]':
        """
        Merge all sub arrays into one collection.

        ``Collection([[1, 2], [3, 4]]).collapse()`` holds ``{0: 1, 1: 2, 2: 3, 3: 4}``.
        Integer keys are renumbered, string keys overwrite earlier ones.
        Every value must be a mapping, list, tuple or collection.
        """
        try:
            return self._new(Arr.collapse(self._data.values()))
        except TypeMismatchException as e:
            logger.debug("Unable to collapse collection", {'actual': e.actual})
            raise

    def filter(self, callback: Optional[Callable[..., Any]] = None) -> 'Self':
        """
        Keep the entries a callback accepts.

        The callback receives ``(value, key)``, or only the value when it takes
        a single argument. Without a callback falsy values are removed.
        """
        if callback is None:
            return self._new({key: value for key, value in self._data.items() if value})

        if _wants_key(callback):
            return self._new({key: value for key, value in self._data.items() if callback(value, key)})
        return self._new({key: value for key, value in self._data.items() if callback(value)})

    def reduce(self, callback: Callable[[Any, T], Any], initial: Any = None) -> Any:
        """Reduce the values to a single value, starting from ``initial``."""
        return reduce(callback, self._data.values(), initial)

    # Aggregating
    def _number(self, value: Any) -> Number:
        number = Str.to_number(value)
        if number is None:
            logger.debug("Non-numeric value in arithmetic", {'value': value})
            raise TypeMismatchException(
                "Unsupported operand for arithmetic.",
                expected="a number or numeric string",
                actual=value,
            )
        return number

    def sum(self, key: FieldLike = None) -> Number:
        """Sum the values or a field of the values."""
        spec = field(key)
        result = self.reduce(lambda carry, item: (carry or 0) + self._number(spec.extract(item, 0)))
        return 0 if result is None else result

    def _extreme(self, key: FieldLike, wanted: int) -> Any:
        spec = field(key)

        def pick(carry: Any, item: Any) -> Any:
            value = spec.extract(item, 0)
            value = 0 if value is None else value
            if carry is None:
                return value
            return value if compare_regular(value, carry) == wanted else carry

        result = self.reduce(pick)
        if result is None:
            return 0
        return result if Str.to_number(result) is None else Str.to_number(result)

    def max(self, key: FieldLike = None) -> Any:
        """Get the maximum of the values or a field of the values, 0 if empty."""
        return self._extreme(key, 1)

    def min(self, key: FieldLike = None) -> Any:
        """Get the minimum of the values or a field of the values, 0 if empty."""
        return self._extreme(key, -1)

    # Sorting
    def _sort_items(self, index: int, direction: int, flag: int) -> 'Self':
        compare = comparator(flag)
        items = sorted(
            self._data.items(),
            key=cmp_to_key(lambda a, b: compare(a[index], b[index])),
            reverse=is_descending(direction),
        )
        return self._new(dict(items))

    def sort(self, direction: int = SORT_ASC, flag: int = SORT_REGULAR) -> 'Self':
        """
        Sort by value, keeping keys.

        ``direction`` is ``SORT_ASC`` or ``SORT_DESC``; ``flag`` is one of
        ``SORT_REGULAR``, ``SORT_NUMERIC``, ``SORT_STRING``,
        ``SORT_LOCALE_STRING`` or ``SORT_NATURAL``, optionally combined with
        ``SORT_FLAG_CASE``. Use :meth:`sort_by` for non-scalar values.
        """
        return self._sort_items(1, direction, flag)

    def sort_by_key(self, direction: int = SORT_ASC, flag: int = SORT_REGULAR) -> 'Self':
        """Sort by key; see :meth:`sort` for the arguments."""
        return self._sort_items(0, direction, flag)

    def sort_natural(self, case_sensitive: bool = False) -> 'Self':
        """Sort by value in natural order ("img2" before "img10"), keeping keys."""
        flag = SORT_NATURAL if case_sensitive else SORT_NATURAL | SORT_FLAG_CASE
        return self.sort(SORT_ASC, flag)

    def sort_by(
        self,
        key: Union[FieldLike, List[FieldLike]],
        direction: Union[int, List[int]] = SORT_ASC,
        flag: Union[int, List[int]] = SORT_REGULAR,
    ) -> 'Self':
        """
        Sort by one or several fields of the values.

        ``key`` is a field (key name, dotted path, path tuple or callable) or a
        list of fields. ``direction`` and ``flag`` may be lists with one entry
        per field. Keys are not preserved: the result is indexed from 0.
        """
        keys = key if isinstance(key, list) else [key]
        extractors = [field(k).extract for k in keys]
        return self._new(Arr.multisort(self.all(), extractors, direction, flag))

    def reverse(self) -> 'Self':
        """Reverse the order of items, keeping keys."""
        return self._new(dict(reversed(list(self._data.items()))))

    # Keys and values
    def values(self) -> 'Self':
        """Get the values indexed from 0."""
        return self._new(self.all())

    def keys(self) -> 'Collection[Key]':
        """Get the keys as values indexed from 0."""
        return self._new(list(self._data))

    def flip(self) -> 'Collection[Key]':
        """Swap keys and values; values must be integers or strings."""
        result: Dict[Key, Key] = {}
        for key, value in self._data.items():
            try:
                flipped = Arr.normalize_key(value, strict=True)
            except TypeMismatchException:
                logger.debug("Unable to flip collection value", {'key': key})
                raise
            if flipped in result:
                logger.debug("Duplicate value overwritten by flip", {'value': flipped})
            result[flipped] = key
        return self._new(result)

    def merge(self, other: Union['Collection[Any]', Mapping[Key, Any], List[Any]]) -> 'Self':
        """
        Merge another collection into this one.

        Values under string keys present in both are overwritten, or merged
        recursively when both are arrays; integer-keyed values are appended.
        """
        if not Arr.accessible(other):
            logger.debug("Unable to merge collection", {'other': type(other).__name__})
            raise TypeMismatchException(
                "Only arrays can be merged into a collection.",
                expected="a collection, mapping or list",
                actual=other,
            )
        return self._new(Arr.merge(self._data, other))

    def remap(self, key_from: FieldLike, value_from: FieldLike) -> 'Collection[Any]':
        """
        Build a new key/value collection from fields of the values.

        ``key_from`` selects the new key of each value and ``value_from`` the
        new value; both may be field names, dotted paths or callables. Later
        duplicate keys overwrite earlier ones.
        """
        return self._new(Arr.map(self._data.values(), field(key_from).extract, field(value_from).extract))

    def group_by(self, group_field: FieldLike, preserve_keys: bool = True) -> 'Collection[Collection[T]]':
        """Group values into sub-collections by a field value."""
        spec = field(group_field)
        groups: Dict[Key, Dict[Key, T]] = {}

        for key, element in self._data.items():
            group = groups.setdefault(Arr.normalize_key(spec.extract(element)), {})
            if preserve_keys:
                group[key] = element
            else:
                group[len(group)] = element

        return self._new({group_key: self._new(items) for group_key, items in groups.items()})

    # Searching
    def _matcher(self, item: Any, strict: bool) -> Callable[[Any], bool]:
        if strict:
            return lambda value: strict_equals(value, item)
        return lambda value: loose_equals(value, item)

    def contains(self, item: Any, strict: bool = False) -> bool:
        """
        Check whether any value matches an item.

        A function, lambda, bound method or ``functools.partial`` is called
        with each value and matches on a truthy result; ``strict`` is ignored
        then. Anything else, classes included, is compared loosely (``"1"``
        equals ``1``) or, with ``strict``, by type and value.
        """
        matches = item if _is_matcher(item) else self._matcher(item, strict)
        return any(matches(value) for value in self._data.values())

    def remove(self, item: Any, strict: bool = False) -> 'Self':
        """Remove every value matching an item; see :meth:`contains`."""
        matches = item if _is_matcher(item) else self._matcher(item, strict)
        return self.filter(lambda value: not matches(value))

    def replace(self, item: Any, replacement: Any, strict: bool = False) -> 'Collection[Any]':
        """Replace every value equal to an item with a replacement."""
        matches = self._matcher(item, strict)
        return self.map(lambda value: replacement if matches(value) else value)

    def slice(self, offset: int, limit: Optional[int] = None, preserve_keys: bool = True) -> 'Self':
        """
        Get a slice of the collection.

        A negative ``offset`` counts from the end. ``limit`` caps the number of
        entries; a negative limit stops that many entries before the end.
        """
        items = list(self._data.items())
        size = len(items)
        start = offset if offset >= 0 else max(size + offset, 0)

        if limit is None:
            selected = items[start:]
        elif limit >= 0:
            selected = items[start:start + limit]
        else:
            selected = items[start:size + limit]

        if preserve_keys:
            return self._new(dict(selected))
        return self._new([value for _, value in selected])

    # Indexed access
    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __getitem__(self, key: Key) -> T:
        return self.get(key)

    def __setitem__(self, key: Key, value: T) -> None:
        self._data = {**self._data, Arr.normalize_key(key): value}

    def __delitem__(self, key: Key) -> None:
        key = Arr.normalize_key(key)
        if key not in self._data:
            logger.debug("Undefined collection key", {'key': key})
            raise KeyNotFoundException(key)
        self._data = self.filter(lambda _, k: k != key)._data

    def __iter__(self) -> Iterator[Tuple[Key, T]]:
        return iter(self._data.items())

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def collect(data: Items[T] = None) -> Collection[T]:
    """Create a collection from the given data."""
    return Collection(data)
