"""
Collection type system

This module provides the shared typing vocabulary of the package:
- Type variables and key aliases
- The closed set of field specifications used to pull values out of items
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Tuple, TypeVar, Union

from typing_extensions import TypeAlias

from .Arr import Arr

T = TypeVar("T")
U = TypeVar("U")

Key: TypeAlias = Union[int, str]


@dataclass(frozen=True)
class Identity:
    """Field specification addressing the whole item."""

    def extract(self, item: Any, default: Any = None) -> Any:
        return item


@dataclass(frozen=True)
class FieldPath:
    """Field specification addressing a key, a dotted path or a tuple of path segments."""

    path: Union[Key, Tuple[Key, ...]]

    def extract(self, item: Any, default: Any = None) -> Any:
        return Arr.get_value(item, self.path, default)


@dataclass(frozen=True)
class Extractor:
    """Field specification backed by a callable receiving the item."""

    callback: Callable[[Any], Any]

    def extract(self, item: Any, default: Any = None) -> Any:
        return self.callback(item)


FieldSpec: TypeAlias = Union[Identity, FieldPath, Extractor]
FieldLike: TypeAlias = Union[None, Key, Sequence[Key], Callable[[Any], Any], FieldSpec]


def field(spec: FieldLike) -> FieldSpec:
    """Resolve a user supplied field argument into a field specification."""
    if isinstance(spec, (Identity, FieldPath, Extractor)):
        return spec
    if spec is None:
        return Identity()
    if callable(spec):
        return Extractor(spec)
    if isinstance(spec, (list, tuple)):
        return FieldPath(tuple(spec))
    return FieldPath(spec)  # type: ignore[arg-type]
