from .Arr import Arr
from .Collection import Collection, collect
from .Compare import (
    SORT_ASC,
    SORT_DESC,
    SORT_FLAG_CASE,
    SORT_LOCALE_STRING,
    SORT_NATURAL,
    SORT_NUMERIC,
    SORT_REGULAR,
    SORT_STRING,
)
from .Config import env, settings
from .Exceptions import (
    CollectionException,
    InvalidArgumentException,
    KeyNotFoundException,
    TypeMismatchException,
)
from .Str import Str

__all__ = [
    "Arr",
    "Collection",
    "collect",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_FLAG_CASE",
    "SORT_LOCALE_STRING",
    "SORT_NATURAL",
    "SORT_NUMERIC",
    "SORT_REGULAR",
    "SORT_STRING",
    "env",
    "settings",
    "CollectionException",
    "InvalidArgumentException",
    "KeyNotFoundException",
    "TypeMismatchException",
    "Str",
]
