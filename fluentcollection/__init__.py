from .Support import (
    Arr,
    Collection,
    CollectionException,
    InvalidArgumentException,
    KeyNotFoundException,
    SORT_ASC,
    SORT_DESC,
    SORT_FLAG_CASE,
    SORT_LOCALE_STRING,
    SORT_NATURAL,
    SORT_NUMERIC,
    SORT_REGULAR,
    SORT_STRING,
    Str,
    TypeMismatchException,
    collect,
)

__version__ = "1.0.0"

__all__ = [
    "Arr",
    "Collection",
    "CollectionException",
    "InvalidArgumentException",
    "KeyNotFoundException",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_FLAG_CASE",
    "SORT_LOCALE_STRING",
    "SORT_NATURAL",
    "SORT_NUMERIC",
    "SORT_REGULAR",
    "SORT_STRING",
    "Str",
    "TypeMismatchException",
    "collect",
]
