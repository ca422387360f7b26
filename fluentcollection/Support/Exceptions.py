from __future__ import annotations

from typing import Any, Optional


class CollectionException(Exception):
    """Base exception for collection operations"""
    pass


class KeyNotFoundException(CollectionException, KeyError):
    """Exception raised when reading or deleting a key that does not exist"""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Undefined collection key `{key!r}`.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class TypeMismatchException(CollectionException, TypeError):
    """Exception raised when operands have incompatible shapes"""

    def __init__(self, message: str, expected: Optional[str] = None, actual: Any = None) -> None:
        self.expected = expected
        self.actual = type(actual).__name__ if actual is not None else None

        if expected is not None:
            message = f"{message} Expected {expected}, got `{self.actual or 'None'}`."

        super().__init__(message)


class InvalidArgumentException(CollectionException, ValueError):
    """Exception raised when an argument has an unsupported value"""
    pass
