from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Tuple, Union

Key = Union[int, str]


class ArrayAccess(ABC):
    """
    Indexed access contract.

    Implementations expose bracket-style existence checks, reads, writes and
    deletes by key, and iterate over ``(key, value)`` pairs in stored order.
    Writes and deletes replace the internal state with a new mapping rather
    than mutating one that may be shared with a caller.
    """

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        """Determine if a key exists and holds a non-None value."""
        pass

    @abstractmethod
    def __getitem__(self, key: Key) -> Any:
        """Get the value stored at a key."""
        pass

    @abstractmethod
    def __setitem__(self, key: Key, value: Any) -> None:
        """Assign a value to a key."""
        pass

    @abstractmethod
    def __delitem__(self, key: Key) -> None:
        """Remove a key."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Key, Any]]:
        """Iterate over key/value pairs."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Count the stored entries."""
        pass
