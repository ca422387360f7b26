from __future__ import annotations

from .ArrayAccess import ArrayAccess

__all__: list[str] = [
    'ArrayAccess',
]
