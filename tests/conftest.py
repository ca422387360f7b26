from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import pytest
from pydantic import BaseModel

from fluentcollection import Collection


@dataclass
class Customer:
    """Plain object item with attribute fields."""
    id: int
    age: Optional[int] = None


class Profile(BaseModel):
    """Pydantic model item with a nested mapping field."""
    name: str
    address: Dict[str, str]


@pytest.fixture
def customers() -> Collection[Customer]:
    """Three customers, two of them sharing an age."""
    return Collection([Customer(1, 20), Customer(2, 30), Customer(3, 20)])


@pytest.fixture
def letters() -> Collection[int]:
    """A small string-keyed collection."""
    return Collection({'a': 1, 'b': 2, 'c': 3, 'd': 4})
