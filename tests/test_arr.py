"""Tests for the Arr helper."""

from __future__ import annotations

import pytest

from conftest import Customer
from fluentcollection import Arr, Collection, InvalidArgumentException, TypeMismatchException


class TestArrGetValue:
    """Test suite for field extraction."""

    def test_direct_key_wins_over_path(self) -> None:
        """Test that a literal dotted key is found before the path."""
        data = {'a.b': 1, 'a': {'b': 2}}
        assert Arr.get_value(data, 'a.b') == 1
        assert Arr.get_value(data, ('a', 'b')) == 2

    def test_dotted_path(self) -> None:
        """Test nested lookups through mappings, lists and objects."""
        data = {'xs': [10, 20], 'owner': Customer(7, 40)}
        assert Arr.get_value(data, 'xs.1') == 20
        assert Arr.get_value(data, 'owner.age') == 40

    def test_default(self) -> None:
        """Test that missing paths return the default."""
        assert Arr.get_value({}, 'x.y', 'd') == 'd'
        assert Arr.get_value({'xs': [1]}, 'xs.5', 'd') == 'd'
        assert Arr.get_value(Customer(1), 'missing', 'd') == 'd'
        assert Arr.get_value(3, 'x', 'd') == 'd'

    def test_callable(self) -> None:
        """Test that callables receive the item."""
        assert Arr.get_value({'a': 2}, lambda item: item['a'] * 2) == 4

    def test_collection_items(self) -> None:
        """Test reading from collections."""
        assert Arr.get_value(Collection({'a': 1}), 'a') == 1
        assert Arr.get_value({'c': Collection({'a': 1})}, 'c.a') == 1

    def test_empty_path_returns_item(self) -> None:
        """Test that an empty segment list addresses the item itself."""
        assert Arr.get_value({'a': 1}, ()) == {'a': 1}


class TestArrMerge:
    """Test suite for merging."""

    def test_merge_many(self) -> None:
        """Test merging more than two arrays."""
        assert Arr.merge([1], [2], {'k': 'v'}) == {0: 1, 1: 2, 'k': 'v'}

    def test_new_integer_keys_are_kept(self) -> None:
        """Test that integer keys not yet present are kept as they are."""
        assert Arr.merge({0: 'a'}, {5: 'b', 0: 'c'}) == {0: 'a', 5: 'b', 6: 'c'}

    def test_nested_mixed_arrays(self) -> None:
        """Test that a mapping merged with a list gives a mapping."""
        assert Arr.merge({'k': {'a': 1}}, {'k': [2]}) == {'k': {'a': 1, 0: 2}}

    def test_scalar_overwrites_array(self) -> None:
        """Test that non-array values simply overwrite."""
        assert Arr.merge({'k': {'a': 1}}, {'k': 2}) == {'k': 2}

    def test_rejects_scalars(self) -> None:
        """Test that scalars can not be merged."""
        with pytest.raises(TypeMismatchException) as exc_info:
            Arr.merge({'a': 1}, 'text')
        assert exc_info.value.actual == 'str'


class TestArrKeys:
    """Test suite for key helpers."""

    @pytest.mark.parametrize('value, expected', [
        (1, 1),
        ('a', 'a'),
        (True, 1),
        (None, ''),
        (2.9, 2),
    ])
    def test_normalize_key(self, value: object, expected: object) -> None:
        """Test casting values to keys."""
        assert Arr.normalize_key(value) == expected

    @pytest.mark.parametrize('value', [True, None, 2.9, (1,)])
    def test_strict_normalize_key(self, value: object) -> None:
        """Test that strict mode only accepts integers and strings."""
        with pytest.raises(TypeMismatchException):
            Arr.normalize_key(value, strict=True)

    def test_next_index(self) -> None:
        """Test the index an appended value receives."""
        assert Arr.next_index({}) == 0
        assert Arr.next_index({'a': 1, 3: 'x'}) == 4
        assert Arr.next_index({-5: 'x'}) == 0


class TestArrMultisort:
    """Test suite for multisort."""

    def test_rejects_mismatched_lengths(self) -> None:
        """Test direction lists must match the keys."""
        with pytest.raises(InvalidArgumentException):
            Arr.multisort([1, 2], [lambda v: v], [4, 4])

    def test_no_keys_keeps_order(self) -> None:
        """Test that nothing is sorted without keys."""
        assert Arr.multisort([2, 1], []) == [2, 1]
