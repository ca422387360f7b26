"""Tests for value comparison and string conversion helpers."""

from __future__ import annotations

import pytest

from fluentcollection import SORT_FLAG_CASE, SORT_NATURAL, SORT_REGULAR, Str
from fluentcollection.Support.Compare import comparator, compare_regular, loose_equals, strict_equals
from fluentcollection.Support.Types import Extractor, FieldPath, Identity, field


class TestEquality:
    """Test suite for loose and strict equality."""

    @pytest.mark.parametrize('left, right, expected', [
        (1, '1', True),
        ('1', '01', True),
        ('10', '1e1', True),
        (1, 1.0, True),
        ('abc', 0, False),
        (None, 0, True),
        (None, '', True),
        (None, '0', False),
        (True, 'abc', True),
        (False, '0', True),
        ([], None, True),
        ('a', 'b', False),
    ])
    def test_loose_equals(self, left: object, right: object, expected: bool) -> None:
        """Test loose equality rules."""
        assert loose_equals(left, right) is expected

    def test_strict_equals(self) -> None:
        """Test strict equality requires the same type."""
        assert strict_equals(1, 1)
        assert not strict_equals(1, 1.0)
        assert not strict_equals(1, '1')
        assert not strict_equals(1, True)
        marker = object()
        assert strict_equals(marker, marker)


class TestComparators:
    """Test suite for three-way comparators."""

    def test_regular(self) -> None:
        """Test regular comparison across types."""
        assert compare_regular(2, '10') == -1
        assert compare_regular('b', 'a') == 1
        assert compare_regular(None, 1) == -1
        assert compare_regular('x', 'x') == 0
        assert compare_regular({'a': 1}, 5) != 0

    def test_natural_case_flag(self) -> None:
        """Test natural comparison with and without case folding."""
        assert comparator(SORT_NATURAL)('B2', 'a10') == -1
        assert comparator(SORT_NATURAL | SORT_FLAG_CASE)('B2', 'a10') == 1

    def test_regular_flag_returns_compare_regular(self) -> None:
        """Test the default flag."""
        assert comparator(SORT_REGULAR) is compare_regular


class TestStr:
    """Test suite for string conversions."""

    def test_of(self) -> None:
        """Test scalar to string conversion."""
        assert Str.of(True) == '1'
        assert Str.of(False) == ''
        assert Str.of(None) == ''
        assert Str.of(2.0) == '2'
        assert Str.of(2.5) == '2.5'

    def test_numbers(self) -> None:
        """Test numeric detection and conversion."""
        assert Str.is_numeric(' 12 ')
        assert not Str.is_numeric('12abc')
        assert not Str.is_numeric(True)
        assert Str.to_number('12') == 12
        assert Str.to_number('1.5') == 1.5
        assert Str.to_number('abc') is None
        assert Str.leading_number('3.5kg') == 3.5
        assert Str.leading_number('abc') == 0

    def test_natural_key(self) -> None:
        """Test splitting strings into text and number chunks."""
        assert Str.natural_key('img10') == ['img', 10, '']
        assert Str.natural_key('Img10', case_sensitive=False) == ['img', 10, '']
        assert Str.natural_compare('img2', 'img10') == -1


class TestFieldSpecs:
    """Test suite for field specification resolution."""

    def test_resolution(self) -> None:
        """Test the variant picked for each kind of argument."""
        assert field(None) == Identity()
        assert field('a.b') == FieldPath('a.b')
        assert field(['a', 'b']) == FieldPath(('a', 'b'))
        assert isinstance(field(len), Extractor)
        spec = FieldPath('x')
        assert field(spec) is spec

    def test_extract(self) -> None:
        """Test extraction through each variant."""
        item = {'a': {'b': 3}}
        assert Identity().extract(item) is item
        assert FieldPath(('a', 'b')).extract(item) == 3
        assert FieldPath('a.c').extract(item, 0) == 0
        assert Extractor(len).extract(item) == 1
