#! /usr/bin/env python
#
"""
Test the leaf generators and combinators in `crossgen.generators`.
"""
# Copyright (C) 2026  The crossgen authors. All rights reserved.
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#
__docformat__ = 'reStructuredText'


# 3rd party imports
import mock
import pytest

# crossgen imports
import crossgen.defaults
import crossgen.exceptions
from crossgen.generators import (
    BufferedIterator,
    ConcatenatingGenerator,
    FactoryGenerator,
    FilteringGenerator,
    Generator,
    IterableGenerator,
    ListGenerator,
    MappingGenerator,
    check_generators,
    concat,
    generator_of,
    of,
)


# test definitions

def test_generator_is_abstract():
    with pytest.raises(TypeError):
        Generator()


def test_list_generator():
    g = of(1, 2, 3)
    it = g.iterator()
    assert it.has_next()
    assert it.peek() == 1
    assert it.next() == 1
    assert it.next() == 2
    assert it.next() == 3
    assert not it.has_next()
    assert list(g) == [1, 2, 3]


def test_list_generator_exhausted():
    it = ListGenerator().iterator()
    assert not it.has_next()
    with pytest.raises(crossgen.exceptions.InvalidOperation):
        it.peek()
    with pytest.raises(crossgen.exceptions.InvalidOperation):
        it.next()


def test_list_generator_equality():
    assert of(1, 2) == ListGenerator(1, 2)
    assert of(1, 2) != of(2, 1)
    assert len(set([of(1), of(1)])) == 1


def test_list_generator_repr_is_elided(monkeypatch):
    monkeypatch.setattr(crossgen.defaults, 'REPR_MAX_ITEMS', 2)
    assert repr(of(1, 2, 3)) == 'ListGenerator(1, 2, ...)'
    assert repr(of(1, 2)) == 'ListGenerator(1, 2)'


def test_buffered_iterator_reads_one_ahead():
    source = iter([1, 2])
    it = BufferedIterator(source)
    # first element already taken from the source
    assert next(source) == 2
    assert it.peek() == 1
    assert it.next() == 1
    assert not it.has_next()


def test_iterable_generator_restarts():
    g = IterableGenerator('abc')
    assert list(g) == ['a', 'b', 'c']
    assert list(g) == ['a', 'b', 'c']


def test_iterable_generator_rejects_iterators():
    with pytest.raises(crossgen.exceptions.InvalidType):
        IterableGenerator(iter([1, 2]))


def test_iterable_generator_rejects_non_iterables():
    with pytest.raises(crossgen.exceptions.InvalidType):
        IterableGenerator(42)


def test_factory_generator_calls_factory_each_time():
    factory = mock.Mock(side_effect=lambda: iter([1, 2]))
    g = FactoryGenerator(factory)
    assert not factory.called
    assert list(g) == [1, 2]
    assert list(g) == [1, 2]
    assert factory.call_count == 2


def test_factory_generator_rejects_non_callables():
    with pytest.raises(crossgen.exceptions.InvalidType):
        FactoryGenerator([1, 2])


def test_concat():
    g = concat(of(), of(1, 2), of(), of(), of(3), of())
    assert list(g) == [1, 2, 3]
    assert list(g) == [1, 2, 3]


def test_concat_empty():
    it = ConcatenatingGenerator().iterator()
    assert not it.has_next()
    with pytest.raises(crossgen.exceptions.InvalidOperation):
        it.peek()


def test_concat_rejects_none():
    with pytest.raises(crossgen.exceptions.InvalidArgument):
        concat(of(1), None)


def test_mapping_generator():
    g = MappingGenerator(lambda x: x * 10, of(1, 2))
    it = g.iterator()
    assert it.peek() == 10
    assert it.next() == 10
    assert it.next() == 20
    assert not it.has_next()


def test_filtering_generator():
    g = FilteringGenerator(lambda x: x > 1, of(0, 1, 2, 0, 3))
    assert list(g) == [2, 3]
    assert list(FilteringGenerator(lambda x: False, of(1, 2))) == []


@pytest.mark.parametrize("obj,expected", [
    ([1, 2], [1, 2]),
    ((1, 2), [1, 2]),
    ('ab', ['a', 'b']),
    (range(3), [0, 1, 2]),
    (lambda: iter([5]), [5]),
    ([], []),
])
def test_generator_of(obj, expected):
    g = generator_of(obj)
    assert isinstance(g, Generator)
    assert list(g) == expected
    assert list(g) == expected


def test_generator_of_generator_is_identity():
    g = of(1)
    assert generator_of(g) is g


def test_generator_of_snapshots_lists():
    values = [1, 2]
    g = generator_of(values)
    values.append(3)
    assert list(g) == [1, 2]


def test_generator_of_none():
    with pytest.raises(crossgen.exceptions.InvalidArgument):
        generator_of(None)


@pytest.mark.parametrize("obj", [
    iter([1]),
    (x for x in [1]),
    42,
])
def test_generator_of_invalid(obj):
    with pytest.raises(crossgen.exceptions.InvalidType):
        generator_of(obj)


def test_check_generators_reports_position():
    with pytest.raises(crossgen.exceptions.InvalidArgument) as excinfo:
        check_generators([of(1), of(2), None])
    assert 'position 2' in str(excinfo.value)


def test_invalid_type_is_a_type_error():
    with pytest.raises(TypeError):
        check_generators([of(1), 'x'])


class _CallableCollection(object):
    """Both iterable and callable; iteration wins in `generator_of`."""

    def __iter__(self):
        return iter([1, 2])

    def __call__(self):
        return iter(['called'])


def test_generator_of_prefers_iteration_over_calling():
    g = generator_of(_CallableCollection())
    assert isinstance(g, IterableGenerator)
    assert list(g) == [1, 2]


def test_generator_of_non_iterable_callable():
    g = generator_of(list)
    assert isinstance(g, FactoryGenerator)
    assert list(g) == []


# main: run tests

if "__main__" == __name__:
    pytest.main(["-v", __file__])
