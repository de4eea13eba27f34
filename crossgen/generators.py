#! /usr/bin/env python

"""
Restartable lazy sequences.

A `Generator`:class: is an immutable factory of iterations: each call
to its `iterator()` method returns a new `Iterator`:class: that starts
over from the beginning of the same logical sequence.  Iterators are
"peekable" cursors: besides consuming the current element with
`next()`, they can report whether an element is available
(`has_next()`) and return it without consuming it (`peek()`).

Both classes also speak the Python iteration protocol, so the usual
idioms work::

  >>> list(of(1, 2, 3))
  [1, 2, 3]
  >>> [x * 2 for x in concat(of(1), of(2, 3))]
  [2, 4, 6]

This module provides the interface and the "leaf" generators; see
`crossgen.cross_product`:mod: and `crossgen.joining`:mod: for the
composite ones.
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

__docformat__ = 'reStructuredText'


from abc import ABCMeta, abstractmethod

import crossgen.defaults
from crossgen.exceptions import InvalidArgument, InvalidOperation, InvalidType


## interface

class Generator(metaclass=ABCMeta):

    """
    Interface for restartable producers of lazy sequences.

    Implementations must be immutable and must return a *new* and
    independent iterator upon every invocation of `iterator()`, so
    that a generator can be iterated over any number of times, also
    by several iterators at once.
    """

    @abstractmethod
    def iterator(self):
        """
        Return a new `Iterator` positioned at the start of the sequence.
        """
        pass

    def __iter__(self):
        return self.iterator()


class Iterator(metaclass=ABCMeta):

    """
    Stateful cursor over the sequence of a `Generator`.

    Calling `peek()` or `next()` when `has_next()` is false is a
    violation of the calling contract; implementations in this
    package raise `InvalidOperation`:class: in that case.
    """

    @abstractmethod
    def has_next(self):
        """
        Return ``True`` if there is a current element.

        Must not alter the iterator state.
        """
        pass

    @abstractmethod
    def peek(self):
        """
        Return the current element, without consuming it.
        """
        pass

    @abstractmethod
    def next(self):
        """
        Return the current element and advance past it.
        """
        pass

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()


def _exhausted(iterator):
    return InvalidOperation(
        "No more elements in %s" % iterator.__class__.__name__)


def check_generators(generators):
    """
    Raise an `InvalidArgument` exception unless all items in
    `generators` are `Generator`:class: instances.

    The more specific `InvalidType` is raised for items that are not
    `None` but are not generators either.  Items are checked in order
    and the first offending one determines the error.
    """
    for n, generator in enumerate(generators):
        if generator is None:
            raise InvalidArgument(
                "Generator at position %d is `None`" % n)
        if not isinstance(generator, Generator):
            raise InvalidType(
                "Object at position %d is not a generator: %r"
                % (n, generator))


## leaf generators

class ListGenerator(Generator):

    """
    Generate a fixed sequence of values, given at construction time.

    Example::

      >>> g = ListGenerator('a', 'b')
      >>> list(g)
      ['a', 'b']
      >>> len(g)
      2
      >>> list(ListGenerator())
      []
    """

    def __init__(self, *values):
        self._values = values

    def iterator(self):
        return ListIterator(self._values)

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, ListGenerator):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        shown = [repr(value)
                 for value in self._values[:crossgen.defaults.REPR_MAX_ITEMS]]
        if len(self._values) > crossgen.defaults.REPR_MAX_ITEMS:
            shown.append('...')
        return "%s(%s)" % (self.__class__.__name__, ', '.join(shown))


class ListIterator(Iterator):

    __slots__ = ['_values', '_index']

    def __init__(self, values):
        self._values = values
        self._index = 0

    def has_next(self):
        return self._index < len(self._values)

    def peek(self):
        if self._index >= len(self._values):
            raise _exhausted(self)
        return self._values[self._index]

    def next(self):
        value = self.peek()
        self._index += 1
        return value


class BufferedIterator(Iterator):

    """
    Adapt a Python iterator to the peekable `Iterator` interface.

    One element of look-ahead is read from the wrapped iterator at
    construction time, and then every time the current element is
    consumed.

    Example::

      >>> it = BufferedIterator(iter('xy'))
      >>> it.peek(), it.peek()
      ('x', 'x')
      >>> it.next(), it.next()
      ('x', 'y')
      >>> it.has_next()
      False
    """

    __slots__ = ['_source', '_current']

    _NOTHING = object()

    def __init__(self, source):
        self._source = source
        self._current = next(source, self._NOTHING)

    def has_next(self):
        return self._current is not self._NOTHING

    def peek(self):
        if self._current is self._NOTHING:
            raise _exhausted(self)
        return self._current

    def next(self):
        value = self.peek()
        self._current = next(self._source, self._NOTHING)
        return value


class IterableGenerator(Generator):

    """
    Generate the elements of a re-iterable Python object.

    Any object whose `__iter__` method returns a new iterator upon
    each call works: `range`, `str`, `set`, `dict` (keys), etc.
    Python iterators can be consumed only once, so they are rejected
    with `InvalidType`:class:; wrap the function that creates them in
    a `FactoryGenerator`:class: instead.

    Example::

      >>> g = IterableGenerator(range(3))
      >>> list(g), list(g)
      ([0, 1, 2], [0, 1, 2])
    """

    def __init__(self, iterable):
        try:
            is_iterator = (iter(iterable) is iterable)
        except TypeError:
            raise InvalidType(
                "Object of type %s is not iterable"
                % iterable.__class__.__name__)
        if is_iterator:
            raise InvalidType(
                "Cannot restart an iteration over %s object;"
                " use a `FactoryGenerator` instead."
                % iterable.__class__.__name__)
        self._iterable = iterable

    def iterator(self):
        return BufferedIterator(iter(self._iterable))

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self._iterable)


class FactoryGenerator(Generator):

    """
    Generate the elements of the iterable returned by `factory()`.

    The `factory` callable is invoked with no arguments every time a
    new iterator is requested, so it can be e.g. a Python generator
    function::

      >>> def squares():
      ...     for n in range(4):
      ...         yield n*n
      >>> g = FactoryGenerator(squares)
      >>> list(g), list(g)
      ([0, 1, 4, 9], [0, 1, 4, 9])
    """

    def __init__(self, factory):
        if not callable(factory):
            raise InvalidType(
                "Argument `factory` must be callable, got %r instead"
                % (factory,))
        self._factory = factory

    def iterator(self):
        return BufferedIterator(iter(self._factory()))


## combinators

class ConcatenatingGenerator(Generator):

    """
    Generate the sequences of the given generators, one after the other.

    Example::

      >>> list(ConcatenatingGenerator(of(1, 2), of(), of(3)))
      [1, 2, 3]
    """

    def __init__(self, *generators):
        check_generators(generators)
        self._generators = generators

    def iterator(self):
        return ConcatenatingIterator(self._generators)


class ConcatenatingIterator(Iterator):

    __slots__ = ['_generators', '_index', '_current']

    def __init__(self, generators):
        self._generators = generators
        self._index = 0
        self._current = None
        self._skip_exhausted()

    def _skip_exhausted(self):
        # on return, `_current` is `None` iff all generators are exhausted
        while self._index < len(self._generators):
            if self._current is None:
                self._current = self._generators[self._index].iterator()
            if self._current.has_next():
                return
            self._current = None
            self._index += 1

    def has_next(self):
        return self._current is not None

    def peek(self):
        if self._current is None:
            raise _exhausted(self)
        return self._current.peek()

    def next(self):
        value = self.peek()
        self._current.next()
        self._skip_exhausted()
        return value


class MappingGenerator(Generator):

    """
    Generate ``fn(x)`` for each element ``x`` of another generator.

    Function `fn` is called whenever the current element is read, so
    it should have no side effects.

    Example::

      >>> list(MappingGenerator(str.upper, of('a', 'b')))
      ['A', 'B']
    """

    def __init__(self, fn, generator):
        check_generators([generator])
        self._fn = fn
        self._generator = generator

    def iterator(self):
        return MappingIterator(self._fn, self._generator.iterator())


class MappingIterator(Iterator):

    __slots__ = ['_fn', '_source']

    def __init__(self, fn, source):
        self._fn = fn
        self._source = source

    def has_next(self):
        return self._source.has_next()

    def peek(self):
        return self._fn(self._source.peek())

    def next(self):
        return self._fn(self._source.next())


class FilteringGenerator(Generator):

    """
    Generate the elements of another generator that satisfy `predicate`.

    Example::

      >>> list(FilteringGenerator(lambda n: n % 2, IterableGenerator(range(6))))
      [1, 3, 5]
    """

    def __init__(self, predicate, generator):
        check_generators([generator])
        self._predicate = predicate
        self._generator = generator

    def iterator(self):
        return FilteringIterator(self._predicate, self._generator.iterator())


class FilteringIterator(Iterator):

    __slots__ = ['_predicate', '_source']

    def __init__(self, predicate, source):
        self._predicate = predicate
        self._source = source
        self._skip_rejected()

    def _skip_rejected(self):
        while (self._source.has_next()
               and not self._predicate(self._source.peek())):
            self._source.next()

    def has_next(self):
        return self._source.has_next()

    def peek(self):
        return self._source.peek()

    def next(self):
        value = self._source.next()
        self._skip_rejected()
        return value


## factory functions

def of(*values):
    """
    Return a generator over the given literal values.
    """
    return ListGenerator(*values)


def concat(*generators):
    """
    Return a generator that joins the sequences of `generators` end to end.
    """
    return ConcatenatingGenerator(*generators)


def generator_of(obj):
    """
    Return a `Generator` instance producing the elements of `obj`.

    How `obj` is converted depends on its type, checking in this order:

    * a `Generator` is returned unchanged;
    * a `list` or `tuple` is turned into a `ListGenerator` over a
      snapshot of its items;
    * any other re-iterable object is wrapped into an
      `IterableGenerator`, even when it is also callable;
    * a callable that cannot be iterated over is wrapped into a
      `FactoryGenerator`.

    Raise `InvalidArgument` if `obj` is `None`, and `InvalidType` if
    `obj` is a (non-restartable) Python iterator or is neither
    iterable nor callable.

    Example::

      >>> list(generator_of([1, 2]))
      [1, 2]
      >>> list(generator_of(range(2)))
      [0, 1]
      >>> list(generator_of(lambda: iter('ab')))
      ['a', 'b']
      >>> g = of(42)
      >>> generator_of(g) is g
      True
    """
    if obj is None:
        raise InvalidArgument("Cannot make a generator out of `None`")
    if isinstance(obj, Generator):
        return obj
    elif isinstance(obj, (list, tuple)):
        return ListGenerator(*obj)
    try:
        iter(obj)
    except TypeError:
        if callable(obj):
            return FactoryGenerator(obj)
        raise InvalidType(
            "Cannot make a generator out of %s object: it is neither"
            " iterable nor callable" % obj.__class__.__name__)
    return IterableGenerator(obj)


# main: run tests

if "__main__" == __name__:
    import doctest
    doctest.testmod(name="generators",
                    optionflags=doctest.NORMALIZE_WHITESPACE)
