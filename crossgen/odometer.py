#! /usr/bin/env python

"""
Iterate over all combinations of elements from several generators.

The `OdometerIterator`:class: keeps one sub-iterator per generator
and advances them like the digit wheels of a mechanical odometer:
the last sub-iterator moves at every step; when it runs out, it is
restarted from its generator and the one to its left moves by one
position, and so on.  The first sub-iterator is never restarted:
when it runs out, the whole iteration ends.

Generators composing other generators (see
`crossgen.cross_product`:mod: and `crossgen.joining`:mod:) use an
`OdometerIterator` and customize the combination of current elements
by passing a `combine` function.
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


from crossgen import log
from crossgen.exceptions import InvalidArgument, InvalidOperation
from crossgen.generators import Iterator


class OdometerIterator(Iterator):

    """
    Iterate over the cartesian product of `generators`.

    Each element is the tuple of the current elements of all
    sub-iterators, in generator order; if `combine` is given, the
    element is instead the result of calling `combine` on that tuple.

    Sub-iterators are requested from all generators at construction
    time.  At least one generator must be given.

    Example::

      >>> from crossgen.generators import of
      >>> list(OdometerIterator([of(0, 1), of('a', 'b')]))
      [(0, 'a'), (0, 'b'), (1, 'a'), (1, 'b')]
      >>> list(OdometerIterator([of(0, 1), of('a', 'b')], combine=list))
      [[0, 'a'], [0, 'b'], [1, 'a'], [1, 'b']]
    """

    __slots__ = ['_generators', '_iterators', '_combine']

    def __init__(self, generators, combine=None):
        if len(generators) == 0:
            raise InvalidArgument(
                "An odometer needs at least one generator")
        self._generators = generators
        self._combine = combine
        self._iterators = [generator.iterator() for generator in generators]

    def has_next(self):
        for iterator in self._iterators:
            if not iterator.has_next():
                return False
        return True

    def peek(self):
        if not self.has_next():
            raise InvalidOperation("No more combinations in odometer")
        current = tuple(iterator.peek() for iterator in self._iterators)
        if self._combine is None:
            return current
        return self._combine(current)

    def next(self):
        result = self.peek()
        n = len(self._iterators)
        while True:
            n -= 1
            self._iterators[n].next()
            if self._iterators[n].has_next():
                break
            if n == 0:
                log.debug("Odometer over %d generators has been exhausted.",
                          len(self._generators))
                break
            # carry: restart this position and advance the one to its left
            self._iterators[n] = self._generators[n].iterator()
        return result


# main: run tests

if "__main__" == __name__:
    import doctest
    doctest.testmod(name="odometer",
                    optionflags=doctest.NORMALIZE_WHITESPACE)
