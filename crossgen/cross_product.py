#! /usr/bin/env python

"""
Cartesian product of generators.

A `CrossProductGenerator`:class: produces all tuples ``(x_1, ...,
x_N)`` where each ``x_k`` is an element of the `k`-th factor
generator.  Tuples come in lexicographic order, the last factor
varying fastest::

  >>> from crossgen.generators import of
  >>> g = CrossProductGenerator.make(of('a0', 'a1'), of('b0', 'b1', 'b2'))
  >>> for t in g:
  ...     print(t)
  ('a0', 'b0')
  ('a0', 'b1')
  ('a0', 'b2')
  ('a1', 'b0')
  ('a1', 'b1')
  ('a1', 'b2')

The product of zero factors is the empty sequence (not a sequence
holding one empty tuple)::

  >>> list(CrossProductGenerator.make())
  []
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
from crossgen.generators import (Generator, ListGenerator,
                                 check_generators, generator_of)
from crossgen.odometer import OdometerIterator


NULL_SET = ListGenerator()
"""
The generator of the empty sequence; the product of no factors.
"""


class CrossProductGenerator(Generator):

    """
    Generate the cartesian product of the given generators.

    Do not call the constructor directly: use the `make` class
    method, which validates its arguments and handles the zero-factor
    case.
    """

    def __init__(self, generators):
        self._generators = generators

    @classmethod
    def make(cls, *generators):
        """
        Return a generator of the cross product of `generators`.

        Raise `InvalidArgument` if any of the arguments is `None`
        (or `InvalidType` if it is not a `Generator`); in that case,
        nothing is constructed.  If no arguments are given, return
        the `NULL_SET` generator.

        The factor generators are not iterated over until an
        iterator is requested from the returned generator.
        """
        check_generators(generators)
        if not generators:
            return NULL_SET
        log.debug("Creating cross product of %d generators.", len(generators))
        return cls(generators)

    @property
    def generators(self):
        """The factor generators, in order."""
        return self._generators

    def iterator(self):
        return OdometerIterator(self._generators)

    def __repr__(self):
        return "%s.make(%s)" % (
            self.__class__.__name__,
            ', '.join(repr(generator) for generator in self._generators))


def cross_product(*factors):
    """
    Return a generator of the cross product of `factors`.

    Unlike `CrossProductGenerator.make`, each factor can be any object
    accepted by `crossgen.generators.generator_of`.

    Example::

      >>> list(cross_product([1, 2], 'xy'))
      [(1, 'x'), (1, 'y'), (2, 'x'), (2, 'y')]
    """
    return CrossProductGenerator.make(
        *[generator_of(factor) for factor in factors])


# main: run tests

if "__main__" == __name__:
    import doctest
    doctest.testmod(name="cross_product",
                    optionflags=doctest.NORMALIZE_WHITESPACE)
