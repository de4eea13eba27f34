#! /usr/bin/env python

"""
Generate strings by joining together elements of a cross product.
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


import crossgen.defaults
from crossgen import log
from crossgen.cross_product import NULL_SET
from crossgen.generators import Generator, check_generators
from crossgen.odometer import OdometerIterator


class JoiningGenerator(Generator):

    """
    Generate the string form of each combination in a cross product.

    The elements of each combination are converted with `str` and
    joined using `separator`; combinations are enumerated in the same
    order as `CrossProductGenerator`::

      >>> from crossgen.generators import of
      >>> g = JoiningGenerator.make(of('http', 'https'), of('://'),
      ...                           of('a.example', 'b.example'))
      >>> list(g)  # doctest: +NORMALIZE_WHITESPACE
      ['http://a.example', 'http://b.example',
       'https://a.example', 'https://b.example']
      >>> list(JoiningGenerator.make(of(1, 2), of(3), separator='-'))
      ['1-3', '2-3']
    """

    def __init__(self, separator, *generators):
        check_generators(generators)
        self._separator = separator
        self._generators = generators

    @classmethod
    def make(cls, *generators, **extra_args):
        """
        Return a generator of joined combinations of `generators`.

        Keyword argument `separator` sets the string put between
        elements; it defaults to `crossgen.defaults.JOIN_SEPARATOR`.
        Argument checking and the zero-generators case work as in
        `CrossProductGenerator.make`.
        """
        separator = extra_args.pop(
            'separator', crossgen.defaults.JOIN_SEPARATOR)
        if extra_args:
            raise TypeError(
                "Unexpected keyword arguments: %s" % ', '.join(extra_args))
        check_generators(generators)
        if not generators:
            return NULL_SET
        log.debug("Creating joining generator over %d generators.",
                  len(generators))
        return cls(separator, *generators)

    @property
    def separator(self):
        return self._separator

    def iterator(self):
        if not self._generators:
            return NULL_SET.iterator()
        return OdometerIterator(self._generators, combine=self._join)

    def _join(self, elements):
        return self._separator.join(str(element) for element in elements)


# main: run tests

if "__main__" == __name__:
    import doctest
    doctest.testmod(name="joining",
                    optionflags=doctest.NORMALIZE_WHITESPACE)
