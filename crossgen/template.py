#! /usr/bin/env python

"""
Expand templated objects into all their variants.

Given a string with placeholders (in the syntax of Python's standard
`string.Template` class) and a list of alternative values for each
placeholder, the `Template.expansions` method produces a generator
of all the texts that can be obtained by filling in one alternative
per placeholder.  Expansion works recursively through tuples,
dictionaries, lists and nested templates; see `expansions`:func:.

Expansions are computed lazily: the returned generators are
restartable, and build each variant only when it is reached.
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


import string

from crossgen.cross_product import CrossProductGenerator
from crossgen.exceptions import InvalidValue
from crossgen.generators import (ConcatenatingGenerator, FactoryGenerator,
                                 MappingGenerator, of)


def _accept_all(keywords):
    return True


class Template(object):

    """
    A template object is a pair `(obj, keywords)`.  Methods are
    provided to substitute the keyword values into `obj`, and to
    generate the expansions of the given keywords (optionally
    filtering the allowed combinations of keyword values).

    Second optional argument `validator` must be a function that
    accepts a dictionary of keyword values, and returns `True` if the
    combination is valid (can be substituted into the template) or
    `False` if it should be discarded.  The default validator accepts
    any combination.
    """

    def __init__(self, template, validator=_accept_all, **keywords):
        self._template = template
        self._keywords = keywords
        self._valid = validator

    @property
    def keywords(self):
        return dict(self._keywords)

    def substitute(self, **extra_args):
        """
        Return the result of interpolating keyword values into the
        template.  Keyword arguments `extra_args` override the values
        passed to the constructor.

        If the templated object has a `substitute` method, return the
        result of calling it with the keywords; otherwise, apply
        `string.Template.safe_substitute()` to the string form of the
        templated object.

        Raise `InvalidValue` if the validator rejects the keywords.
        """
        keywords = self._keywords.copy()
        keywords.update(extra_args)
        if not self._valid(keywords):
            raise InvalidValue(
                "Invalid substitution values in template: %r" % (keywords,))
        if hasattr(self._template, 'substitute'):
            return self._template.substitute(**keywords)
        return string.Template(str(self._template)).safe_substitute(keywords)

    def __eq__(self, other):
        if not isinstance(other, Template):
            return NotImplemented
        return (
            self._template == other._template
            and self._keywords == other._keywords
            and self._valid == other._valid
        )

    __hash__ = None

    def __str__(self):
        """Alias for `Template.substitute`."""
        return self.substitute()

    def __repr__(self):
        return "Template(%s)" % ', '.join(
            [repr(self._template)]
            + ["%s=%r" % (key, value)
               for key, value in self._keywords.items()])

    def expansions(self, **keywords):
        """
        Return a generator of all valid expansions of the templated
        object *and* the template keywords.  Generated items are
        `Template` instances constructed with the expanded template
        object and a valid combination of keyword values.

        Keyword arguments override the ones given to the constructor.
        """
        all_keywords = self._keywords.copy()
        all_keywords.update(keywords)
        return FactoryGenerator(lambda: self._expand(all_keywords))

    def _expand(self, keywords):
        for kws in expansions(keywords):
            for item in expansions(self._template, **kws):
                # propagate keywords of nested templates upwards, so
                # the validator can look at them as well
                new_kws = kws.copy()
                for value in kws.values():
                    if isinstance(value, Template):
                        new_kws.update(value.keywords)
                if self._valid(new_kws):
                    yield self.__class__(item, self._valid, **new_kws)


def expansions(obj, **extra_args):
    """
    Return a generator of all expansions of a given object, recursively
    expanding all templates found.  How expansions are computed
    depends on the type of `obj`:

    * If `obj` is a `list`, generate the expansions of each item in
      turn.  (In particular, this flattens out nested lists.)

      Example::

        >>> list(expansions([0, [2, 3]]))
        [0, 2, 3]

    * If `obj` is a `dict`, generate dictionaries with the same keys,
      associating each key `k` with an expansion of `obj[k]`, for all
      combinations of such expansions.

      Example::

        >>> E = list(expansions({'a': 1, 'b': [2, 3]}))
        >>> len(E)
        2
        >>> {'a': 1, 'b': 2} in E
        True
        >>> {'a': 1, 'b': 3} in E
        True

    * If `obj` is a `tuple`, generate all tuples formed by taking one
      expansion of each item in `obj`.

      Example::

        >>> list(expansions((1, [2, 3])))
        [(1, 2), (1, 3)]

      Empty tuples and dictionaries expand to themselves::

        >>> list(expansions(())), list(expansions({}))
        ([()], [{}])

    * If `obj` is a `Template` instance, generate the templates
      obtained by expanding its keywords.  Keyword arguments
      `extra_args` override the ones used in template construction.

      Example::

        >>> E = list(expansions(Template("a=${n}"), n=[1, 3]))
        >>> Template('a=${n}', n=1) in E
        True
        >>> Template('a=${n}', n=3) in E
        True

    * Any other value is generated unchanged.

      Example::

        >>> list(expansions(42))
        [42]

    """
    if isinstance(obj, dict):
        if not obj:
            return of(obj)
        keys = tuple(obj.keys())
        return MappingGenerator(
            lambda values: dict(zip(keys, values)),
            CrossProductGenerator.make(
                *[expansions(obj[key], **extra_args) for key in keys]))
    elif isinstance(obj, tuple):
        if not obj:
            return of(obj)
        return CrossProductGenerator.make(
            *[expansions(item, **extra_args) for item in obj])
    elif isinstance(obj, list):
        return ConcatenatingGenerator(
            *[expansions(item, **extra_args) for item in obj])
    elif isinstance(obj, Template):
        return obj.expansions(**extra_args)
    else:
        return of(obj)


# main: run tests

if "__main__" == __name__:
    import doctest
    doctest.testmod(name="template",
                    optionflags=doctest.NORMALIZE_WHITESPACE)
