#! /usr/bin/env python

"""Exceptions specific to the `crossgen` package.

In addition to the exceptions listed here, `crossgen`:mod: functions
try to use Python builtin exceptions with the same meaning they have
in core Python, namely:

* `StopIteration` is raised by the Python iterator protocol
  (`__next__`) when a generator's sequence is exhausted.

* `AssertionError` is raised when some internal assumption regarding
  state or function/method calling contract is violated.  Informally,
  this indicates a bug in the software.

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


import crossgen


## base error classes

class Error(Exception):

    """
    Base class for all error-level exceptions in Crossgen.

    Every exception in this module signals a programming error by the
    caller: generators are purely computational, so there are no
    transient conditions to retry.  Pass ``do_log=True`` to also send
    the message to the logs at the ERROR level.
    """

    def __init__(self, msg, do_log=False):
        if do_log:
            crossgen.log.error(msg)
        Exception.__init__(self, msg)


## derived exceptions

class InvalidArgument(Error, AssertionError):

    """
    Raised when the arguments passed to a function do not honor some
    required contract.  For instance, `None` is passed where a
    generator is expected.
    """
    pass


class InvalidType(InvalidArgument, TypeError):

    """
    A specialization of`InvalidArgument` for cases when the type of
    the passed argument does not match expectations.
    """
    pass


class InvalidValue(InvalidArgument, ValueError):

    """
    A specialization of`InvalidArgument` for cases when the value of
    the passed argument does not match expectations.
    """
    pass


class InvalidOperation(Error):

    """
    Raised when an operation is attempted, that is not considered
    valid according to the object state.  For instance, peeking at
    the current element of an iterator that has been exhausted.
    """
    pass
