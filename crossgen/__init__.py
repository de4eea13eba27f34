#! /usr/bin/env python

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

"""
Crossgen is a Python package of restartable, lazy sequence generators.

A *generator* in Crossgen is an object that can be asked, any number
of times, for a fresh *iterator* over the same logical sequence of
values.  Iterators can report whether elements remain, peek at the
current element without consuming it, and consume it.

The centerpiece is :class:`crossgen.cross_product.CrossProductGenerator`,
which enumerates all combinations of elements taken from N generators
in "odometer" order: the last generator's values change fastest.
Composite generators are themselves generators, so they can be nested
and combined freely.

"""
__docformat__ = 'reStructuredText'

__version__ = '1.0.0'


import os
import os.path
import sys

import logging
import logging.config
log = logging.getLogger("crossgen")
log.propagate = True

import crossgen.defaults


# utility functions
#

def configure_logger(
        level=logging.ERROR,
        format=crossgen.defaults.LOG_FORMAT,
        datefmt=crossgen.defaults.LOG_DATEFMT,
        colorize='auto'):
    """
    Set the level of `crossgen.log` and send its output to `sys.stderr`.

    If a ``crossgen.log.conf`` file exists in the directory named by
    environment variable ``CROSSGEN_CONF`` or in ``~/.crossgen``, the
    file is handed to `logging.config.fileConfig` and decides handlers
    and formats; otherwise, a console handler using `format` and
    `datefmt` is attached to `crossgen.log`.

    With `colorize` true, or ``'auto'`` and `sys.stderr` a terminal,
    the console handler is installed by `coloredlogs`_.

    .. _coloredlogs: https://coloredlogs.readthedocs.org/en/latest/#

    Return the `crossgen.log` logger.
    """
    log.setLevel(level)
    if _load_logging_configuration_file() is not None:
        return log
    if colorize == 'auto':
        colorize = sys.stderr.isatty()
    if colorize:
        try:
            import coloredlogs
        except ImportError as err:
            log.warning("Could not import `coloredlogs` module: %s", err)
        else:
            coloredlogs.install(
                logger=log,
                reconfigure=True,
                stream=sys.stderr,
                level=level,
                fmt=format,
                datefmt=datefmt)
            return log
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(format, datefmt))
        log.addHandler(handler)
    return log


def _logging_configuration_dirs():
    conf_dirs = [crossgen.defaults.RCDIR]
    conf_path = os.environ.get(crossgen.defaults.CONF_DIR_ENV, '')
    if conf_path and os.path.exists(conf_path):
        if not os.path.isdir(conf_path):
            conf_path = os.path.dirname(conf_path)
        conf_dirs.insert(0, conf_path)
    return conf_dirs


def _load_logging_configuration_file():
    """
    Read the first ``crossgen.log.conf`` file found, if any.

    Return the path to the file that was loaded, or ``None``.
    """
    for log_conf_dir in _logging_configuration_dirs():
        log_conf = os.path.join(log_conf_dir, crossgen.defaults.LOG_CONF_FILE)
        if os.path.exists(log_conf):
            logging.config.fileConfig(log_conf, {
                'RCDIR': crossgen.defaults.RCDIR,
                'HOMEDIR': os.path.expandvars('$HOME'),
            }, disable_existing_loggers=False)
            return log_conf
    return None
