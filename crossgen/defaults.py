#! /usr/bin/env python
"""
A namespace for constants and default values
used in the Crossgen package.
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


import os


RCDIR = os.path.join(os.path.expandvars('$HOME'), ".crossgen")
"""
Default directory where all Crossgen-related files are stored.
"""

CONF_DIR_ENV = 'CROSSGEN_CONF'
"""
Environment variable pointing to a directory (or a file within it)
that is searched for configuration files before `RCDIR`.
"""

LOG_CONF_FILE = 'crossgen.log.conf'
"""
Name of the fallback logging configuration file.
"""

LOG_FORMAT = '%(name)s: [%(asctime)s] %(levelname)-8s: %(message)s'
"""
Format of log lines sent to the console by `crossgen.configure_logger`.
"""

LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

JOIN_SEPARATOR = ''
"""
Default string put between elements by `JoiningGenerator`.
"""

REPR_MAX_ITEMS = 8
"""
Literal generators show at most this many values in their `repr()`.
"""
