#!/usr/bin/env python
"""
Setup file for installing Crossgen.
"""

import setuptools


## auxiliary functions
#
def read_whole_file(path):
    """
    Return file contents as a string.
    """
    with open(path, 'r') as stream:
        return stream.read()


## real setup description begins here
#
setuptools.setup(
    name="crossgen",
    version="1.0.0",  # see PEP 440

    packages=setuptools.find_packages(exclude=['crossgen.tests']),
    # metadata for upload to PyPI
    description=(
        "Restartable lazy sequence generators"
        " and their cartesian products."
    ),
    long_description=read_whole_file('README.rst'),
    license="LGPL",
    keywords=str.join(' ', [
        "cartesian product",
        "combinations",
        "cross product",
        "generator",
        "iterator",
        "lazy",
        "odometer",
        "template",
    ]),

    # see http://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        ("License :: OSI Approved :: GNU Library or"
         " Lesser General Public License (LGPL)"),
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        ],

    python_requires='>=3.6',

    # run-time dependencies
    install_requires=[
        # color-code log output on terminals (see `crossgen.configure_logger`)
        'coloredlogs',
    ],
    extras_require={
        'test': [
            'tox',
            'pytest>=4.1',
            'mock',
        ],
    },

    # `zip_safe` can ease deployment, but is only allowed if the package
    # do *not* do any __file__/__path__ magic nor do they access package data
    # files by file name (use `pkg_resources` instead).
    zip_safe=True,
)
