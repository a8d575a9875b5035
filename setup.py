#!/usr/bin/env python

from setuptools import setup

version = '0.1'

data = dict(
    name =          'RRDReader',
    version =       version,
    description =   'Reads RRDtool round robin database files from memory, without rrdtool.',
    packages =      ['rrdreader', 'rrdreader.util', 'rrdreader.tests'],
    scripts =       ['rrdinfo.py'],
    data_files =    [('share/RRDReader', ['rrdreader.conf'])],
    install_requires = ['Twisted'],
    python_requires = '>=3.8',
    )


setup(**data)
