#!/usr/bin/env python

from setuptools import setup

setup(name='fretwork',
      version='1.0',
      description='A python library for finding and ranking playable frettings of chords on fretted instruments',
      install_requires=['numpy', 'scipy', 'sounddevice'],
      extras_require={
        'dev': [ 'ipdb' ],
        'test': [ 'pytest' ],
      },
      packages=['fretwork', 'fretwork.config', 'fretwork.test'],
      package_dir = {'fretwork': 'src'}
     )
