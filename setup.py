#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

XLDPATCH_PATH = HERE / "xldpatch"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(XLDPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='xldpatch',
      version=VERSION,
      description='Binary patch files for XLD game archives',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD-3-Clause',
      packages=find_packages(include=['xldpatch', 'xldpatch.*']),
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'xldpatch = xldpatch.__main__:main_dispatch',
              'xlpshow = xldpatch.xlpshowapp:main',
              'xlpmerge = xldpatch.xlpmergeapp:main',
              'xlpapply = xldpatch.xlpapplyapp:main',
              'xlpexport = xldpatch.xlpexportapp:main',
              'xlpadd = xldpatch.xlpaddapp:main',
          ],
      },
    )
