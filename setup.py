#!/usr/bin/env python

from setuptools import setup

setup(name='frac',
      version='0.1',
      description='Exact fractions and rational approximation of reals',
      author='Vernon Mauery',
      author_email='vernon@mauery.com',
      url='',
      packages=['frac'],
      python_requires='>=3.7',
      install_requires=['mpmath'],
      extras_require={'test': ['pytest']},
     )
