# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tally',
  version='0.1.0',
  description='Tally is a library of streaming accumulators for Python 3: fixed-bin histograms and running extrema.',
  python_requires='>=3.10',
  packages=['tally', 'utest'],
)
