# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes for histogram construction, classification and merging.
'''

from typing import Any


class RangeError(ValueError):
  '''
  Raised when a histogram is constructed from invalid range boundaries:
  a NaN boundary, a decreasing boundary, or too few boundaries.
  '''


class OutOfRangeError(ValueError):
  'Raised when a sample falls outside of the domain of a histogram.'

  def __init__(self, sample:Any, range_min:float, range_max:float) -> None:
    self.sample = sample
    super().__init__(f'sample {sample!r} is out of range [{range_min!r}, {range_max!r})')


class MergeMismatchError(AssertionError):
  '''
  Raised when merging two histograms whose ranges differ.
  This indicates a logic error in the caller, so it subclasses AssertionError.
  It is raised explicitly rather than with `assert` so that it is never optimized away.
  '''
