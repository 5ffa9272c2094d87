# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Histograms with a number of bins fixed at class definition time.
'''

from bisect import bisect_right
from itertools import islice
from math import isnan
from types import new_class
from typing import Any, ClassVar, Iterable, Iterator, TypeVar

from .exceptions import MergeMismatchError, OutOfRangeError, RangeError


Bin = tuple[tuple[float,float],int] # ((lower, upper), count).

_H = TypeVar('_H', bound='Histogram')

_u64_mask = (1 << 64) - 1


class Histogram:
  '''
  A histogram with a number of bins known at class definition time.

  Concrete histogram types are created either by subclassing with a bin count:
  `class Histogram10(Histogram, bin_count=10): pass`
  or with `define_histogram('Histogram10', 10)`.

  The ranges are the `bin_count + 1` boundaries of the bins;
  bin `i` counts the samples `x` where `ranges[i] <= x < ranges[i+1]`.
  Constructing a histogram directly from ranges is equivalent to `from_ranges`.
  '''

  bin_count:ClassVar[int] = 0

  __slots__ = ('_ranges', '_bins')

  _ranges:tuple[float,...]
  _bins:list[int]


  def __init_subclass__(cls, *, bin_count:int|None=None, **kwargs:Any) -> None:
    super().__init_subclass__(**kwargs)
    if bin_count is None: return # Inherit the parent bin count.
    if not isinstance(bin_count, int) or bin_count < 1:
      raise ValueError(f'histogram bin count must be a positive int; received: {bin_count!r}')
    cls.bin_count = bin_count


  def __init__(self, ranges:Iterable[float]) -> None:
    n = self._checked_bin_count()
    bounds:list[float] = []
    # Only the first n+1 values are consumed; any remainder is left in the iterator.
    for i, r in enumerate(islice(ranges, n + 1)):
      if isnan(r): raise RangeError(f'range boundary {i} is NaN')
      if bounds and bounds[-1] > r:
        raise RangeError(f'range boundary {i} is less than its predecessor: {r!r} < {bounds[-1]!r}')
      bounds.append(float(r))
    if len(bounds) != n + 1:
      raise RangeError(f'{type(self).__name__} requires {n + 1} range boundaries; received: {len(bounds)}')
    self._ranges = tuple(bounds)
    self._bins = [0] * n


  @classmethod
  def _checked_bin_count(cls) -> int:
    if cls.bin_count < 1:
      raise TypeError(f'{cls.__name__} has no bin count; subclass it with `bin_count=...` or use `define_histogram`')
    return cls.bin_count


  @classmethod
  def from_ranges(cls:type[_H], ranges:Iterable[float]) -> _H:
    '''
    Construct a histogram from the given ranges.

    Neighboring pairs `(a, b)` of the iterable define a bin for all `x` where `a <= x < b`.
    Raises RangeError if the iterable yields fewer than `bin_count + 1` values,
    is not sorted, or contains NaN. Infinite boundaries and empty bins are allowed.
    '''
    return cls(ranges)


  @classmethod
  def with_const_width(cls:type[_H], start:float, end:float) -> _H:
    '''
    Construct a histogram with constant bin width `(end - start) / bin_count`.
    The boundaries are `width * i`; they start at zero and are not offset by `start`.
    The boundaries are not validated, so this never fails.
    '''
    n = cls._checked_bin_count()
    step = (end - start) / n
    h = cls.__new__(cls)
    h._ranges = tuple(step * i for i in range(n + 1))
    h._bins = [0] * n
    return h


  def copy(self:_H) -> _H:
    'Return an independent histogram with the same ranges and counts.'
    h = type(self).__new__(type(self))
    h._ranges = self._ranges
    h._bins = list(self._bins)
    return h

  __copy__ = copy


  def __len__(self) -> int:
    return len(self._bins)


  def __repr__(self) -> str:
    return f'{type(self).__name__}(ranges={self._ranges!r}, bins={tuple(self._bins)!r})'


  def find(self, x:float) -> int:
    '''
    Return the index of the bin containing sample `x`.
    Raises OutOfRangeError if `x < range_min()` or `x >= range_max()`.
    Raises ValueError if `x` is NaN, since NaN cannot be ordered against the boundaries.
    '''
    if isnan(x): raise ValueError('histogram sample is NaN')
    i = bisect_right(self._ranges, x) # Index of the first boundary greater than `x`.
    if 0 < i <= len(self._bins): return i - 1
    raise OutOfRangeError(x, self._ranges[0], self._ranges[-1])


  def add(self, x:float) -> None:
    'Add a sample to the histogram. Raises OutOfRangeError, leaving all bins unchanged, if `x` is out of range.'
    self._bins[self.find(x)] += 1


  def update(self, samples:Iterable[float]) -> None:
    'Add each sample. Raises OutOfRangeError at the first out-of-range sample; preceding samples remain counted.'
    for x in samples:
      self.add(x)


  def reset(self) -> None:
    'Reset all bins to zero.'
    self._bins = [0] * len(self._bins)


  def ranges(self) -> tuple[float,...]:
    return self._ranges


  def bins(self) -> tuple[int,...]:
    return tuple(self._bins)


  def range_min(self) -> float:
    'Return the lower range limit. The corresponding bin might be empty.'
    return self._ranges[0]


  def range_max(self) -> float:
    'Return the upper range limit. The corresponding bin might be empty.'
    return self._ranges[-1]


  def iter(self) -> Iterator[Bin]:
    'Return an iterator over the bins and corresponding ranges: `((lower, upper), count)`.'
    r = self._ranges
    for i, count in enumerate(self._bins):
      yield ((r[i], r[i+1]), count)


  def __iter__(self) -> Iterator[Bin]:
    return self.iter()


  def merge_assign(self, other:'Histogram') -> None:
    '''
    Add the counts of `other` to this histogram.
    Raises MergeMismatchError if the ranges of the two histograms are not identical.
    '''
    if self._ranges != other._ranges:
      raise MergeMismatchError(f'cannot merge histograms with different ranges: {self._ranges!r} != {other._ranges!r}')
    bins = self._bins
    for i, count in enumerate(other._bins):
      bins[i] += count


  def __iadd__(self:_H, other:Any) -> _H:
    if not isinstance(other, Histogram): return NotImplemented
    self.merge_assign(other)
    return self


  def scale_assign(self, factor:int) -> None:
    '''
    Multiply every bin by `factor`.
    Counts are unsigned 64 bit integers, so overflowing products wrap around.
    '''
    if factor < 0: raise ValueError(f'histogram scale factor must be non-negative; received: {factor!r}')
    self._bins = [(count * factor) & _u64_mask for count in self._bins]


  def __imul__(self:_H, factor:Any) -> _H:
    if not isinstance(factor, int): return NotImplemented
    self.scale_assign(factor)
    return self


  # Derived bin statistics.

  def total(self) -> int:
    'Return the sum of all bins.'
    return sum(self._bins)


  def normalized_bins(self) -> list[float]:
    'Return the bins divided by the total count; all zero if the histogram is empty.'
    total = self.total()
    if total == 0: return [0.0] * len(self._bins)
    return [count / total for count in self._bins]


  def widths(self) -> list[float]:
    r = self._ranges
    return [r[i+1] - r[i] for i in range(len(self._bins))]


  def centers(self) -> list[float]:
    r = self._ranges
    return [(r[i] + r[i+1]) / 2 for i in range(len(self._bins))]


  def variances(self) -> list[float]:
    '''
    Return the estimated variance of each bin count, treating the bins as a multinomial distribution:
    `n * (1 - n / total)`. All zero if the histogram is empty.
    '''
    total = self.total()
    if total == 0: return [0.0] * len(self._bins)
    return [count * (1 - count / total) for count in self._bins]



def define_histogram(name:str, bin_count:int) -> type[Histogram]:
  '''
  Define a histogram class with `bin_count` bins.

  ```
  Histogram10 = define_histogram('Histogram10', 10)
  h = Histogram10.with_const_width(0, 100)
  h.update(range(100))
  assert h.bins() == (10,) * 10
  ```
  '''
  return new_class(name, (Histogram,), {'bin_count': bin_count}, lambda ns: ns.update(__slots__=()))
