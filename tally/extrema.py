# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Running minimum and maximum accumulators.
NaN samples are ignored: they never replace the current extremum.
'''

from math import inf
from typing import Any, Iterable, TypeVar


_E = TypeVar('_E', bound='_Extremum')


class _Extremum:

  __slots__ = ('_val',)

  _initial:float

  def __init__(self, values:Iterable[float]=()) -> None:
    self._val = self._initial
    for x in values:
      self.add(x)

  def add(self, x:float) -> None: raise NotImplementedError

  def merge(self, other:Any) -> None:
    if not isinstance(other, type(self)):
      raise TypeError(f'cannot merge {type(self).__name__} with {type(other).__name__}')
    self.add(other._val)

  def __iadd__(self:_E, other:Any) -> _E:
    if not isinstance(other, type(self)): return NotImplemented
    self.merge(other)
    return self

  def is_empty(self) -> bool:
    'Return True if the extremum is still its initial infinite value.'
    return self._val == self._initial

  def copy(self:_E) -> _E:
    e = type(self).__new__(type(self))
    e._val = self._val
    return e

  __copy__ = copy

  def __repr__(self) -> str:
    return f'{type(self).__name__}({self._val!r})'


class Min(_Extremum):
  'The running minimum of a sequence of floats. `min()` is `inf` until a sample is added.'

  __slots__ = ()

  _initial = inf

  def add(self, x:float) -> None:
    if x < self._val: self._val = x

  def min(self) -> float:
    return self._val


class Max(_Extremum):
  'The running maximum of a sequence of floats. `max()` is `-inf` until a sample is added.'

  __slots__ = ()

  _initial = -inf

  def add(self, x:float) -> None:
    if x > self._val: self._val = x

  def max(self) -> float:
    return self._val
