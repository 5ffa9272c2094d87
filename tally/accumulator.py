# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, Iterable, Protocol, TypeVar


class Mergeable(Protocol):
  'An accumulator that can be copied and merged in place with `+=`.'

  def copy(self) -> Any: ...

  def __iadd__(self, other:Any) -> Any: ...


_M = TypeVar('_M', bound=Mergeable)


def merge_all(accumulators:Iterable[_M]) -> _M:
  '''
  Combine accumulators that were built independently, e.g. over partitions of a data set.
  The first accumulator is copied and the rest are merged into the copy; the inputs are not mutated.
  Raises ValueError if `accumulators` is empty.
  '''
  it = iter(accumulators)
  try: first = next(it)
  except StopIteration as e: raise ValueError('merge_all requires at least one accumulator') from e
  merged = first.copy()
  for acc in it:
    merged += acc
  return merged
