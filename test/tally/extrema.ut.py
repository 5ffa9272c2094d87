# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from math import inf, nan

from tally.extrema import Max, Min
from utest import utest, utest_call, utest_exc, utest_val


@utest_call
def trivial_min() -> None:
  m = Min()
  m.add(1.0)
  m.add(2.0)
  utest_val(1.0, m.min())
  m.add(-1.0)
  m.add(1.0)
  utest_val(-1.0, m.min())

@utest_call
def trivial_max() -> None:
  m = Max()
  m.add(1.0)
  m.add(2.0)
  utest_val(2.0, m.max())
  m.add(-1.0)
  m.add(3.0)
  utest_val(3.0, m.max())


utest(inf, lambda: Min().min())
utest(-inf, lambda: Max().max())
utest(True, lambda: Min().is_empty())
utest(False, lambda: Min([0.0]).is_empty())
utest(-2.0, lambda: Min([3.0, -2.0, 5.0]).min())
utest(5.0, lambda: Max([3.0, -2.0, 5.0]).max())

# NaN never becomes the extremum.
utest(1.0, lambda: Min([nan, 1.0, nan]).min())
utest(1.0, lambda: Max([nan, 1.0, nan]).max())
utest(True, lambda: Min([nan]).is_empty())

utest('Min(1.0)', repr, Min([1.0, 2.0]))
utest('Max(-inf)', repr, Max())


sequence = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]

@utest_call
def merge_min() -> None:
  for mid in range(1, len(sequence)):
    left, right = sequence[:mid], sequence[mid:]
    min_total = Min(sequence)
    utest_val(1.0, min_total.min())
    min_left = Min(left)
    utest_val(1.0, min_left.min())
    min_right = Min(right)
    utest_val(sequence[mid], min_right.min())
    min_left.merge(min_right)
    utest_val(min_total.min(), min_left.min(), f'merged min split at {mid}')

@utest_call
def merge_max() -> None:
  for mid in range(1, len(sequence)):
    left, right = sequence[:mid], sequence[mid:]
    max_left = Max(left)
    utest_val(sequence[mid - 1], max_left.max())
    max_left += Max(right)
    utest_val(9.0, max_left.max(), f'merged max split at {mid}')

@utest_call
def merge_empty() -> None:
  m = Min([2.0])
  m.merge(Min())
  utest_val(2.0, m.min())
  e = Min()
  e.merge(m)
  utest_val(2.0, e.min())

@utest_call
def copy_is_independent() -> None:
  m = Min([2.0])
  c = m.copy()
  c.add(1.0)
  utest_val(2.0, m.min())
  utest_val(1.0, c.min())


utest_exc(TypeError('cannot merge Min with Max'), Min().merge, Max())
