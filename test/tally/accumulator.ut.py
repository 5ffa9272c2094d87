# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from tally import Histogram, Max, MergeMismatchError, Min, merge_all
from utest import utest, utest_call, utest_exc, utest_val


class Histogram4(Histogram, bin_count=4): pass


samples = [0.5, 1.5, 1.5, 2.5, 3.5, 3.5, 3.5, 0.0, 2.0, 3.9, 1.1, 0.9]

def partial_histogram(xs:list[float]) -> Histogram4:
  h = Histogram4.with_const_width(0, 4)
  h.update(xs)
  return h


@utest_call
def merge_partitions() -> None:
  parts = [partial_histogram(samples[i:i+3]) for i in range(0, len(samples), 3)]
  before = [p.bins() for p in parts]
  merged = merge_all(parts)
  utest_val(partial_histogram(samples).bins(), merged.bins(), 'merged partitions')
  utest_val(before, [p.bins() for p in parts], 'partitions are unchanged')
  utest_val(False, merged is parts[0], 'result is a copy')


utest(-2.0, lambda: merge_all([Min([1.0, 3.0]), Min([-2.0]), Min()]).min())
utest(3.0, lambda: merge_all(Max([x]) for x in [1.0, 3.0, -2.0]).max())
utest((1, 0, 0, 0), lambda: merge_all([partial_histogram([0.5])]).bins())

utest_exc(ValueError('merge_all requires at least one accumulator'), merge_all, [])
utest_exc(MergeMismatchError, merge_all, [partial_histogram([]), Histogram4([0, 1, 2, 3, 5])])
