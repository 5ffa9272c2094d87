# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tally is a small library of streaming accumulators for numerical samples:
histograms with a fixed number of bins, and running extrema.
Accumulators built independently over partitions of a data set can be merged.
'''

from .accumulator import Mergeable, merge_all
from .exceptions import MergeMismatchError, OutOfRangeError, RangeError
from .extrema import Max, Min
from .histogram import Bin, Histogram, define_histogram
