# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Render histograms as text, using Unicode block characters for the bars.
'''

from typing import Iterable, Union

from .histogram import Histogram


vertical_bars = ' ' + ''.join(chr(i) for i in range(0x2581, 0x2589))

horizontal_bars = (
  ' '
  '▏' # Left one eighth block.
  '▎' # Left one quarter block.
  '▍' # Left three eighths block.
  '▌' # Left half block.
  '▋' # Left five eighths block.
  '▊' # Left three quarters block.
  '▉' # Left seven eighths block.
  '█' # Full block.
)

full_block = '█'

_min = min
_max = max

_Num = Union[int,float]


def chart_inline(values:Iterable[_Num], max:_Num=0, width:int=0) -> str:
  '''
  Create an inline chart out of vertical fractional bar characters.
  For a histogram `h`, `chart_inline(h.bins())` gives a one-line sketch of the distribution.
  If `max` is not positive, the chart is scaled to the largest value.
  If `width` is positive, the values are subsampled to that many characters.
  '''
  values = tuple(values)
  if not values: return ''
  if max <= 0:
    max = _max(values)
    if max <= 0: return '▒' * len(values) # Medium shade block.
  if width > 0:
    step = len(values) / width
    values = tuple(values[int(step*i)] for i in range(width))
  return ''.join(vertical_bars[int(0.5 + (8 * _max(0, _min(1, v/max))))] for v in values)


def chart_histogram(histogram:Histogram, bar_width=32, show_ratio=False) -> str:
  '''
  Create a multiline chart with one row per bin of `histogram`.
  Each row is labeled with the half-open range of the bin and its count.
  Bars are scaled to the largest bin.
  '''
  rows = [(f'[{lower:g}, {upper:g})', f'{count:,}', count) for (lower, upper), count in histogram.iter()]
  max_count = _max(histogram.bins()) or 1 # Prevent divide by zero on an empty histogram.
  name_width = _max(len(r[0]) for r in rows)
  val_width = _max(len(r[1]) for r in rows)
  return ''.join(chart_line(name, val, count / max_count, name_width=name_width, val_width=val_width,
    bar_width=bar_width, show_ratio=show_ratio, suffix='\n') for name, val, count in rows)


def chart_line(name:str, val:str, ratio:float, name_width:int, val_width:int, bar_width:int, show_ratio:bool, suffix='') -> str:
  'Create a string for a single line of a chart.'
  b = bar_str(ratio, bar_width)
  ratio_str = f'  {ratio:.3f}' if show_ratio else ''
  return f'  {name:<{name_width}} : {val:>{val_width}}{ratio_str} {b}{suffix}'


def bar_str(ratio:float, width:int) -> str:
  'Create a string of block characters for the given ratio and width.'
  if ratio > 1:
    return full_block * width + '+'
  index = int(ratio * width * 8) # Quantize the ratio.
  solid_count = index // 8
  fraction_index = index % 8
  solid = full_block * solid_count
  fraction = horizontal_bars[fraction_index] if fraction_index else ''
  pad = ' ' * (width - (solid_count + len(fraction)))
  return f'{solid}{fraction}{pad}|'
