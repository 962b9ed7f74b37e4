# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A frequency histogram of integer samples, with support for interpolation and percentile calculation.

The histogram stores the number of occurrences of each value.
These counts can be used to interpolate expected counts for unobserved values,
and to calculate the percentile position of a value (the fraction of samples equal to or smaller than it).
The percentile calculation also interpolates implicitly when needed.

Sample usage:
  h = Histogram(samples)
  h.add(17)
  p = h.get_percentile(x)
'''

from collections import Counter
from operator import index
from typing import Iterable, Iterator, Mapping, Sequence

from .exceptions import ExtrapolationError, UninitializedHistogram


class Histogram:
  '''
  Counts occurrences of integer values.
  `len()` returns the total number of added values, including duplicates.
  The sorted keys and the cumulative counts are derived lazily and discarded whenever a value is added.
  '''

  def __init__(self, values:Iterable[int]=()) -> None:
    self._counts = Counter[int]()
    self._total = 0
    self.min_value:int|None = None
    self.max_value:int|None = None
    self._sorted_keys:list[int]|None = None
    self._cumulative:dict[int,int]|None = None
    self.update(values)


  def __len__(self) -> int:
    return self._total


  def __contains__(self, value:object) -> bool:
    return value in self._counts


  def __repr__(self) -> str:
    items = ', '.join(f'{k!r}:{v!r}' for k, v in self.items())
    return f'{self.__class__.__name__}({{{items}}})'


  @property
  def distinct_count(self) -> int:
    'The number of distinct values observed.'
    return len(self._counts)


  def items(self) -> Iterator[tuple[int,int]]:
    'Yield (value, count) pairs in ascending value order.'
    counts = self._counts
    return ((k, counts[k]) for k in self._keys())


  def add(self, value:int) -> None:
    'Add a single occurrence of `value`, which may be any integer or object implementing `__index__`.'
    value = index(value) # Raises TypeError for floats and other non-integers.
    self._sorted_keys = None
    self._cumulative = None
    if self.min_value is None or value < self.min_value: self.min_value = value
    if self.max_value is None or value > self.max_value: self.max_value = value
    self._counts[value] += 1
    self._total += 1


  def update(self, values:Iterable[int]) -> None:
    for value in values:
      self.add(value)


  def get(self, value:int) -> int:
    '''
    Return the number of occurrences of `value`, or 0 if it was never observed.
    Raises ExtrapolationError if `value` lies outside of the observed range.
    '''
    self._check_in_range(value)
    return self._counts[value] # Counter returns 0 for unobserved values.


  def get_interpolated(self, value:int) -> float:
    '''
    Return the number of occurrences of `value`.
    If `value` was never observed, linearly interpolate between the counts of its nearest observed neighbors.
    Raises ExtrapolationError if `value` lies outside of the observed range.
    '''
    self._check_in_range(value)
    if value in self._counts: return self._counts[value]
    return self._interpolate(value, self._counts)


  def get_percentile(self, value:int) -> float:
    '''
    Return the fraction of added values that are less than or equal to `value`.
    Values below the observed range return 0.0; values above it return 1.0.
    Unobserved values within the range are interpolated from the cumulative counts of their neighbors.
    '''
    min_value, max_value = self._check_initialized()
    if value < min_value: return 0.0
    if value > max_value: return 1.0
    cumulative = self._cumulative_counts()
    try: acc:float = cumulative[value]
    except KeyError: acc = self._interpolate(value, cumulative)
    return acc / self._total


  def get_at_percentile(self, p:float) -> int:
    '''
    Return the smallest observed value whose percentile is at least `p`.
    This is the inverse of `get_percentile` for observed values: `get_percentile(get_at_percentile(p)) >= p`.
    '''
    self._check_initialized()
    if not 0 <= p <= 1: raise ValueError(f'percentile must be in the range [0, 1]; received: {p!r}')
    cumulative = self._cumulative_counts()
    total = self._total
    keys = self._keys()
    for key in keys:
      if cumulative[key] / total >= p: return key
    return keys[-1] # Unreachable: the final fraction is exactly 1.0.


  def _check_initialized(self) -> tuple[int,int]:
    if self.min_value is None or self.max_value is None:
      raise UninitializedHistogram('histogram has no values')
    return self.min_value, self.max_value


  def _check_in_range(self, value:int) -> None:
    min_value, max_value = self._check_initialized()
    if value < min_value or value > max_value:
      raise ExtrapolationError(value, min_value=min_value, max_value=max_value)


  def _keys(self) -> list[int]:
    if self._sorted_keys is None:
      self._sorted_keys = sorted(self._counts)
    return self._sorted_keys


  def _cumulative_counts(self) -> dict[int,int]:
    if self._cumulative is None:
      counts = self._counts
      cumulative:dict[int,int] = {}
      total = 0
      for key in self._keys():
        total += counts[key]
        cumulative[key] = total
      self._cumulative = cumulative
    return self._cumulative


  def _interpolate(self, value:int, counts:Mapping[int,int]) -> float:
    'Linearly interpolate a count for `value` between the counts of its bracketing keys.'
    x0, x1 = neighbors(self._keys(), value)
    y0 = counts[x0]
    if x0 == x1: return y0
    y1 = counts[x1]
    return y0 + (y1 - y0) * ((value - x0) / (x1 - x0))



def neighbors(keys:Sequence[int], value:int) -> tuple[int,int]:
  '''
  Given ascending distinct `keys`, return the tight bracket (prev, next) around `value`:
  the largest key <= `value` and the smallest key >= `value`.
  If `value` is itself a key then both elements are `value`.
  `value` must lie within the range of `keys`.
  '''
  if not keys: raise ValueError('neighbors: empty keys')
  low = 0
  high = len(keys) - 1
  if value < keys[low] or value > keys[high]:
    raise ValueError(f'neighbors: {value!r} is outside of [{keys[low]!r}, {keys[high]!r}]')
  # Invariant: keys[low] <= value <= keys[high].
  while high - low > 1:
    mid = (low + high) // 2
    if keys[mid] <= value: low = mid
    else: high = mid
  if keys[low] == value or keys[high] == value: return value, value
  return keys[low], keys[high]
