# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from random import Random

from freqhist.exceptions import ExtrapolationError, HistogramError, UninitializedHistogram
from freqhist.histogram import Histogram, neighbors
from utest import utest, utest_approx, utest_call, utest_exc, utest_val, utest_val_approx


def sample_histogram() -> Histogram:
  return Histogram([100, 100, 500, 500, 500, 500, 900, 900, 900, 1000])


# Length.

utest(0, len, Histogram())
utest(3, len, Histogram([1, 1, 2]))
utest(10, len, sample_histogram())

@utest_call
def test_len_counts_adds() -> None:
  h = Histogram()
  for i in range(50):
    h.add(i % 7)
    utest_val(i + 1, len(h), 'len after add')
  utest_val(7, h.distinct_count, 'distinct_count')


# Boundaries and accessors.

@utest_call
def test_boundaries() -> None:
  h = Histogram()
  utest_val(None, h.min_value, 'empty min_value')
  utest_val(None, h.max_value, 'empty max_value')
  h.add(5)
  utest_val(5, h.min_value)
  utest_val(5, h.max_value)
  h.add(-3)
  h.add(12)
  h.add(4)
  utest_val(-3, h.min_value)
  utest_val(12, h.max_value)

utest([(100, 2), (500, 4), (900, 3), (1000, 1)], list, sample_histogram().items())
utest('Histogram({100:2, 500:4, 900:3, 1000:1})', repr, sample_histogram())
utest('Histogram({})', repr, Histogram())
utest(True, sample_histogram().__contains__, 500)
utest(False, sample_histogram().__contains__, 700)

utest_exc(TypeError, Histogram().add, 1.5)
utest_exc(TypeError, Histogram().add, '1')


class IndexInt:
  'An integer-like type that is not an `int` subclass.'
  def __init__(self, n:int) -> None: self.n = n
  def __index__(self) -> int: return self.n

@utest_call
def test_add_index_types() -> None:
  h = Histogram([IndexInt(3), IndexInt(3), 5, True])
  utest_val(4, len(h))
  utest_val(2, h.get(3))
  utest_val(1, h.get(1))
  utest_val(1, h.min_value)
  utest_val(0.75, h.get_percentile(3))


# Get.

h = sample_histogram()
utest(2, h.get, 100)
utest(0, h.get, 300)
utest(4, h.get, 500)
utest(0, h.get, 700)
utest(3, h.get, 900)
utest(1, h.get, 1000)

utest_exc(ExtrapolationError(99, min_value=100, max_value=1000), h.get, 99)
utest_exc(ExtrapolationError(1001, min_value=100, max_value=1000), h.get, 1001)
utest_exc(ValueError, h.get, 99)
utest_exc(HistogramError, h.get, -1)
utest_exc(UninitializedHistogram, Histogram().get, 0)

@utest_call
def test_extrapolation_error_attrs() -> None:
  try: sample_histogram().get(2000)
  except ExtrapolationError as e:
    utest_val(2000, e.value)
    utest_val(100, e.min_value)
    utest_val(1000, e.max_value)
    utest_val('extrapolation of histogram values is not supported: 2000 is outside [100, 1000]', str(e))
  else: utest_val('ExtrapolationError', None, 'no exception raised')


# Get interpolated.

h = sample_histogram()
utest(2.0, h.get_interpolated, 100)
utest(3.0, h.get_interpolated, 300)
utest(4.0, h.get_interpolated, 500)
utest(3.5, h.get_interpolated, 700)
utest(3.0, h.get_interpolated, 900)
utest(1.0, h.get_interpolated, 1000)
utest(2.5, h.get_interpolated, 200)
utest_approx(5/3, Histogram([0, 3, 3, 3]).get_interpolated, 1)

utest_exc(ExtrapolationError, h.get_interpolated, 99)
utest_exc(ExtrapolationError, h.get_interpolated, 1001)
utest_exc(UninitializedHistogram, Histogram().get_interpolated, 0)

@utest_call
def test_interpolated_between_neighbors() -> None:
  h = Histogram([0, 0, 0, 0, 0, 10, 20, 20, 20])
  for v in range(0, 21):
    c = h.get_interpolated(v)
    x0, x1 = neighbors([0, 10, 20], v)
    lo, hi = sorted((h.get(x0), h.get(x1)))
    utest_val(True, lo <= c <= hi, f'interpolated count for {v} lies between neighbor counts')


# Percentile.

h = sample_histogram()
utest(0.0, h.get_percentile, 0)
utest(0.0, h.get_percentile, 99)
utest(0.2, h.get_percentile, 100)
utest(0.4, h.get_percentile, 300)
utest(0.6, h.get_percentile, 500)
utest(0.75, h.get_percentile, 700)
utest(0.9, h.get_percentile, 900)
utest(1.0, h.get_percentile, 1000)
utest(1.0, h.get_percentile, 1001)

utest_exc(UninitializedHistogram, Histogram().get_percentile, 0)

@utest_call
def test_percentile_monotonic() -> None:
  h = Histogram(Random(7).randrange(-500, 500) for _ in range(300))
  assert h.min_value is not None and h.max_value is not None
  prev = 0.0
  for v in range(h.min_value - 2, h.max_value + 3):
    p = h.get_percentile(v)
    if p < prev: utest_val(prev, p, f'percentile decreased at {v}')
    prev = p
  utest_val(0.0, h.get_percentile(h.min_value - 1))
  utest_val(1.0, h.get_percentile(h.max_value))
  utest_val(1.0, h.get_percentile(h.max_value + 1))


@utest_call
def test_percentile_random() -> None:
  num_values = 10000
  max_value = 1000 * 1000 * 1000 * 1000
  rng = Random(0)
  values = [rng.randrange(max_value) for _ in range(num_values)]
  h = Histogram(values)
  values.sort()
  v = values[0]
  for i in range(1, num_values):
    next_value = values[i]
    if v != next_value:
      utest_val_approx(i / num_values, h.get_percentile(v), f'percentile of {v}')
      v = next_value
  utest_val(1.0, h.get_percentile(values[-1]))


@utest_call
def test_caches_invalidated_by_add() -> None:
  h = Histogram([1, 3])
  utest_val(0.5, h.get_percentile(1))
  utest_val(1.0, h.get_interpolated(2))
  h.add(2)
  h.add(2)
  utest_val(0.75, h.get_percentile(2))
  utest_val(2, h.get_interpolated(2))
  utest_val(0.25, h.get_percentile(1))
  h.add(0)
  utest_val(0.2, h.get_percentile(0))
  utest_val(2, h.get_at_percentile(0.8))


# At percentile.

h = Histogram([1, 1, 2, 2, 3])
utest(1, h.get_at_percentile, 0.0)
utest(1, h.get_at_percentile, 0.1)
utest(1, h.get_at_percentile, 0.25)
utest(1, h.get_at_percentile, 0.4)
utest(2, h.get_at_percentile, 0.45)
utest(2, h.get_at_percentile, 0.50)
utest(2, h.get_at_percentile, 0.80)
utest(3, h.get_at_percentile, 0.85)
utest(3, h.get_at_percentile, 0.99)
utest(3, h.get_at_percentile, 1.0)

utest_exc(ValueError, h.get_at_percentile, -0.1)
utest_exc(ValueError, h.get_at_percentile, 1.5)
utest_exc(ValueError, h.get_at_percentile, float('nan'))
utest_exc(UninitializedHistogram, Histogram().get_at_percentile, 0.5)

@utest_call
def test_at_percentile_round_trip() -> None:
  h = sample_histogram()
  for i in range(101):
    p = i / 100
    v = h.get_at_percentile(p)
    utest_val(True, h.get_percentile(v) >= p, f'percentile of value at {p}')


# Neighbors.

@utest_call
def test_neighbors_even_keys() -> None:
  keys = [i * 2 for i in range(100)]
  for i in range(99):
    v = i * 2 + 1
    utest_val((v - 1, v + 1), neighbors(keys, v), f'neighbors of {v}')
  for k in keys:
    utest_val((k, k), neighbors(keys, k), f'neighbors of key {k}')

utest((5, 5), neighbors, [5], 5)
utest((1, 10), neighbors, [1, 10], 9)
utest((10, 10), neighbors, [1, 10], 10)
utest((-4, 7), neighbors, [-9, -4, 7, 8], 0)
utest_exc(ValueError, neighbors, [], 0)
utest_exc(ValueError, neighbors, [1, 2, 3], 0)
utest_exc(ValueError, neighbors, [1, 2, 3], 4)
