# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from dataclasses import dataclass
from typing import Sequence

from .exceptions import UninitializedHistogram
from .histogram import Histogram


DEFAULT_RANKS = (0.5, 0.9, 0.95, 0.99)


@dataclass(frozen=True)
class HistogramSummary:
  count:int
  distinct:int
  min:int
  max:int
  ranks:tuple[tuple[float,int],...]

  def __str__(self) -> str:
    ranks = ''.join(f';  p{p*100:g}: {v}' for p, v in self.ranks)
    return f'count: {self.count};  distinct: {self.distinct};  min: {self.min};  max: {self.max}{ranks}'


def summarize(hist:Histogram, ranks:Sequence[float]=DEFAULT_RANKS) -> HistogramSummary:
  'Summarize `hist`, computing the value at each of the percentile `ranks`.'
  if hist.min_value is None or hist.max_value is None: raise UninitializedHistogram('histogram has no values')
  return HistogramSummary(
    count=len(hist),
    distinct=hist.distinct_count,
    min=hist.min_value,
    max=hist.max_value,
    ranks=tuple((p, hist.get_at_percentile(p)) for p in ranks))
