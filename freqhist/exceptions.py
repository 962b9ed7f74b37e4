# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Histogram exception classes.
'''


class HistogramError(Exception):
  'Base class for errors raised by histogram queries.'


class UninitializedHistogram(HistogramError):
  '''
  Raised when a histogram is queried before any value has been added.
  There is no meaningful answer for an empty histogram, so this indicates a programming error in the caller.
  '''


class ExtrapolationError(HistogramError, ValueError):
  '''
  Raised when a queried value lies outside of the range of observed values.
  Histograms only interpolate between known values; they never extrapolate.
  Since it arises from an unacceptable argument, it subclasses ValueError.
  '''
  def __init__(self, value:int, *, min_value:int, max_value:int) -> None:
    self.value = value
    self.min_value = min_value
    self.max_value = max_value
    super().__init__(value) # Initialized like a ValueError.

  def __str__(self) -> str:
    return f'extrapolation of histogram values is not supported: {self.value!r} is outside [{self.min_value}, {self.max_value}]'
