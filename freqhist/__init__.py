# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .exceptions import ExtrapolationError, HistogramError, UninitializedHistogram
from .histogram import Histogram, neighbors
