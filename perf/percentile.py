# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Time interpolated percentile queries against a histogram of random samples.
'''

from argparse import ArgumentParser
from random import Random
from time import perf_counter

from freqhist.histogram import Histogram


def main() -> None:
  parser = ArgumentParser(description='Time interpolated percentile queries.')
  parser.add_argument('--samples', type=int, default=100_000)
  parser.add_argument('--queries', type=int, default=100_000)
  parser.add_argument('--max', type=int, default=1000 * 1000 * 1000 * 1000)
  parser.add_argument('--seed', type=int, default=0)
  args = parser.parse_args()

  rng = Random(args.seed)
  h = Histogram(rng.randrange(args.max) for _ in range(args.samples))
  assert h.min_value is not None and h.max_value is not None
  queries = [rng.randint(h.min_value, h.max_value) for _ in range(args.queries)]

  start = perf_counter()
  h.get_percentile(queries[0]) # Build the caches.
  build_time = perf_counter() - start

  start = perf_counter()
  for q in queries:
    h.get_percentile(q)
  query_time = perf_counter() - start

  print(f'samples: {args.samples};  distinct: {h.distinct_count};  cache build: {build_time*1e3:.2f} ms')
  print(f'queries: {args.queries};  total: {query_time:.3f} s;  per query: {query_time/args.queries*1e6:.2f} µs')


if __name__ == '__main__': main()
