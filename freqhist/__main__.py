# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import _SubParsersAction, ArgumentParser, ArgumentTypeError, Namespace
from sys import exit
from typing import Callable, Sequence

from .exceptions import ExtrapolationError
from .histogram import Histogram
from .io import errL, outL, read_samples, SampleParseError
from .stats import DEFAULT_RANKS, summarize


CommandFn = Callable[[Histogram,Namespace],bool]


def main(args:Sequence[str]|None=None) -> None:
  parser = ArgumentParser(prog='freqhist',
    description='Build a frequency histogram from integer samples and query counts and percentiles.')
  parser.add_argument('-i', '--input', dest='inputs', action='append', default=[],
    help="Sample file of whitespace-separated integers; may be repeated. Defaults to std in ('-').")
  parser.add_argument('-v', '--verbose', action='store_true', help='Report the number of samples read from each input.')
  commands = parser.add_subparsers(required=True, dest='command', help='Available commands.')
  parser.epilog = "For help with a specific command, pass '-h' to that command."

  summary = add_command(commands, main_summary, help='Print the count, range and values at common percentiles.')
  summary.add_argument('--ranks', nargs='+', type=parse_rank, default=DEFAULT_RANKS, help='Percentile ranks in [0, 1].')

  count = add_command(commands, main_count, help='Print the count for each value.')
  count.add_argument('values', nargs='+', type=int)
  count.add_argument('--interpolate', action='store_true', help='Interpolate counts for unobserved values.')

  percentile = add_command(commands, main_percentile, help='Print the percentile of each value.')
  percentile.add_argument('values', nargs='+', type=int)

  at_percentile = add_command(commands, main_at_percentile, help='Print the smallest value at each percentile rank.')
  at_percentile.add_argument('ranks', nargs='+', type=parse_rank)

  ns = parser.parse_args(args)
  hist = load_histogram(ns.inputs or ['-'], verbose=ns.verbose)
  ok = ns.main_fn(hist, ns)
  if not ok: exit(1)


def add_command(commands:_SubParsersAction, main_fn:CommandFn, **kwargs) -> ArgumentParser:
  'Add a command whose name is derived from `main_fn` by removing the "main_" prefix and replacing underscores with hyphens.'
  name = main_fn.__name__.removeprefix('main_').replace('_', '-')
  command = commands.add_parser(name, **kwargs)
  command.set_defaults(main_fn=main_fn)
  return command


def parse_rank(arg:str) -> float:
  try: p = float(arg)
  except ValueError: raise ArgumentTypeError(f'invalid percentile rank: {arg!r}') from None
  if not 0 <= p <= 1: raise ArgumentTypeError(f'percentile rank must be in the range [0, 1]: {arg!r}')
  return p


def load_histogram(paths:Sequence[str], verbose:bool) -> Histogram:
  hist = Histogram()
  try:
    for path, samples in read_samples(paths):
      if verbose: errL(f'{path}: {len(samples)} samples.')
      hist.update(samples)
  except (OSError, SampleParseError) as e: exit(f'freqhist error: {e}')
  if not hist: exit('freqhist error: no samples.')
  return hist


def main_summary(hist:Histogram, ns:Namespace) -> bool:
  outL(summarize(hist, ranks=ns.ranks))
  return True


def main_count(hist:Histogram, ns:Namespace) -> bool:
  get = hist.get_interpolated if ns.interpolate else hist.get
  ok = True
  for value in ns.values:
    try: count = get(value)
    except ExtrapolationError as e:
      errL(f'freqhist: {e}')
      ok = False
    else: outL(f'{value}\t{count}')
  return ok


def main_percentile(hist:Histogram, ns:Namespace) -> bool:
  for value in ns.values:
    outL(f'{value}\t{hist.get_percentile(value)}')
  return True


def main_at_percentile(hist:Histogram, ns:Namespace) -> bool:
  for p in ns.ranks:
    outL(f'{p}\t{hist.get_at_percentile(p)}')
  return True


if __name__ == '__main__': main()
