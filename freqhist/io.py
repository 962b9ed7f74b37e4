# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Printing helpers and sample input parsing for the command line tool.
'''

from sys import stderr, stdin
from typing import Any, Iterable, Iterator


# std out.

def outL(*items:Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, flush=flush)


# std err.

def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


# Samples.

class SampleParseError(ValueError): pass


def parse_samples(name:str, lines:Iterable[str]) -> Iterator[int]:
  '''
  Parse integer samples from text lines.
  Samples are separated by whitespace; `#` begins a comment that extends to the end of the line.
  Python integer literal syntax is accepted, including a sign and underscore digit separators.
  '''
  for line_num, line in enumerate(lines, 1):
    line, _, _comment = line.partition('#')
    for token in line.split():
      try: yield int(token)
      except ValueError: raise SampleParseError(f'{name}:{line_num}: invalid sample: {token!r}') from None


def read_samples(paths:Iterable[str]) -> Iterator[tuple[str,list[int]]]:
  '''
  Read the samples of each file in `paths`, yielding (path, samples) pairs.
  The path '-' reads std in.
  '''
  for path in paths:
    if path == '-':
      yield path, list(parse_samples('<stdin>', stdin))
    else:
      with open(path) as f:
        yield path, list(parse_samples(path, f))
