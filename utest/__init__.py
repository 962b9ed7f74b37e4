'''
utest is a tiny unit testing library, used by the `freqhist` test scripts.

Each test script is a plain module that calls the `utest_*` functions at top level.
Failures are reported to std err as they occur;
if any test failed, the process exits with status 1 once the script completes.
'''


import atexit as _atexit
import inspect as _inspect
from math import isclose as _isclose
from os.path import relpath as _rel_path
from sys import stderr as _stderr
from traceback import print_exception as _print_exception
from typing import Any, Callable, TypeVar


__all__ = [
  'utest',
  'utest_approx',
  'utest_call',
  'utest_exc',
  'utest_val',
  'utest_val_approx',
]


_test_count = 0
_failure_count = 0

_no_value = object()


_C = TypeVar('_C', bound=Callable)
def utest_call(callable:_C) -> _C:
  'A function decorator to call the defined function immediately. Useful for wrapping test state in a local function scope.'
  callable()
  return callable


def utest(exp:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned value does not equal `exp`.
  '''
  _expect_value('value', exp, lambda ret: exp == ret, fn, args, kwargs)


def utest_approx(exp:float, fn:Callable, *args:Any, _rel_tol=1e-9, _abs_tol=0.0, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is raised or the returned number is not close to `exp`, as determined by `math.isclose`.
  '''
  _expect_value('approximate value', exp, lambda ret: _isclose(exp, ret, rel_tol=_rel_tol, abs_tol=_abs_tol), fn, args, kwargs)


def utest_exc(exp_exc:Any, fn:Callable, *args:Any, **kwargs:Any) -> None:
  '''
  Invoke `fn` with `args` and `kwargs`.
  Log a test failure if an exception is not raised or if the raised exception does not match `exp_exc`:
  * if `exp_exc` is a string, it is compared to the repr of the raised exception;
  * if `exp_exc` is a type, the raised exception must be an instance of it;
  * otherwise the types and args of the two exceptions must be equal.
  '''
  _count_test()
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    if not _exceptions_match(exp_exc, exc):
      _failure('exception', exp_exc, subj=fn, args=args, kwargs=kwargs, exc=exc)
  else:
    _failure('exception', exp_exc, subj=fn, args=args, kwargs=kwargs, ret=ret)


def utest_val(exp_val:Any, act_val:Any, desc='<value>') -> None:
  '''
  Log a test failure if `exp_val` does not equal `act_val`.
  Describe the test with the optional `desc`.
  '''
  _count_test()
  if exp_val != act_val: _failure('value', exp_val, subj=repr(desc), ret=act_val)


def utest_val_approx(exp_val:float, act_val:float, desc='<value>', rel_tol=1e-9, abs_tol=0.0) -> None:
  '''
  Log a test failure if `act_val` is not close to `exp_val`, as determined by `math.isclose`.
  Describe the test with the optional `desc`.
  '''
  _count_test()
  if not _isclose(exp_val, act_val, rel_tol=rel_tol, abs_tol=abs_tol):
    _failure('approximate value', exp_val, subj=repr(desc), ret=act_val)


def _count_test() -> None:
  global _test_count
  _test_count += 1


def _expect_value(label:str, exp:Any, is_ok:Callable[[Any],bool], fn:Callable, args:tuple[Any,...], kwargs:dict[str,Any]) -> None:
  _count_test()
  try: ret = fn(*args, **kwargs)
  except BaseException as exc:
    _failure(label, exp, subj=fn, args=args, kwargs=kwargs, exc=exc)
    return
  if not is_ok(ret): _failure(label, exp, subj=fn, args=args, kwargs=kwargs, ret=ret)


def _exceptions_match(exp:Any, act:BaseException) -> bool:
  if isinstance(exp, str): return exp == repr(act)
  if isinstance(exp, type): return isinstance(act, exp)
  return type(exp) == type(act) and exp.args == act.args


def _failure(exp_label:str, exp:Any, subj:Any, args:tuple[Any,...]=(), kwargs:dict[str,Any]={}, ret:Any=_no_value,
 exc:BaseException|None=None) -> None:
  global _failure_count
  _failure_count += 1

  # Report the location of the first frame outside of this module, i.e. the test script line.
  frame = next(f for f in _inspect.stack() if f.filename != __file__)
  path = _rel_path(frame.filename)
  if '/' not in path: path = f'./{path}'
  name = getattr(subj, '__qualname__', str(subj))
  _errL(f'\n{path}:{frame.lineno}: utest failure: {name}')

  for i, arg in enumerate(args): _errL(f'  arg {i} = {arg!r}')
  for key, val in kwargs.items(): _errL(f'  arg {key} = {val!r}')

  if exc is not None:
    res_label, res = 'raised exception:', exc
  else:
    res_label, res = 'returned:', ret
  exp_label_colon = f'expected {exp_label}:'
  width = max(len(exp_label_colon), len(res_label))
  _errL(f'  {exp_label_colon:{width}} {exp!r}')
  _errL(f'  {res_label:{width}} {res!r}')
  if exc is not None:
    _errL()
    _print_exception(exc, file=_stderr)
  _errL()


def _errL(*items:Any) -> None: print(*items, sep='', file=_stderr)


@_atexit.register
def report() -> None:
  'At process exit, if any test failures occured, print a summary message and force process to exit with status code 1.'
  from os import _exit
  if _failure_count > 0:
    _errL(f'\nutest ran: {_test_count}; failed: {_failure_count}')
    _stderr.flush()
    _exit(1) # raising SystemExit has no effect in an atexit handler.
