"""
Functional Programming Answers.

Currying, composition, call-once, memoization and explicit binding.
"""

import functools
import inspect
import types
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section


def _required_positional(func: Callable[..., Any]) -> int:
  params = inspect.signature(func).parameters.values()
  return sum(
    1
    for p in params
    if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
  )


@answer("curry", "How do you implement curry?", Section.FUNCTIONAL)
def curry(func: Callable[..., Any], arity: Optional[int] = None) -> Callable[..., Any]:
  """
  Collects positional arguments over successive calls.

  `func` runs once at least `arity` arguments have been supplied. Each
  intermediate call may pass one or several arguments.

  Args:
      func: The function to curry.
      arity: Argument count to wait for. Defaults to the number of required
          positional parameters of `func`.
  """
  needed = _required_positional(func) if arity is None else arity

  @functools.wraps(func)
  def curried(*args: Any) -> Any:
    if len(args) >= needed:
      return func(*args)
    return lambda *more: curried(*args, *more)

  return curried


@answer("compose", "How do you compose functions right to left?", Section.FUNCTIONAL)
def compose(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
  return pipe(*reversed(funcs))


@answer("pipe", "How do you pipe a value through functions left to right?", Section.FUNCTIONAL)
def pipe(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
  def piped(value: Any) -> Any:
    return functools.reduce(lambda acc, fn: fn(acc), funcs, value)

  return piped


@answer("once", "How do you make a function that runs only once?", Section.FUNCTIONAL)
def once(func: Callable[..., Any]) -> Callable[..., Any]:
  """Later calls return the result of the first call without re-running."""
  called = False
  result: Any = None

  @functools.wraps(func)
  def wrapper(*args: Any, **kwargs: Any) -> Any:
    nonlocal called, result
    if not called:
      called = True
      result = func(*args, **kwargs)
    return result

  return wrapper


@answer("memoize", "How do you memoize a function?", Section.FUNCTIONAL)
def memoize(func: Callable[..., Any], key: Optional[Callable[..., Hashable]] = None) -> Callable[..., Any]:
  """
  Caches results by argument key.

  The default key is `(args, sorted kwargs)`, so arguments must be hashable
  unless a custom `key` is provided. The wrapper exposes `cache` and
  `cache_clear()`.
  """
  cache: Dict[Hashable, Any] = {}

  def default_key(*args: Any, **kwargs: Any) -> Tuple[Any, ...]:
    return (args, tuple(sorted(kwargs.items())))

  make_key = key or default_key

  @functools.wraps(func)
  def wrapper(*args: Any, **kwargs: Any) -> Any:
    k = make_key(*args, **kwargs)
    if k not in cache:
      cache[k] = func(*args, **kwargs)
    return cache[k]

  wrapper.cache = cache  # type: ignore[attr-defined]
  wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
  return wrapper


@answer("bind", "How do you bind a function to an object with preset arguments?", Section.FUNCTIONAL)
def bind(func: Callable[..., Any], this: Any, *args: Any, **kwargs: Any) -> Callable[..., Any]:
  """
  Binds `func` to `this` as a method, pre-filling arguments.

  Returns:
      Callable: `func(this, *args, *call_args, **kwargs, **call_kwargs)`.
  """
  bound = types.MethodType(func, this)
  if not args and not kwargs:
    return bound
  return functools.partial(bound, *args, **kwargs)
