"""
Async Combinator Answers.

The JavaScript promise family expressed with `asyncio`: `Promise.allSettled`,
`Promise.any`, `Promise.all`, `Promise.race`, a timeout wrapper, retry with
exponential backoff, a concurrency-limited map, sequential execution and
"promisify".

All helpers run on the current event loop. Tasks that lose a race are
cancelled and awaited before the helper returns, so no task outlives the
call.
"""

import asyncio
import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section
from interview_kit.errors import AggregateError, OperationTimeout, RetryError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

FULFILLED = "fulfilled"
REJECTED = "rejected"


@dataclass
class Settled:
  """
  Outcome of a single awaitable passed to `all_settled`.

  Attributes:
      status: Either "fulfilled" or "rejected".
      value: The result when fulfilled.
      reason: The exception when rejected.
  """

  status: str
  value: Any = None
  reason: Optional[BaseException] = None

  @property
  def ok(self) -> bool:
    return self.status == FULFILLED


def _spawn(aws: Iterable[Awaitable[T]]) -> List["asyncio.Future[T]"]:
  return [asyncio.ensure_future(aw) for aw in aws]


async def _cancel_all(tasks: Iterable["asyncio.Future[Any]"]) -> None:
  """Cancels unfinished tasks and waits for them to unwind."""
  pending = [t for t in tasks if not t.done()]
  for task in pending:
    task.cancel()
  if pending:
    await asyncio.gather(*pending, return_exceptions=True)


@answer("all-settled", "How do you implement Promise.allSettled?", Section.ASYNC)
async def all_settled(aws: Iterable[Awaitable[Any]]) -> List[Settled]:
  """
  Waits for every awaitable and reports each outcome in input order.

  Never raises for failures of the individual awaitables.
  """
  outcomes = await asyncio.gather(*_spawn(aws), return_exceptions=True)
  return [
    Settled(REJECTED, reason=o) if isinstance(o, BaseException) else Settled(FULFILLED, value=o) for o in outcomes
  ]


@answer("promise-any", "How do you implement Promise.any?", Section.ASYNC)
async def first_fulfilled(aws: Iterable[Awaitable[T]]) -> T:
  """
  Returns the first successful result and cancels the rest.

  Raises:
      AggregateError: If every awaitable fails, or none were given. Errors
          are listed in input order.
  """
  tasks = _spawn(aws)
  if not tasks:
    raise AggregateError([], "No awaitables given")

  position = {task: i for i, task in enumerate(tasks)}
  errors: List[Optional[BaseException]] = [None] * len(tasks)
  pending = set(tasks)
  try:
    while pending:
      done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
      for task in sorted(done, key=position.__getitem__):
        if task.cancelled():
          errors[position[task]] = asyncio.CancelledError()
        elif task.exception() is not None:
          errors[position[task]] = task.exception()
        else:
          return task.result()
    raise AggregateError([e for e in errors if e is not None])
  finally:
    await _cancel_all(pending)


@answer("promise-all", "How do you implement Promise.all with fail-fast behaviour?", Section.ASYNC)
async def gather_all(aws: Iterable[Awaitable[T]]) -> List[T]:
  """
  Resolves every awaitable, returning results in input order.

  The first failure cancels the remaining awaitables and propagates.
  """
  tasks = _spawn(aws)
  pending = set(tasks)
  try:
    while pending:
      done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_EXCEPTION)
      for task in done:
        if task.cancelled() or task.exception() is not None:
          task.result()
    return [task.result() for task in tasks]
  finally:
    await _cancel_all(pending)


@answer("promise-race", "How do you implement Promise.race?", Section.ASYNC)
async def race(aws: Iterable[Awaitable[T]]) -> T:
  """
  Settles with whichever awaitable finishes first, value or exception.

  Raises:
      ValueError: If no awaitables are given (it would never settle).
  """
  tasks = _spawn(aws)
  if not tasks:
    raise ValueError("race() needs at least one awaitable")

  position = {task: i for i, task in enumerate(tasks)}
  try:
    done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    # Ties resolve to the earliest input.
    winner = min(done, key=position.__getitem__)
    return winner.result()
  finally:
    await _cancel_all(tasks)


@answer("promise-timeout", "How do you reject a promise if it takes too long?", Section.ASYNC)
async def with_timeout(aw: Awaitable[T], seconds: float) -> T:
  """
  Raises:
      OperationTimeout: If `aw` has not completed after `seconds`.
  """
  try:
    return await asyncio.wait_for(aw, timeout=seconds)
  except asyncio.TimeoutError as exc:
    raise OperationTimeout(seconds) from exc


@answer("retry-backoff", "How do you retry an async operation with exponential backoff?", Section.ASYNC)
async def retry(
  factory: Callable[[], Awaitable[T]],
  attempts: int = 3,
  delay: float = 0.0,
  backoff: float = 2.0,
  exceptions: Tuple[Type[BaseException], ...] = (Exception,),
  sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> T:
  """
  Re-invokes `factory` until it succeeds or attempts run out.

  Args:
      factory: Zero-argument callable returning a fresh awaitable per attempt.
      attempts: Total number of tries (at least 1).
      delay: Wait before the second attempt, in seconds.
      backoff: Multiplier applied to the delay after each failure.
      exceptions: Exception types that trigger a retry. Others propagate.
      sleep: Awaitable sleep function; injectable for tests.

  Returns:
      The first successful result.

  Raises:
      ValueError: If `attempts` is smaller than 1.
      RetryError: When every attempt failed; chained to the last failure.
  """
  if attempts < 1:
    raise ValueError(f"attempts must be >= 1, got {attempts}")

  wait = delay
  last_error: Optional[BaseException] = None
  for attempt in range(1, attempts + 1):
    try:
      return await factory()
    except exceptions as exc:
      last_error = exc
      logger.warning("Attempt %d/%d failed: %r", attempt, attempts, exc)
      if attempt < attempts:
        if wait > 0:
          await sleep(wait)
        wait *= backoff

  raise RetryError(attempts, last_error) from last_error


@answer("map-limit", "How do you run async tasks with a concurrency limit?", Section.ASYNC)
async def map_limit(items: Iterable[T], func: Callable[[T], Awaitable[R]], limit: int) -> List[R]:
  """
  Maps `func` over `items` with at most `limit` calls in flight.

  Results follow input order. The first failure cancels outstanding calls.

  Raises:
      ValueError: If `limit` is smaller than 1.
  """
  if limit < 1:
    raise ValueError(f"limit must be >= 1, got {limit}")
  semaphore = asyncio.Semaphore(limit)

  async def run(item: T) -> R:
    async with semaphore:
      return await func(item)

  return await gather_all(run(item) for item in items)


@answer("promise-sequence", "How do you run promises one after another?", Section.ASYNC)
async def sequence(factories: Sequence[Callable[[], Awaitable[T]]]) -> List[T]:
  results = []
  for factory in factories:
    results.append(await factory())
  return results


@answer("promisify", "How do you turn a blocking callback-style function into an awaitable one?", Section.ASYNC)
def to_async(func: Callable[..., R]) -> Callable[..., Awaitable[R]]:
  """Runs `func` in the loop's default executor so it does not block the loop."""

  @functools.wraps(func)
  async def wrapper(*args: Any, **kwargs: Any) -> R:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

  return wrapper
