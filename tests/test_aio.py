"""
Tests for Async Combinator Answers.

Each test drives its own event loop with `asyncio.run`.
"""

import asyncio
import logging
import time

import pytest

from interview_kit.aio import (
  all_settled,
  first_fulfilled,
  gather_all,
  map_limit,
  race,
  retry,
  sequence,
  to_async,
  with_timeout,
)
from interview_kit.errors import AggregateError, OperationTimeout, RetryError


async def value_after(delay, value):
  await asyncio.sleep(delay)
  return value


async def fail_after(delay, exc):
  await asyncio.sleep(delay)
  raise exc


def test_all_settled_reports_in_input_order():
  async def scenario():
    return await all_settled([value_after(0.02, "a"), fail_after(0.0, ValueError("b")), value_after(0.0, "c")])

  outcomes = asyncio.run(scenario())

  assert [o.status for o in outcomes] == ["fulfilled", "rejected", "fulfilled"]
  assert outcomes[0].value == "a"
  assert isinstance(outcomes[1].reason, ValueError)
  assert outcomes[2].ok
  assert not outcomes[1].ok


def test_first_fulfilled_skips_failures_and_cancels_rest():
  async def scenario():
    slow_cancelled = asyncio.Event()

    async def slow():
      try:
        await asyncio.sleep(10)
      except asyncio.CancelledError:
        slow_cancelled.set()
        raise

    result = await first_fulfilled([fail_after(0.0, KeyError("x")), value_after(0.01, "ok"), slow()])
    return result, slow_cancelled.is_set()

  result, was_cancelled = asyncio.run(scenario())
  assert result == "ok"
  assert was_cancelled


def test_first_fulfilled_aggregates_errors_in_input_order():
  async def scenario():
    return await first_fulfilled([fail_after(0.02, ValueError("first")), fail_after(0.0, KeyError("second"))])

  with pytest.raises(AggregateError) as info:
    asyncio.run(scenario())

  errors = info.value.errors
  assert isinstance(errors[0], ValueError)
  assert isinstance(errors[1], KeyError)


def test_first_fulfilled_empty_input():
  with pytest.raises(AggregateError) as info:
    asyncio.run(first_fulfilled([]))
  assert info.value.errors == []


def test_gather_all_preserves_order():
  async def scenario():
    return await gather_all([value_after(0.02, 1), value_after(0.0, 2), value_after(0.01, 3)])

  assert asyncio.run(scenario()) == [1, 2, 3]
  assert asyncio.run(gather_all([])) == []


def test_gather_all_fails_fast_and_cancels():
  async def scenario():
    started = time.monotonic()
    with pytest.raises(RuntimeError):
      await gather_all([value_after(5, "never"), fail_after(0.01, RuntimeError("boom"))])
    return time.monotonic() - started

  assert asyncio.run(scenario()) < 2


def test_race_returns_first_settled_value_or_error():
  async def winner_value():
    return await race([value_after(0.05, "slow"), value_after(0.0, "fast")])

  async def winner_error():
    return await race([value_after(0.05, "slow"), fail_after(0.0, LookupError("lost"))])

  assert asyncio.run(winner_value()) == "fast"
  with pytest.raises(LookupError):
    asyncio.run(winner_error())


def test_race_requires_input():
  with pytest.raises(ValueError):
    asyncio.run(race([]))


def test_race_cancelled_from_outside_cancels_contenders():
  cancelled = []

  async def sleeper(i):
    try:
      await asyncio.sleep(10)
    except asyncio.CancelledError:
      cancelled.append(i)
      raise

  with pytest.raises(OperationTimeout):
    asyncio.run(with_timeout(race([sleeper(0), sleeper(1)]), 0.01))
  assert sorted(cancelled) == [0, 1]


def test_with_timeout():
  assert asyncio.run(with_timeout(value_after(0.0, 5), 1)) == 5

  with pytest.raises(OperationTimeout) as info:
    asyncio.run(with_timeout(value_after(5, "late"), 0.01))
  assert isinstance(info.value, TimeoutError)
  assert info.value.seconds == 0.01


def test_retry_succeeds_after_failures_with_backoff(caplog):
  calls = []
  sleeps = []

  async def flaky():
    calls.append(1)
    if len(calls) < 3:
      raise ConnectionError("down")
    return "up"

  async def fake_sleep(seconds):
    sleeps.append(seconds)

  with caplog.at_level(logging.WARNING, logger="interview_kit.aio"):
    result = asyncio.run(retry(flaky, attempts=5, delay=0.1, backoff=2.0, sleep=fake_sleep))

  assert result == "up"
  assert len(calls) == 3
  assert sleeps == [0.1, 0.2]
  assert "Attempt 1/5 failed" in caplog.text


def test_retry_exhaustion_chains_last_error():
  async def always_fails():
    raise ConnectionError("still down")

  async def no_sleep(_):
    return None

  with pytest.raises(RetryError) as info:
    asyncio.run(retry(always_fails, attempts=2, delay=1, sleep=no_sleep))

  assert info.value.attempts == 2
  assert isinstance(info.value.__cause__, ConnectionError)
  assert info.value.last_error is info.value.__cause__


def test_retry_does_not_catch_unlisted_exceptions():
  calls = []

  async def wrong_kind():
    calls.append(1)
    raise KeyError("nope")

  with pytest.raises(KeyError):
    asyncio.run(retry(wrong_kind, attempts=3, exceptions=(ConnectionError,)))
  assert len(calls) == 1


def test_retry_rejects_zero_attempts():
  async def ok():
    return 1

  with pytest.raises(ValueError):
    asyncio.run(retry(ok, attempts=0))


def test_map_limit_bounds_concurrency_and_keeps_order():
  in_flight = 0
  peak = 0

  async def work(n):
    nonlocal in_flight, peak
    in_flight += 1
    peak = max(peak, in_flight)
    await asyncio.sleep(0.01 * (5 - n))
    in_flight -= 1
    return n * n

  result = asyncio.run(map_limit(range(5), work, limit=2))

  assert result == [0, 1, 4, 9, 16]
  assert peak == 2


def test_map_limit_rejects_bad_limit():
  async def work(n):
    return n

  with pytest.raises(ValueError):
    asyncio.run(map_limit([1], work, limit=0))


def test_sequence_runs_one_after_another():
  order = []

  def step(name, delay):
    async def run():
      order.append(f"start {name}")
      await asyncio.sleep(delay)
      order.append(f"end {name}")
      return name

    return run

  result = asyncio.run(sequence([step("a", 0.02), step("b", 0.0)]))

  assert result == ["a", "b"]
  assert order == ["start a", "end a", "start b", "end b"]


def test_to_async_runs_blocking_function_in_executor():
  def blocking_add(a, b=0):
    time.sleep(0.01)
    return a + b

  async def scenario():
    wrapped = to_async(blocking_add)
    return await asyncio.gather(wrapped(1, b=2), wrapped(3))

  assert asyncio.run(scenario()) == [3, 3]
  assert to_async(blocking_add).__name__ == "blocking_add"
