"""
Debounce and Throttle Answers.

Each instance keeps a single pending `threading.Timer`. Calls cancel and
reschedule it; `cancel()` clears it. State changes happen under a lock and
the wrapped function always runs outside the lock, so it may call back into
the wrapper.
"""

import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from interview_kit.catalogue.registry import answer
from interview_kit.enums import Section

CallArgs = Tuple[Tuple[Any, ...], Dict[str, Any]]


class _TimerSlot(ABC):
  """
  Holds the one pending timer of a debouncer or throttler.

  Every (re)schedule or stop bumps a generation counter. A timer that was
  cancelled after it had already started firing sees a stale generation and
  does nothing. Callers must hold `_lock`.
  """

  def __init__(self) -> None:
    self._lock = threading.Lock()
    self._timer: Optional[threading.Timer] = None
    self._pending: Optional[CallArgs] = None
    self._generation = 0

  def _schedule(self, delay: float) -> None:
    self._stop_timer()
    self._timer = threading.Timer(delay, self._on_timer, args=(self._generation,))
    self._timer.daemon = True
    self._timer.start()

  def _stop_timer(self) -> None:
    if self._timer is not None:
      self._timer.cancel()
    self._timer = None
    self._generation += 1

  def _on_timer(self, generation: int) -> None:
    with self._lock:
      if generation != self._generation:
        return
      self._timer = None
      call = self._take_pending()
    if call is not None:
      self._invoke(call)

  def _take_pending(self) -> Optional[CallArgs]:
    call, self._pending = self._pending, None
    return call

  @abstractmethod
  def _invoke(self, call: CallArgs) -> None:
    """Runs the wrapped function with a taken call."""

  @property
  def pending(self) -> bool:
    """True while a trailing call is scheduled."""
    return self._pending is not None


@answer("debounce", "How do you debounce a function, with cancel and flush?", Section.TIMING)
class Debouncer(_TimerSlot):
  """
  Delays calls to `func` until `wait` seconds pass without another call.

  The last call's arguments win. With `leading=True` the first call of a
  burst runs immediately, and a trailing call follows only if more calls
  arrived during the burst.
  """

  def __init__(self, func: Callable[..., Any], wait: float, leading: bool = False) -> None:
    super().__init__()
    self.func = func
    self.wait = wait
    self.leading = leading

  def __call__(self, *args: Any, **kwargs: Any) -> None:
    run_now = False
    with self._lock:
      if self.leading and self._timer is None:
        run_now = True
        self._pending = None
      else:
        self._pending = (args, kwargs)
      self._schedule(self.wait)

    if run_now:
      self.func(*args, **kwargs)

  def _invoke(self, call: CallArgs) -> None:
    args, kwargs = call
    self.func(*args, **kwargs)

  def cancel(self) -> None:
    """Drops the scheduled call, if any."""
    with self._lock:
      self._stop_timer()
      self._pending = None

  def flush(self) -> bool:
    """
    Runs the scheduled call immediately.

    Returns:
        bool: True if a pending call was executed.
    """
    with self._lock:
      self._stop_timer()
      call = self._take_pending()
    if call is None:
      return False
    self._invoke(call)
    return True


@answer("throttle", "How do you throttle a function so it runs at most once per interval?", Section.TIMING)
class Throttler(_TimerSlot):
  """
  Runs `func` at most once every `wait` seconds.

  Args:
      func: The function to throttle.
      wait: Window length in seconds.
      leading: Run on the first call of a window.
      trailing: Run once more at the end of a window with the latest arguments.
      clock: Monotonic time source; injectable for tests.
  """

  def __init__(
    self,
    func: Callable[..., Any],
    wait: float,
    leading: bool = True,
    trailing: bool = True,
    clock: Callable[[], float] = time.monotonic,
  ) -> None:
    super().__init__()
    self.func = func
    self.wait = wait
    self.leading = leading
    self.trailing = trailing
    self.clock = clock
    self._last_run: Optional[float] = None

  def __call__(self, *args: Any, **kwargs: Any) -> None:
    run_now = False
    with self._lock:
      now = self.clock()
      elapsed = None if self._last_run is None else now - self._last_run

      if elapsed is None or elapsed >= self.wait:
        # A new window opens on this call.
        self._stop_timer()
        self._last_run = now
        self._pending = None
        if self.leading:
          run_now = True
        elif self.trailing:
          self._pending = (args, kwargs)
          self._schedule(self.wait)
      elif self.trailing:
        self._pending = (args, kwargs)
        if self._timer is None:
          self._schedule(self.wait - elapsed)

    if run_now:
      self.func(*args, **kwargs)

  def _invoke(self, call: CallArgs) -> None:
    with self._lock:
      self._last_run = self.clock()
    args, kwargs = call
    self.func(*args, **kwargs)

  def cancel(self) -> None:
    """Drops the pending trailing call and resets the window."""
    with self._lock:
      self._stop_timer()
      self._pending = None
      self._last_run = None


def debounce(func: Callable[..., Any], wait: float, leading: bool = False) -> Debouncer:
  return Debouncer(func, wait, leading=leading)


def throttle(
  func: Callable[..., Any],
  wait: float,
  leading: bool = True,
  trailing: bool = True,
  clock: Callable[[], float] = time.monotonic,
) -> Throttler:
  return Throttler(func, wait, leading=leading, trailing=trailing, clock=clock)
