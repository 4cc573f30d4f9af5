"""
Exception hierarchy for interview-kit.

Every error raised deliberately by the package derives from
`InterviewKitError`, so callers can catch package failures without masking
unrelated bugs.
"""

from typing import List, Optional


class InterviewKitError(Exception):
  """Base class for all package errors."""


class AggregateError(InterviewKitError):
  """
  Raised when every awaitable passed to `first_fulfilled` fails.

  Attributes:
      errors (List[BaseException]): Failures in input order.
  """

  def __init__(self, errors: List[BaseException], message: str = "All awaitables were rejected") -> None:
    super().__init__(f"{message} ({len(errors)} errors)")
    self.errors = list(errors)


class RetryError(InterviewKitError):
  """
  Raised when `retry` exhausts its attempts.

  The last underlying failure is available as `last_error` and as `__cause__`.
  """

  def __init__(self, attempts: int, last_error: Optional[BaseException]) -> None:
    super().__init__(f"Gave up after {attempts} attempt(s): {last_error!r}")
    self.attempts = attempts
    self.last_error = last_error


class OperationTimeout(InterviewKitError, TimeoutError):
  """Raised by `with_timeout` when the deadline passes."""

  def __init__(self, seconds: float) -> None:
    super().__init__(f"Operation did not complete within {seconds}s")
    self.seconds = seconds


class DuplicateAnswerError(InterviewKitError):
  """Raised when two answers are registered under the same slug."""


class AnswerNotFoundError(InterviewKitError, KeyError):
  """Raised when a slug or number does not match any registered answer."""

  def __str__(self) -> str:
    return str(self.args[0]) if self.args else "Answer not found"
