"""
interview-kit Package.

Common interview questions (object manipulation, promise combinators, event
emitters, debounce/throttle, functional helpers, array utilities) answered
with short, self-contained Python functions and classes.

Every answer is importable and usable directly. The catalogue layer collects
them into a numbered question/answer document.

Usage
-----

Using an answer
^^^^^^^^^^^^^^^

.. code-block:: python

    from interview_kit import group_by

    group_by([{"k": "a", "v": 1}, {"k": "b", "v": 2}, {"k": "a", "v": 3}], "k")
    # {'a': [{'k': 'a', 'v': 1}, {'k': 'a', 'v': 3}], 'b': [{'k': 'b', 'v': 2}]}

Rendering the catalogue
^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from interview_kit.catalogue import build_catalogue
    from interview_kit.catalogue.renderer import CatalogueRenderer

    entries = build_catalogue()
    print(CatalogueRenderer.for_entries(entries).render_markdown(entries, title="Q&A"))
"""

__version__ = "0.1.0"

from interview_kit.aio import (
  Settled,
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
from interview_kit.arrays import (
  binary_search,
  chunk,
  count_by,
  difference,
  duplicates,
  flatten,
  group_by,
  intersection,
  partition,
  rotate,
  shuffle,
  union,
  unique,
  unique_by,
)
from interview_kit.errors import (
  AggregateError,
  AnswerNotFoundError,
  DuplicateAnswerError,
  InterviewKitError,
  OperationTimeout,
  RetryError,
)
from interview_kit.events import EventEmitter
from interview_kit.functional import bind, compose, curry, memoize, once, pipe
from interview_kit.objects import (
  deep_copy,
  deep_equal,
  deep_freeze,
  deep_merge,
  flatten_object,
  get_path,
  is_empty,
  omit,
  pick,
  set_path,
  unflatten_object,
)
from interview_kit.timing import Debouncer, Throttler, debounce, throttle

__all__ = [
  "AggregateError",
  "AnswerNotFoundError",
  "Debouncer",
  "DuplicateAnswerError",
  "EventEmitter",
  "InterviewKitError",
  "OperationTimeout",
  "RetryError",
  "Settled",
  "Throttler",
  "__version__",
  "all_settled",
  "binary_search",
  "bind",
  "chunk",
  "compose",
  "count_by",
  "curry",
  "debounce",
  "deep_copy",
  "deep_equal",
  "deep_freeze",
  "deep_merge",
  "difference",
  "duplicates",
  "first_fulfilled",
  "flatten",
  "flatten_object",
  "gather_all",
  "get_path",
  "group_by",
  "intersection",
  "is_empty",
  "map_limit",
  "memoize",
  "omit",
  "once",
  "partition",
  "pick",
  "pipe",
  "race",
  "retry",
  "rotate",
  "sequence",
  "set_path",
  "shuffle",
  "throttle",
  "to_async",
  "unflatten_object",
  "union",
  "unique",
  "unique_by",
  "with_timeout",
]
