"""
Catalogue Subpackage.

Collects the answers registered with the `@answer` decorator, numbers them,
and renders them as a Markdown document.

Modules:
    - ``registry``: The `Answer` model, decorator and lookup functions.
    - ``renderer``: Markdown rendering of a built catalogue.
"""

from interview_kit.catalogue.registry import (
  Answer,
  answer,
  build_catalogue,
  clear_answers,
  get_answer,
  load_answers,
  register_answer,
)

__all__ = [
  "Answer",
  "answer",
  "build_catalogue",
  "clear_answers",
  "get_answer",
  "load_answers",
  "register_answer",
]
