"""
Answer Registry and Lazy Loader.

Answers register themselves with the `@answer` decorator at import time. The
registry is populated lazily: the first lookup imports the answer modules
listed in `ANSWER_MODULES`.

Numbering is not stored on registration. It is assigned when the catalogue is
built, so filtering by section still yields a contiguous 1..N sequence.
"""

import importlib
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from interview_kit.enums import Section
from interview_kit.errors import AnswerNotFoundError, DuplicateAnswerError

T = TypeVar("T")

ANSWER_MODULES = [
  "interview_kit.objects",
  "interview_kit.aio",
  "interview_kit.events",
  "interview_kit.timing",
  "interview_kit.functional",
  "interview_kit.arrays",
]

_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class Answer(BaseModel):
  """
  A single catalogued answer: the question and the object answering it.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  slug: str = Field(..., description="Stable kebab-case identifier, e.g. 'deep-copy'.")
  question: str = Field(..., description="The interview question, ending with '?'.")
  section: Section = Field(..., description="Topic group used for ordering and headings.")
  target: Any = Field(..., description="The function or class that answers the question.")
  number: Optional[int] = Field(None, description="1-based position, assigned by build_catalogue.")

  @field_validator("slug")
  @classmethod
  def validate_slug(cls, v: str) -> str:
    """
    Ensures slugs are lowercase kebab-case.

    Raises:
        ValueError: If the slug contains other characters.
    """
    if not _SLUG_RE.match(v):
      raise ValueError(f"Invalid slug '{v}'. Use lowercase words separated by '-'.")
    return v

  @field_validator("question")
  @classmethod
  def validate_question(cls, v: str) -> str:
    v = v.strip()
    if not v.endswith("?"):
      raise ValueError(f"Question must end with '?': '{v}'")
    return v

  @property
  def name(self) -> str:
    """The Python name of the answering object."""
    return getattr(self.target, "__name__", repr(self.target))

  @property
  def module(self) -> str:
    """Dotted module path the answer lives in."""
    return getattr(self.target, "__module__", "")


# Global Registry, keyed by slug in registration order
_ANSWERS: Dict[str, Answer] = {}
_ANSWERS_LOADED = False

# Every successful registration per defining module. Survives clear_answers()
# so modules that are already imported can be registered again.
_MODULE_ANSWERS: Dict[str, Dict[str, Answer]] = {}


def register_answer(slug: str, question: str, section: Union[Section, str], target: Any) -> Answer:
  """
  Records an answer in the global registry.

  Args:
      slug: Unique kebab-case identifier.
      question: The question text.
      section: Section enum member or its value.
      target: The function or class being catalogued.

  Returns:
      Answer: The validated registry entry.

  Raises:
      DuplicateAnswerError: If the slug is already registered.
      pydantic.ValidationError: If slug, question or section are malformed.
  """
  entry = Answer(slug=slug, question=question, section=section, target=target)
  if entry.slug in _ANSWERS:
    existing = _ANSWERS[entry.slug]
    raise DuplicateAnswerError(f"Slug '{slug}' already registered by {existing.module}.{existing.name}")
  _ANSWERS[entry.slug] = entry
  _MODULE_ANSWERS.setdefault(entry.module, {})[entry.slug] = entry
  return entry


def answer(slug: str, question: str, section: Union[Section, str]) -> Callable[[T], T]:
  """
  Decorator registering a function or class as a catalogue answer.

  The decorated object is returned unchanged.

  Args:
      slug: Unique kebab-case identifier.
      question: The question text.
      section: Section the answer belongs to.
  """

  def decorator(target: T) -> T:
    register_answer(slug, question, section, target)
    return target

  return decorator


def load_answers(modules: Optional[Iterable[str]] = None) -> int:
  """
  Imports the answer modules so their decorators run.

  Decorators only run on first import. Answers of modules imported earlier
  are restored from the registration record instead.

  Args:
      modules: Overrides the default module list.

  Returns:
      int: Number of registered answers after loading.
  """
  global _ANSWERS_LOADED
  for name in modules or ANSWER_MODULES:
    importlib.import_module(name)
    for slug, entry in _MODULE_ANSWERS.get(name, {}).items():
      _ANSWERS.setdefault(slug, entry)
  if modules is None:
    _ANSWERS_LOADED = True
  return len(_ANSWERS)


def clear_answers() -> None:
  """Resets the registry. Primarily for testing."""
  global _ANSWERS_LOADED
  _ANSWERS.clear()
  _ANSWERS_LOADED = False


def _ensure_loaded() -> None:
  if not _ANSWERS_LOADED and not _ANSWERS:
    load_answers()


def build_catalogue(sections: Optional[Iterable[Union[Section, str]]] = None) -> List[Answer]:
  """
  Orders and numbers the registered answers.

  Sections follow `Section` declaration order; answers keep registration
  order within their section.

  Args:
      sections: Optional filter. If omitted, every section is included.

  Returns:
      List[Answer]: Copies of the registry entries with `number` set.
  """
  _ensure_loaded()
  wanted = [Section(s) for s in sections] if sections else list(Section)

  ordered: List[Answer] = []
  for section in Section:
    if section not in wanted:
      continue
    ordered.extend(a for a in _ANSWERS.values() if a.section == section)

  return [a.model_copy(update={"number": idx}) for idx, a in enumerate(ordered, start=1)]


def get_answer(key: Union[str, int]) -> Answer:
  """
  Looks up an answer by slug or catalogue number.

  Args:
      key: A slug, or a number (int or digit string) in the full catalogue.

  Returns:
      Answer: The numbered entry.

  Raises:
      AnswerNotFoundError: If nothing matches.
  """
  catalogue = build_catalogue()

  if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
    idx = int(key)
    if 1 <= idx <= len(catalogue):
      return catalogue[idx - 1]
    raise AnswerNotFoundError(f"No answer numbered {idx} (catalogue has {len(catalogue)})")

  for entry in catalogue:
    if entry.slug == key:
      return entry
  raise AnswerNotFoundError(f"No answer with slug '{key}'")
