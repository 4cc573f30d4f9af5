"""
Enumerations for interview-kit.

The declaration order of `Section` is the order in which sections appear in
the rendered catalogue.
"""

from enum import Enum


class Section(str, Enum):
  """
  Topic groups of the catalogue.
  """

  OBJECTS = "objects"
  ASYNC = "async"
  EVENTS = "events"
  TIMING = "timing"
  FUNCTIONAL = "functional"
  ARRAYS = "arrays"

  @property
  def heading(self) -> str:
    """Human readable heading for the section."""
    return _TITLES[self]


_TITLES = {
  Section.OBJECTS: "Objects",
  Section.ASYNC: "Async & Promises",
  Section.EVENTS: "Events",
  Section.TIMING: "Timing",
  Section.FUNCTIONAL: "Functional Programming",
  Section.ARRAYS: "Arrays",
}
