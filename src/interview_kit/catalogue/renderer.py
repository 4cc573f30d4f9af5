"""
Catalogue Markdown Renderer.

Turns a built catalogue (numbered `Answer` list) into the document a reader
studies: a title, a table of contents, one heading per section and, per
answer, a numbered question heading followed by a fenced Python block.

The same renderer produces the standalone document (`heading_level=1`) and
the fragment spliced into a README under an existing `##` heading
(`heading_level=2`).
"""

import re
from itertools import groupby
from typing import List, Optional

from interview_kit.catalogue.registry import Answer
from interview_kit.utils.code_extractor import AnswerSourceExtractor

_ANCHOR_STRIP_RE = re.compile(r"[^\w\- ]")


def github_anchor(text: str) -> str:
  """
  Computes the anchor GitHub generates for a Markdown heading.

  Lowercases, drops punctuation other than hyphens and underscores, and
  turns spaces into hyphens.
  """
  return _ANCHOR_STRIP_RE.sub("", text.strip().lower()).replace(" ", "-")


class CatalogueRenderer:
  """
  Renders numbered answers to Markdown.
  """

  def __init__(self, extractor: Optional[AnswerSourceExtractor] = None) -> None:
    """
    Args:
        extractor: Source extractor. If None, one is created that keeps
            docstrings and skips nothing.
    """
    self.extractor = extractor or AnswerSourceExtractor()

  @classmethod
  def for_entries(cls, entries: List[Answer], include_docstrings: bool = True) -> "CatalogueRenderer":
    """
    Builds a renderer whose extractor never inlines another answer as a helper.
    """
    answer_ids = {id(e.target) for e in entries}
    extractor = AnswerSourceExtractor(
      strip_docstrings=not include_docstrings,
      skip=lambda obj: id(obj) in answer_ids,
    )
    return cls(extractor)

  def render_markdown(self, entries: List[Answer], title: Optional[str] = None, heading_level: int = 1) -> str:
    """
    Generates the full Markdown document.

    Args:
        entries: Numbered answers, already in catalogue order.
        title: Document title. Omitted when None.
        heading_level: Level of the title. Sections use one level deeper
            and questions two levels deeper.

    Returns:
        str: Markdown text ending with a single newline.
    """
    section_hashes = "#" * (heading_level + 1)
    toc_heading = f"{section_hashes} Table of Contents"
    lines: List[str] = []

    if title:
      lines.extend([f"{'#' * heading_level} {title}", ""])

    lines.extend(self._render_toc(entries, toc_heading))

    for section, group in groupby(entries, key=lambda e: e.section):
      lines.extend([f"{section_hashes} {section.heading}", ""])
      for entry in group:
        lines.extend(self.render_entry(entry, heading_level + 2))
        lines.extend([f"**[⬆ Back to top](#{github_anchor('Table of Contents')})**", ""])

    return "\n".join(lines).rstrip("\n") + "\n"

  def _render_toc(self, entries: List[Answer], toc_heading: str) -> List[str]:
    lines = [toc_heading, ""]
    for section, group in groupby(entries, key=lambda e: e.section):
      lines.append(f"- [{section.heading}](#{github_anchor(section.heading)})")
      for entry in group:
        heading = self._question_heading(entry)
        lines.append(f"  - [{heading}](#{github_anchor(heading)})")
    lines.append("")
    return lines

  @staticmethod
  def _question_heading(entry: Answer) -> str:
    return f"{entry.number}. {entry.question}" if entry.number is not None else entry.question

  def render_entry(self, entry: Answer, level: int = 3) -> List[str]:
    """
    Renders one question heading and its code block.

    Args:
        entry: The answer to render.
        level: Markdown heading level of the question.

    Returns:
        List[str]: Lines of Markdown, ending with a blank line.
    """
    code = self.extractor.extract(entry.target)
    return [
      f"{'#' * level} {self._question_heading(entry)}",
      "",
      f"`{entry.module}.{entry.name}`",
      "",
      "```python",
      code,
      "```",
      "",
    ]
