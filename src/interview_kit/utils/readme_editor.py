"""
README Catalogue Splicing.

Rewrites the body of one level-2 section of a Markdown file with the rendered
catalogue, leaving the rest of the document untouched.
"""

import re
from pathlib import Path
from typing import List

from interview_kit.catalogue.registry import Answer
from interview_kit.catalogue.renderer import CatalogueRenderer
from interview_kit.utils.console import log_error, log_success


class ReadmeEditor:
  """
  Utility to programmatically refresh the question catalogue inside a README.

  It renders the catalogue as a fragment (sections at `###`, questions at
  `####`) and splices it under a marker heading, replacing everything up to
  the next `## Header` or End of File.
  """

  def __init__(self, readme_path: Path, marker: str = "## Questions") -> None:
    """
    Initializes the editor.

    Args:
        readme_path: File system path to the target markdown file.
        marker: The exact `##` heading line the catalogue lives under.
    """
    self.readme_path = readme_path
    self.marker = marker
    self._marker_re = re.compile(rf"^{re.escape(marker)}[ \t]*$", re.MULTILINE)

  def update_catalogue(self, entries: List[Answer], renderer: CatalogueRenderer) -> bool:
    """
    Regenerates the catalogue fragment and injects it into the README.

    Args:
        entries: Numbered answers to render.
        renderer: The renderer to produce Markdown with.

    Returns:
        bool: True if the update was successful, False otherwise.
    """
    if not self.readme_path.exists():
      log_error(f"README not found at {self.readme_path}")
      return False

    try:
      content = self.readme_path.read_text(encoding="utf-8")
    except OSError as e:
      log_error(f"Could not read README: {e}")
      return False

    if self._marker_re.search(content) is None:
      log_error(f"Could not find '{self.marker}' section in README.")
      return False

    fragment = renderer.render_markdown(entries, title=None, heading_level=2)
    new_content = self.splice(content, fragment)

    try:
      self.readme_path.write_text(new_content, encoding="utf-8")
    except OSError as e:
      log_error(f"Failed to write to README: {e}")
      return False

    log_success(f"Updated {self.readme_path.name} with {len(entries)} answers.")
    return True

  def splice(self, content: str, fragment: str) -> str:
    """
    Replaces the body of the marker section with `fragment`.

    Args:
        content: Full README text containing the marker.
        fragment: Markdown to place under the marker.

    Returns:
        str: The updated README text.

    Raises:
        ValueError: If the marker is not present as a whole line.
    """
    match = self._marker_re.search(content)
    if match is None:
      raise ValueError(f"Marker '{self.marker}' not found on a line of its own")
    pre, remainder = content[: match.start()], content[match.end() :]

    # Next level-2 heading; deeper headings belong to the fragment
    next_section = re.search(r"\n## ", remainder)
    post = remainder[next_section.start() :] if next_section else ""

    return f"{pre}{self.marker}\n\n{fragment}{post}"
