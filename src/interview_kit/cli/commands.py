"""
CLI Command Handlers.

Each handler returns a process exit code: 0 on success, 1 on a handled
failure. Package errors and file system errors are logged, not raised.
"""

import sys
from pathlib import Path
from typing import List, Optional

from rich.syntax import Syntax
from rich.table import Table

from interview_kit.catalogue.registry import build_catalogue, get_answer
from interview_kit.catalogue.renderer import CatalogueRenderer
from interview_kit.config import CatalogueConfig
from interview_kit.errors import InterviewKitError
from interview_kit.utils.console import console, log_error, log_info, log_success
from interview_kit.utils.readme_editor import ReadmeEditor


def handle_list(sections: Optional[List[str]] = None) -> int:
  """Handles 'list' command."""
  try:
    entries = build_catalogue(sections)
  except ValueError as e:
    log_error(str(e))
    return 1

  table = Table(title="Interview Catalogue")
  table.add_column("#", justify="right", style="bold")
  table.add_column("Section", style="cyan")
  table.add_column("Slug", style="bold magenta")
  table.add_column("Question")

  for entry in entries:
    table.add_row(str(entry.number), entry.section.heading, entry.slug, entry.question)

  console.print(table)
  return 0


def handle_show(key: str, include_docstrings: bool = True) -> int:
  """Handles 'show' command."""
  try:
    entry = get_answer(key)
  except InterviewKitError as e:
    log_error(str(e))
    return 1

  renderer = CatalogueRenderer.for_entries(build_catalogue(), include_docstrings=include_docstrings)
  code = renderer.extractor.extract(entry.target)

  console.print(f"[bold]{entry.number}. {entry.question}[/bold]", highlight=False)
  console.print(f"[dim]{entry.module}.{entry.name}[/dim]")
  console.print(Syntax(code, "python", line_numbers=False))
  return 0


def handle_render(config: CatalogueConfig, out_path: Optional[Path] = None) -> int:
  """
  Handles 'render' command.

  Writes the Markdown document to `out_path`, or to stdout when omitted.
  """
  entries = build_catalogue(config.sections)
  renderer = CatalogueRenderer.for_entries(entries, include_docstrings=config.include_docstrings)
  markdown = renderer.render_markdown(entries, title=config.title)

  if out_path is None:
    sys.stdout.write(markdown)
    return 0

  log_info(f"Rendering {len(entries)} answers to {out_path}...")
  try:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
      f.write(markdown)
  except OSError as e:
    log_error(f"Could not write {out_path}: {e}")
    return 1

  log_success(f"Catalogue saved to [path]{out_path}[/path]")
  return 0


def handle_update_readme(config: CatalogueConfig, readme_path: Path) -> int:
  """Handles 'update-readme' command."""
  entries = build_catalogue(config.sections)
  renderer = CatalogueRenderer.for_entries(entries, include_docstrings=config.include_docstrings)
  editor = ReadmeEditor(readme_path, marker=config.readme_marker)
  return 0 if editor.update_catalogue(entries, renderer) else 1
