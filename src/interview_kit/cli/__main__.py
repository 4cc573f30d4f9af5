"""
Main Entry Point for interview-kit CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `interview_kit.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from interview_kit import __version__
from interview_kit.cli import commands
from interview_kit.config import CatalogueConfig
from interview_kit.enums import Section
from interview_kit.utils.console import log_error


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  section_names = [s.value for s in Section]

  parser = argparse.ArgumentParser(description="interview-kit: Interview questions answered in Python")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: LIST ---
  cmd_list = subparsers.add_parser("list", help="List catalogued questions")
  cmd_list.add_argument("--section", nargs="+", choices=section_names, default=None, help="Only these sections")

  # --- Command: SHOW ---
  cmd_show = subparsers.add_parser("show", help="Print one answer with syntax highlighting")
  cmd_show.add_argument("key", help="Answer slug (e.g. deep-copy) or catalogue number")
  cmd_show.add_argument("--no-docstrings", action="store_true", help="Strip docstrings from the listing")

  # --- Command: RENDER ---
  cmd_render = subparsers.add_parser("render", help="Render the catalogue as Markdown")
  cmd_render.add_argument("--out", type=Path, default=None, help="Output file (default: stdout)")
  cmd_render.add_argument("--section", nargs="+", choices=section_names, default=None, help="Only these sections")
  cmd_render.add_argument("--title", default=None, help="Document title (default: from toml)")
  cmd_render.add_argument(
    "--no-docstrings",
    action="store_true",
    default=None,
    help="Strip docstrings from code blocks (Overrides config)",
  )

  # --- Command: UPDATE README ---
  cmd_readme = subparsers.add_parser("update-readme", help="Splice the catalogue into a README")
  cmd_readme.add_argument("--readme-path", type=Path, default=Path("README.md"))
  cmd_readme.add_argument("--marker", default=None, help="Level-2 heading to splice under (default: from toml)")

  args = parser.parse_args(argv)

  if args.command == "list":
    return commands.handle_list(args.section)

  elif args.command == "show":
    return commands.handle_show(args.key, include_docstrings=not args.no_docstrings)

  elif args.command == "render":
    try:
      config = CatalogueConfig.load(
        title=args.title,
        include_docstrings=False if args.no_docstrings else None,
        sections=args.section,
      )
    except ValidationError as e:
      log_error(f"Invalid configuration: {e}")
      return 1
    return commands.handle_render(config, args.out)

  elif args.command == "update-readme":
    try:
      config = CatalogueConfig.load(readme_marker=args.marker)
    except ValidationError as e:
      log_error(f"Invalid configuration: {e}")
      return 1
    return commands.handle_update_readme(config, args.readme_path)

  return 0


if __name__ == "__main__":
  sys.exit(main())
