#!/usr/bin/env python3
"""
Documentation Build Script for interview-kit.

This script orchestrates the Sphinx documentation build process:
1.  Cleaning previous build artifacts.
2.  Copying the root README into the docs directory.
3.  Rendering the question catalogue to `docs/questions.md`.
4.  Invoking `sphinx-build` to generate the HTML site.
"""

import shutil
import subprocess
import sys
from pathlib import Path

# Configuration
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOCS_DIR = PROJECT_ROOT / "docs"
BUILD_DIR = DOCS_DIR / "_build"
CATALOGUE_FILE = DOCS_DIR / "questions.md"

# Files to copy from root to docs/ to be rendered
ROOT_FILES = ["README.md"]


def clean() -> None:
  """
  Removes the `_build` directory, copied root files, the rendered catalogue
  and the autoapi output.
  """
  if BUILD_DIR.exists():
    shutil.rmtree(BUILD_DIR)

  for fname in ROOT_FILES:
    dest = DOCS_DIR / fname
    if dest.exists():
      dest.unlink()

  if CATALOGUE_FILE.exists():
    CATALOGUE_FILE.unlink()

  api_dir = DOCS_DIR / "api"
  if api_dir.exists():
    shutil.rmtree(api_dir)


def copy_root_files() -> None:
  print("📋 Copying root Markdown files to docs/...")
  for fname in ROOT_FILES:
    src = PROJECT_ROOT / fname
    if src.exists():
      shutil.copy2(src, DOCS_DIR / fname)
    else:
      print(f"⚠️  Warning: {fname} not found in root.")


def render_catalogue() -> int:
  """
  Renders the catalogue through the package CLI.

  Returns:
      int: The CLI exit code.
  """
  print("📚 Rendering question catalogue...")
  cmd = [sys.executable, "-m", "interview_kit", "render", "--out", str(CATALOGUE_FILE)]
  return subprocess.run(cmd, cwd=PROJECT_ROOT).returncode


def build() -> int:
  """
  Runs `sphinx-build -b html`.

  Returns:
      int: The exit code from sphinx-build (0 for success).
  """
  print("🏗️  Building Sphinx documentation...")
  cmd = [
    sys.executable,
    "-m",
    "sphinx",
    "-b",
    "html",
    str(DOCS_DIR),
    str(BUILD_DIR / "html"),
  ]
  return subprocess.run(cmd).returncode


def main() -> None:
  """
  Main entry point. Orchestrates clean, copy, render and build steps.
  """
  ret = 1
  try:
    clean()
    copy_root_files()
    ret = render_catalogue()
    if ret == 0:
      ret = build()

    if ret == 0:
      index_path = BUILD_DIR / "html" / "index.html"
      print("\n✨ Documentation built successfully!")
      print(f"🌍 Open index at: {index_path.resolve()}")
  finally:
    for fname in ROOT_FILES:
      dest = DOCS_DIR / fname
      if dest.exists():
        dest.unlink()

  sys.exit(ret)


if __name__ == "__main__":
  main()
