"""
Tests for CatalogueRenderer.

Verifies:
1.  Title, table of contents and section headings.
2.  Numbered question headings followed by fenced python blocks.
3.  Heading levels shift for README fragments.
4.  Other answers are never inlined as helpers.
5.  The committed README carries the rendered catalogue.
"""

from pathlib import Path

import pytest

from interview_kit.catalogue.registry import Answer, build_catalogue
from interview_kit.catalogue.renderer import CatalogueRenderer, github_anchor
from interview_kit.enums import Section


def sample_one(x):
  """Doubles x."""
  return x * 2


def sample_two(items):
  return [sample_one(i) for i in items]


@pytest.fixture
def sample_entries():
  return [
    Answer(slug="sample-one", question="How do you double a number?", section=Section.OBJECTS, target=sample_one, number=1),
    Answer(slug="sample-two", question="How do you double a list?", section=Section.ARRAYS, target=sample_two, number=2),
  ]


@pytest.mark.parametrize(
  "text, anchor",
  [
    ("Table of Contents", "table-of-contents"),
    ("Async & Promises", "async--promises"),
    ("1. How do you implement Promise.any?", "1-how-do-you-implement-promiseany"),
  ],
)
def test_github_anchor(text, anchor):
  assert github_anchor(text) == anchor


def test_document_structure(sample_entries):
  md = CatalogueRenderer.for_entries(sample_entries).render_markdown(sample_entries, title="Q&A")
  lines = md.splitlines()

  assert lines[0] == "# Q&A"
  assert "## Table of Contents" in lines
  assert "## Objects" in lines
  assert "## Arrays" in lines
  assert "### 1. How do you double a number?" in lines
  assert "### 2. How do you double a list?" in lines
  assert "- [Objects](#objects)" in lines
  assert "  - [1. How do you double a number?](#1-how-do-you-double-a-number)" in lines
  assert md.endswith("```\n\n**[⬆ Back to top](#table-of-contents)**\n")


def test_question_followed_by_code_block(sample_entries):
  md = CatalogueRenderer.for_entries(sample_entries).render_markdown(sample_entries)
  block = md.split("### 1. How do you double a number?\n", 1)[1]

  assert block.startswith(f"\n`{sample_one.__module__}.sample_one`\n\n```python\ndef sample_one(x):")
  assert '"""Doubles x."""' in block


def test_docstrings_can_be_excluded(sample_entries):
  md = CatalogueRenderer.for_entries(sample_entries, include_docstrings=False).render_markdown(sample_entries)
  assert "Doubles x." not in md


def test_other_answers_not_inlined(sample_entries):
  md = CatalogueRenderer.for_entries(sample_entries).render_markdown(sample_entries)
  assert md.count("def sample_one(") == 1


def test_fragment_heading_levels(sample_entries):
  md = CatalogueRenderer.for_entries(sample_entries).render_markdown(sample_entries, heading_level=2)
  lines = md.splitlines()

  assert "### Table of Contents" in lines
  assert "### Objects" in lines
  assert "#### 1. How do you double a number?" in lines
  assert not any(line.startswith("## ") for line in lines)


def test_full_catalogue_renders_every_answer():
  entries = build_catalogue()
  md = CatalogueRenderer.for_entries(entries).render_markdown(entries, title="Interview")

  for entry in entries:
    assert f"### {entry.number}. {entry.question}" in md
  assert md.count("```python") == len(entries)
  assert "@answer" not in md


def test_readme_contains_rendered_catalogue():
  readme = Path(__file__).resolve().parents[2] / "README.md"
  content = readme.read_text(encoding="utf-8")

  assert "## Questions\n\n### Table of Contents" in content
  for entry in build_catalogue():
    heading = f"{entry.number}. {entry.question}"
    assert f"#### {heading}\n\n`{entry.module}.{entry.name}`\n\n```python\n" in content
    assert f"](#{github_anchor(heading)})" in content
