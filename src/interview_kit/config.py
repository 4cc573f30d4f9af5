"""
Catalogue Configuration Store.

Settings are read from the `[tool.interview_kit]` table of the nearest
`pyproject.toml` and overridden by CLI arguments.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from interview_kit.enums import Section

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

DEFAULT_TITLE = "Interview Questions & Answers"


class CatalogueConfig(BaseModel):
  """
  Configuration container for rendering the catalogue.
  """

  title: str = Field(DEFAULT_TITLE, description="Heading of the rendered document.")
  include_docstrings: bool = Field(True, description="Keep docstrings in rendered code blocks.")
  sections: List[Section] = Field(default_factory=lambda: list(Section), description="Sections to render, in order.")
  readme_marker: str = Field("## Questions", description="README heading the catalogue is spliced under.")

  @field_validator("sections", mode="before")
  @classmethod
  def validate_sections(cls, v: Any) -> Any:
    """
    Normalizes section names (case and whitespace) before enum validation.

    Raises:
        ValueError: If a name is not a known section.
    """
    if not isinstance(v, (list, tuple)):
      return v
    known = [s.value for s in Section]
    cleaned = []
    for item in v:
      name = item.value if isinstance(item, Section) else str(item).lower().strip()
      if name not in known:
        raise ValueError(f"Unknown section: '{name}'. Supported sections: {known}")
      cleaned.append(name)
    return cleaned

  @field_validator("readme_marker")
  @classmethod
  def validate_marker(cls, v: str) -> str:
    if not v.startswith("## "):
      raise ValueError(f"readme_marker must be a level-2 heading ('## ...'), got '{v}'")
    return v

  @classmethod
  def load(
    cls,
    title: Optional[str] = None,
    include_docstrings: Optional[bool] = None,
    sections: Optional[List[str]] = None,
    readme_marker: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "CatalogueConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        title: Override for the document title.
        include_docstrings: Override for docstring rendering.
        sections: Override for the section filter.
        readme_marker: Override for the README marker heading.
        search_path: Directory to start searching for TOML config.

    Returns:
        CatalogueConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    values: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    overrides = {
      "title": title,
      "include_docstrings": include_docstrings,
      "sections": sections or None,
      "readme_marker": readme_marker,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    return cls(**values)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None
      return data.get("tool", {}).get("interview_kit", {}), parent

  return {}, None
