import os
import sys
from datetime import datetime

# -- Project information -----------------------------------------------------
project = "interview-kit"
author = "interview-kit contributors"
copyright = f"{datetime.now().year}, {author}"
version = "0.1.0"
release = version

# -- Path setup --------------------------------------------------------------
# Use __file__ anchors to find 'src' regardless of CWD; local code wins over site-packages.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

# -- General configuration ---------------------------------------------------
extensions = [
  "sphinx.ext.autodoc",
  "sphinx.ext.napoleon",
  "sphinx.ext.intersphinx",
  "autoapi.extension",
  "myst_parser",
  "sphinx_copybutton",
]

suppress_warnings = ["autoapi.python_import_resolution"]

# -- AutoAPI Configuration ---------------------------------------------------
autoapi_dirs = ["../src"]
autoapi_type = "python"
autoapi_root = "api"
autoapi_options = [
  "members",
  "undoc-members",
  "show-inheritance",
  "show-module-summary",
]
autoapi_ignore = ["*/tests/*", "*test_*.py"]

# -- MyST Parser Configuration -----------------------------------------------
myst_enable_extensions = [
  "colon_fence",
  "deflist",
  "fieldlist",
]
# Questions are rendered at heading level 3; anchors must reach them.
myst_heading_anchors = 3

intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

# -- Theme Configuration -----------------------------------------------------
html_theme = "alabaster"
html_title = "interview-kit"
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
