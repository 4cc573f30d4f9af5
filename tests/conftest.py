"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Answer registry isolation so tests registering custom answers do not leak.
- A recording console fixture for asserting on CLI output.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'interview_kit' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Importing the package registers every built-in answer; this is the baseline
# restored after each test.
import interview_kit  # noqa: E402,F401
from interview_kit.catalogue import registry  # noqa: E402
from interview_kit.utils.console import reset_console, set_console  # noqa: E402

registry.load_answers()
_BASELINE = dict(registry._ANSWERS)


@pytest.fixture(autouse=True)
def isolate_answer_registry():
  """Restores the built-in answers after every test."""
  yield
  registry._ANSWERS.clear()
  registry._ANSWERS.update(_BASELINE)
  registry._ANSWERS_LOADED = True


@pytest.fixture
def empty_registry():
  """Starts a test with no registered answers."""
  registry.clear_answers()
  # Prevent lazy loading from re-populating the registry.
  registry._ANSWERS_LOADED = True
  yield registry


@pytest.fixture
def recording_console():
  """Routes console output and logging into an in-memory Rich console."""
  rec = Console(record=True, width=200, force_terminal=False, color_system=None)
  set_console(rec)
  yield rec
  reset_console()
