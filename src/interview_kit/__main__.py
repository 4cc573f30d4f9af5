"""
Entry point for module execution (``python -m interview_kit``).

This module delegates execution to the CLI handler in ``interview_kit.cli.__main__``.
"""

import sys
from interview_kit.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
