"""Pytest configuration for the `tests/` suite.

CI installs the package in editable mode. Running pytest from a plain checkout
still works because the repository root is prepended to `sys.path`.
"""

from __future__ import annotations

import sys
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[1]

if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
