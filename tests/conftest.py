"""Pytest configuration for path setup.

The test suite imports the ``v20client`` package from ``v20client/src``
and the shared fakes from ``tests.helpers``.  When pytest is executed as an
installed script, neither location is automatically on ``sys.path``, so
both the project root and the package source directory are added here.
"""

from __future__ import annotations

import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]

for path in (ROOT, ROOT / "v20client" / "src"):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
