"""Top-level pytest configuration for logenv tests."""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure(config) -> None:  # pragma: no cover - configuration hook
    # Keep `import logenv` working when running `pytest` from a source checkout.
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)
