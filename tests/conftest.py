"""Pytest configuration.

The repository uses a flat `src/` layout without an installed package. This conftest ensures tests
can import from the `src.*` namespace when running `pytest` locally, and exposes the shared roster
fixture file.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "employees_fixture.json"


@pytest.fixture
def roster_bytes() -> bytes:
    """Raw fixture roster: five valid employees and one malformed entry."""

    return FIXTURE_PATH.read_bytes()
