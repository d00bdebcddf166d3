"""Pytest configuration and fixtures for ymdate tests."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add the parent directory to sys.path so ymdate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def fixed_clock():
    """Return a factory for clocks frozen at a given local datetime."""

    def make(*args: int):
        frozen = datetime(*args)
        return lambda: frozen

    return make
