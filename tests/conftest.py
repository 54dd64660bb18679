"""Pytest configuration.

Makes the `rangeparser` package importable when running `pytest` from a checkout without
installing it, and provides a parser anchored to a fixed moment.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure `import rangeparser` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from rangeparser.parser import RangeParser  # noqa: E402

# Friday.
ANCHOR = datetime(2024, 3, 15, 10, 0, 0)


@pytest.fixture
def anchor() -> datetime:
    return ANCHOR


@pytest.fixture
def parser() -> RangeParser:
    return RangeParser(now_provider=lambda: ANCHOR)
