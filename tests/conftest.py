"""Pytest configuration for wphook.

Ensures tests import the local wphook package even when invoked from
directories other than the repository root, and provides an isolated
registry per test.
"""

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wphook import HookRegistry  # noqa: E402


@pytest.fixture
def registry():
    return HookRegistry()
