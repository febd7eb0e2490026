"""
Root conftest.py - puts this checkout on sys.path and provides shared fixtures.
"""
import sys
import os

import numpy as np
import pytest

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# `import polychroma` must resolve to this checkout, not an installed copy
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def rng():
    """A fresh, seeded generator per test; random colors never share state."""
    return np.random.default_rng(2024)
