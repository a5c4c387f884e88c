"""
Pytest fixtures for kelly-calc tests
"""

import sys
from pathlib import Path

import pytest
import numpy as np

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def odds_grid():
    """Decimal odds from just above even money to long shots"""
    return np.linspace(1.01, 20.0, 25)


@pytest.fixture
def probability_grid():
    """Probabilities covering [0, 1] inclusive"""
    return np.linspace(0.0, 1.0, 21)


@pytest.fixture
def price_grid():
    """Market prices covering (0, 1] inclusive"""
    return np.linspace(0.01, 1.0, 34)


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed a fixed sequence of lines to input()"""

    def _script(lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _script
