"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from particle_sim.simulator import Simulator  # noqa: E402


class ScriptedRng:
    """Stand-in for numpy's Generator returning fixed values, in call order per method."""

    def __init__(self, random=(0.5,), uniform=(0.25,), integers=(128,)):
        self._random = list(random)
        self._uniform = list(uniform)
        self._integers = list(integers)
        self.calls = []

    @staticmethod
    def _next(values):
        # the last value repeats once the script runs out
        return values.pop(0) if len(values) > 1 else values[0]

    def random(self):
        self.calls.append('random')
        return self._next(self._random)

    def uniform(self, low, high):
        self.calls.append('uniform')
        return self._next(self._uniform)

    def integers(self, low, high):
        self.calls.append('integers')
        return self._next(self._integers)


@pytest.fixture
def rng():
    """Seeded generator for reproducible emission."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def simulator():
    """Forceless 100x100 simulator with a small ceiling."""
    sim = Simulator(5, 0, 100, 0, 100)
    sim.set_gravity(None)
    sim.set_drag(None)
    return sim
