"""Shared fixtures. pygame is forced onto the dummy video driver so layout tests run headless."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest


class ScriptedRng:
    """Stand-in for numpy's Generator that replays queued results for integers()."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def integers(self, low, high=None, size=None):
        self.calls.append((low, high, size))
        return self.results.pop(0)


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def no_sleep():
    """Records requested delays instead of sleeping."""
    delays = []
    def _sleep(seconds):
        delays.append(seconds)
    _sleep.delays = delays
    return _sleep
