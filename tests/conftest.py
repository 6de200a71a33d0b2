import os

# Must be set before any QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


class SequenceSource:
    """Deterministic replacement for random.random: cycles through fixed draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def __call__(self):
        draw = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return draw


@pytest.fixture
def midpoint_source():
    """Draws 0.5 forever, i.e. zero noise."""
    return SequenceSource([0.5])


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def make_source():
    return SequenceSource
