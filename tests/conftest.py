import os

# Widgets and fonts need a platform plugin; tests never open a window
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from circlecurves.model.state import PuzzleSession
from tests.helpers import radial_chord_curves


@pytest.fixture
def session() -> PuzzleSession:
    return PuzzleSession(800, 600, seed=1234)


@pytest.fixture
def chord_session() -> PuzzleSession:
    s = PuzzleSession(800, 600, seed=7)
    s.load_curves(radial_chord_curves(s.circle, s.config.curve_count))
    return s


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
