import os
import sys

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from board import EMPTY, FOOD
from renderer import Renderer
from session import GameSession


class RecordingRenderer(Renderer):
    """Records every call made by the session, in order."""

    def __init__(self):
        self.calls = []

    def render_cell(self, cell, state):
        self.calls.append(("cell", cell, state))

    def render_score(self, score):
        self.calls.append(("score", score))

    def show_game_over(self, won=False):
        self.calls.append(("game_over", won))

    def hide_game_over(self):
        self.calls.append(("hide_game_over",))

    def set_start_enabled(self, enabled):
        self.calls.append(("start_enabled", enabled))

    def cells(self):
        return [(call[1], call[2]) for call in self.calls if call[0] == "cell"]

    def clear(self):
        self.calls = []


def put_food(session, cell):
    """Move the session's food to a chosen cell."""
    if session.food is not None:
        session.board.set_cell_state(session.food, EMPTY)
    session.board.set_cell_state(cell, FOOD)
    session.food = cell


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def session(renderer, rng):
    return GameSession(renderer, rng=rng)
