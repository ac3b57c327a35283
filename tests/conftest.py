import numpy as np
import pytest

from game.board import Direction
from game.levels import Level, SnakeStart, column
from game.session import GameSession


class StubRng:
    """
    Deterministic stand-in for np.random.Generator.

    `random()` always returns `roll`; `integers(high)` returns `index`
    (clamped below `high`), so level picks and food cells are predictable.
    """

    def __init__(self, roll: float = 0.5, index: int = 0):
        self.roll = roll
        self.index = index

    def random(self) -> float:
        return self.roll

    def integers(self, high: int) -> int:
        return min(self.index, high - 1)


def open_level(*, walls=frozenset(), direction=Direction.DOWN) -> Level:
    """No walls; snake 1 in column 2 and snake 2 in column 10, heads at row 2."""
    return Level(
        name='test',
        walls=walls,
        snakes=(
            SnakeStart(column(2, 2, 1, 0), direction),
            SnakeStart(column(10, 2, 1, 0), direction),
        ),
    )


@pytest.fixture
def stub_rng():
    return StubRng()


@pytest.fixture
def session(stub_rng):
    """Session on an open test level where candy never spawns."""
    game = GameSession(stub_rng)
    game.load(open_level())
    return game


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(1234)


