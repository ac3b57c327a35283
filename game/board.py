from enum import StrEnum
from typing import Iterable, NamedTuple

import numpy as np

from game.config import BOARD_HEIGHT, BOARD_WIDTH


class Point(NamedTuple):
    x: int
    y: int


class Direction(StrEnum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


class Key(StrEnum):
    """Abstract key identifiers delivered by the input layer."""
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    PAUSE = 'pause'
    RESTART = 'restart'
    QUIT = 'quit'


class Outcome(StrEnum):
    ALIVE = 'alive'
    DEAD = 'dead'


DIRECTION_TO_MOVE: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def in_bounds(p: Point) -> bool:
    return 0 <= p.x < BOARD_WIDTH and 0 <= p.y < BOARD_HEIGHT


# -------- Movement rules --------
def advance(head: Point, direction: Direction) -> Point:
    """
    Step `head` one cell along `direction` on the torus: leaving one edge
    re-enters on the opposite one. Raises ValueError for anything that is
    not a cardinal direction.
    """
    dx, dy = DIRECTION_TO_MOVE[Direction(direction)]
    return Point((head.x + dx) % BOARD_WIDTH, (head.y + dy) % BOARD_HEIGHT)


def classify(candidate: Point, walls: Iterable[Point], snake) -> Outcome:
    """
    DEAD if `candidate` is a wall or a cell of the snake's own (pre-move)
    body. The other snake's body is not checked: snakes pass through each other.
    """
    if candidate in walls or snake.occupies(candidate):
        return Outcome.DEAD
    return Outcome.ALIVE


# ---- Unified occupancy grid (bitmask) ----
# Flats are y*BOARD_W + x
N_CELLS: int = BOARD_WIDTH * BOARD_HEIGHT

OCC_EMPTY: int = 0
OCC_WALL: int = 1 << 0
OCC_HIDDEN: int = 1 << 1  # invisible walls
OCC_SNAKE: int = 1 << 2
OCC_FOOD: int = 1 << 3


def to_flat(p: Point) -> int:
    return int(p.y * BOARD_WIDTH + p.x)


def from_flat(flat: int) -> Point:
    y, x = divmod(int(flat), BOARD_WIDTH)
    return Point(x, y)


def _flats(points: Iterable[Point]) -> np.ndarray:
    return np.fromiter((to_flat(p) for p in points), dtype=np.int32)


def occupancy(
    walls: Iterable[Point] = (),
    invisible_walls: Iterable[Point] = (),
    bodies: Iterable[Iterable[Point]] = (),
    food: Iterable[Point] = (),
) -> np.ndarray:
    """Build a flat (N_CELLS,) uint8 occupancy grid with OCC_* bits set."""
    occ = np.zeros(N_CELLS, dtype=np.uint8)
    occ[_flats(walls)] |= OCC_WALL
    occ[_flats(invisible_walls)] |= OCC_HIDDEN
    for body in bodies:
        occ[_flats(body)] |= OCC_SNAKE
    occ[_flats(food)] |= OCC_FOOD
    return occ


def free_flats(occ: np.ndarray) -> np.ndarray:
    """Flat indices of fully empty cells."""
    return np.flatnonzero(occ == OCC_EMPTY)
