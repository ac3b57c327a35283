"""
Hand-authored level catalog.

Coordinates are absolute for the 15x15 board. A new layout is one more
entry in LEVELS.
"""

from dataclasses import dataclass, field

import numpy as np

from game.board import Direction, Point, in_bounds


def points(*coords: int) -> frozenset[Point]:
    """points(1,0, 2,0, ...) -> {Point(1, 0), Point(2, 0), ...}"""
    if len(coords) % 2:
        raise ValueError(f"odd number of coordinates: {len(coords)}")
    return frozenset(Point(x, y) for x, y in zip(coords[::2], coords[1::2]))


def column(x: int, *ys: int) -> tuple[Point, ...]:
    """Vertical snake body in column `x`, head first."""
    return tuple(Point(x, y) for y in ys)


@dataclass(frozen=True)
class SnakeStart:
    body: tuple[Point, ...]
    direction: Direction = Direction.DOWN


@dataclass(frozen=True)
class Level:
    name: str
    walls: frozenset[Point]
    invisible_walls: frozenset[Point] = field(default_factory=frozenset)
    snakes: tuple[SnakeStart, ...] = ()

    def __post_init__(self):
        taken: set[Point] = set()
        for start in self.snakes:
            if not start.body:
                raise ValueError(f"{self.name}: empty snake")
            for p in start.body:
                if not in_bounds(p):
                    raise ValueError(f"{self.name}: snake cell {p} is off the board")
                if p in self.walls:
                    raise ValueError(f"{self.name}: snake cell {p} is on a wall")
                if p in taken:
                    raise ValueError(f"{self.name}: snakes overlap at {p}")
                taken.add(p)
        for p in self.walls | self.invisible_walls:
            if not in_bounds(p):
                raise ValueError(f"{self.name}: wall {p} is off the board")


# Border with gaps at the corners and edge midpoints, one block in the middle
ARENA = Level(
    name='arena',
    walls=points(
        1,0, 2,0, 3,0, 4,0, 5,0, 6,0, 8,0, 9,0, 10,0, 11,0, 12,0, 13,0,
        14,1, 14,2, 14,3, 14,4, 14,5, 14,6, 14,8, 14,9, 14,10, 14,11, 14,12, 14,13,
        1,14, 2,14, 3,14, 4,14, 5,14, 6,14, 8,14, 9,14, 10,14, 11,14, 12,14, 13,14,
        0,1, 0,2, 0,3, 0,4, 0,5, 0,6, 0,8, 0,9, 0,10, 0,11, 0,12, 0,13,
        7,7,
    ),
    invisible_walls=points(0,0, 7,0, 14,0, 14,7, 14,14, 7,14, 0,14, 0,7),
    snakes=(
        SnakeStart(column(2, 3, 2, 1)),
        SnakeStart(column(4, 3, 2, 1)),
    ),
)

# Two diagonals crossing in the middle, plus the four edge midpoints
CROSS = Level(
    name='cross',
    walls=points(
        2,2, 3,3, 4,4, 5,5, 7,7, 9,9, 10,10, 11,11, 12,12,
        12,2, 11,3, 10,4, 9,5, 5,9, 4,10, 3,11, 2,12,
        0,7, 7,0, 14,7, 7,14,
    ),
    snakes=(
        SnakeStart(column(1, 3, 2, 1)),
        SnakeStart(column(6, 3, 2, 1)),
    ),
)

LEVELS: tuple[Level, ...] = (ARENA, CROSS)


def generate(rng: np.random.Generator) -> Level:
    """Pick a layout uniformly at random."""
    return LEVELS[int(rng.integers(len(LEVELS)))]
