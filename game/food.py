"""
Food items and their per-tick lifecycle.

At most one item of each kind is on the board. A missing kind is rolled for
once per tick; every item ages one tick per update and disappears once it has
outlived its life time.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator

import numpy as np

from game.board import OCC_FOOD, Point, free_flats, from_flat, to_flat
from game.config import APPLE_SPEC, BLINK_TICKS, CANDY_SPEC

logger = logging.getLogger(__name__)


class FoodType(StrEnum):
    APPLE = 'apple'
    CANDY = 'candy'


# kind -> (score, life_time, probability %), in spawn order
FOOD_SPECS: dict[FoodType, tuple[int, int, float]] = {
    FoodType.APPLE: APPLE_SPEC,
    FoodType.CANDY: CANDY_SPEC,
}


@dataclass
class Food:
    kind: FoodType
    position: Point
    score: int
    life_time: int
    lived_time: int = 0

    @property
    def expired(self) -> bool:
        return self.lived_time > self.life_time

    @property
    def visible(self) -> bool:
        """False on every other tick of the last BLINK_TICKS ticks of life."""
        return not (self.life_time - self.lived_time < BLINK_TICKS and self.lived_time % 2 == 0)


class FoodManager:

    def __init__(self, rng: np.random.Generator):
        self.rng = rng
        self.items: list[Food] = []

    def __iter__(self) -> Iterator[Food]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def has(self, kind: FoodType) -> bool:
        return any(f.kind is kind for f in self.items)

    def at(self, p: Point) -> Food | None:
        for f in self.items:
            if f.position == p:
                return f
        return None

    def clear(self) -> None:
        self.items.clear()

    def eat(self, p: Point) -> Food | None:
        """Remove and return the item at `p`, if any."""
        food = self.at(p)
        if food is not None:
            self.items.remove(food)
            logger.debug('%s eaten at %s (+%d)', food.kind, tuple(food.position), food.score)
        return food

    # -------- Per-tick update --------
    def update(self, occ: np.ndarray) -> None:
        """
        Spawn missing kinds, then age everything and drop expired items.

        Args:
            occ: (N_CELLS,) uint8 occupancy grid of snakes, walls, invisible
                walls and current food. Updated in place as items spawn.
        """
        for kind, (score, life_time, probability) in FOOD_SPECS.items():
            if self.has(kind):
                continue
            food = self.spawn(kind, occ, score, life_time, probability)
            if food is not None:
                occ[to_flat(food.position)] |= OCC_FOOD
        self.age()

    def spawn(self, kind: FoodType, occ: np.ndarray, score: int, life_time: int,
              probability: float) -> Food | None:
        """
        Roll for a new item of `kind` and place it on a uniformly random empty
        cell. Returns None when the roll fails or the board has no room.
        """
        if self.rng.random() * 100.0 >= probability:
            return None

        cells = free_flats(occ)
        if cells.size == 0:
            logger.debug('No room to spawn %s', kind)
            return None

        position = from_flat(cells[int(self.rng.integers(cells.size))])
        food = Food(kind, position, score, life_time)
        self.items.append(food)
        logger.debug('%s spawned at %s', kind, tuple(position))
        return food

    def age(self) -> None:
        for f in self.items:
            f.lived_time += 1

        expired = [f for f in self.items if f.expired]
        if not expired:
            return
        for f in expired:
            logger.debug('%s at %s expired', f.kind, tuple(f.position))
        self.items = [f for f in self.items if not f.expired]
