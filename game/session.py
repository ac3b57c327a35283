"""
Game session: owns the snakes, walls, food and score, and runs the
Playing / Paused / GameOver state machine.

The driver calls `key_press` for every key event and `update(dt)` every
frame; `tiles_to_draw` is what a renderer paints.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

import numpy as np

from game.board import Key, Outcome, Point, advance, classify, occupancy
from game.config import (
    BACKGROUND_COLOR, CANDY_COLOR, APPLE_COLOR, GAME_OVER_COLOR, SNAKE_COLORS, SPEED_UP,
    TICK_INTERVAL, WALL_COLOR,
)
from game.food import FoodManager, FoodType
from game.levels import Level, generate
from game.snake import Snake

logger = logging.getLogger(__name__)


class State(StrEnum):
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class TileKind(StrEnum):
    WALL = auto()
    FOOD = auto()
    SNAKE = auto()


@dataclass(frozen=True)
class Tile:
    position: Point
    color: str  # hex
    kind: TileKind
    visible: bool = True


FOOD_COLORS = {
    FoodType.APPLE: APPLE_COLOR,
    FoodType.CANDY: CANDY_COLOR,
}


class GameSession:

    def __init__(self, rng: np.random.Generator | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.food = FoodManager(self.rng)
        self.generation = 0
        self.restart()

    # -------- Lifecycle --------
    def restart(self) -> None:
        """Full reset onto a freshly generated level."""
        self.load(generate(self.rng))

    def load(self, level: Level) -> None:
        self.level_name = level.name
        self.snakes = [Snake(start.body, start.direction) for start in level.snakes]
        self.walls: frozenset[Point] = level.walls
        self.invisible_walls: frozenset[Point] = level.invisible_walls
        self.food.clear()
        # start one full interval in so the first update ticks right away
        self.time = TICK_INTERVAL
        self.tick_interval = TICK_INTERVAL
        self.score = 0
        self.ticks = 0
        self.state = State.PLAYING
        self.generation += 1
        logger.info('Level %r started', level.name)

    # -------- Input --------
    def key_press(self, key) -> None:
        if key == Key.RESTART:
            self.restart()
            return

        if key == Key.PAUSE and self.state is State.PLAYING:
            self.state = State.PAUSED
            self.generation += 1
            logger.info('Paused')
        elif key == Key.PAUSE and self.state is State.PAUSED:
            self.state = State.PLAYING
            self.generation += 1
            logger.info('Resumed')
        else:
            for snake in self.snakes:
                snake.enqueue_direction(key)

    # -------- Simulation --------
    def update(self, dt: float) -> None:
        if self.state is not State.PLAYING:
            return

        self.time += dt
        if self.time > self.tick_interval:
            self.time -= self.tick_interval
            self.step()

    def step(self) -> None:
        """Run exactly one discrete simulation step."""
        number_dead = 0
        for snake in self.snakes:
            next_head = advance(snake.head, snake.next_direction())
            if classify(next_head, self.walls, snake) is Outcome.DEAD:
                number_dead += 1
                continue

            food = self.food.eat(next_head)
            if food is not None:
                self.score += food.score
                snake.body.append(snake.tail)
                self.tick_interval -= SPEED_UP

            snake.body.pop()
            snake.body.appendleft(next_head)

        self.food.update(self.occupancy())
        self.ticks += 1
        self.generation += 1

        if number_dead == len(self.snakes):
            self.state = State.GAME_OVER
            logger.info('Game over after %d ticks, score: %d', self.ticks, self.score)

    def occupancy(self) -> np.ndarray:
        return occupancy(
            walls=self.walls,
            invisible_walls=self.invisible_walls,
            bodies=(s.body for s in self.snakes),
            food=(f.position for f in self.food),
        )

    # -------- Rendering boundary --------
    def tiles_to_draw(self) -> list[Tile]:
        """Food, then snakes, then walls (later tiles paint over earlier ones)."""
        tiles = [Tile(f.position, FOOD_COLORS[f.kind], TileKind.FOOD, f.visible) for f in self.food]
        for idx, snake in enumerate(self.snakes):
            color = SNAKE_COLORS[idx % len(SNAKE_COLORS)]
            tiles.extend(Tile(p, color, TileKind.SNAKE) for p in snake.body)
        tiles.extend(Tile(p, WALL_COLOR, TileKind.WALL) for p in sorted(self.walls))
        return tiles

    def background_color(self) -> str:
        return GAME_OVER_COLOR if self.state is State.GAME_OVER else BACKGROUND_COLOR


# ---------------- Public API ----------------
def new_session(rng: np.random.Generator | None = None) -> GameSession:
    return GameSession(rng)


def key_press(session: GameSession, key) -> None:
    session.key_press(key)


def update(session: GameSession, dt: float) -> None:
    session.update(dt)


def tiles_to_draw(session: GameSession) -> list[Tile]:
    return session.tiles_to_draw()


def background_color(session: GameSession) -> str:
    return session.background_color()
