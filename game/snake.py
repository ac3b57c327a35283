from collections import deque
from typing import Iterable

from game.board import DIRECTION_TO_MOVE, Direction, Point
from game.config import INPUT_QUEUE_LIMIT


class Snake:
    """
    One player's snake:
      - body: deque of Points, head at index 0
      - pending: buffered turns, oldest first (at most INPUT_QUEUE_LIMIT)
      - last_direction: the direction applied on the previous tick

    Notes:
      - The snake never moves itself. GameSession pushes the new head and
        pops the tail once the move is known to be safe.
      - With nothing buffered the snake keeps its momentum.
    """
    __slots__ = ("body", "pending", "last_direction")

    def __init__(self, body: Iterable[Point], direction: Direction):
        self.body: deque[Point] = deque(Point(int(x), int(y)) for x, y in body)
        if not self.body:
            raise ValueError("Snake must have at least one segment")

        self.pending: deque[Direction] = deque()
        self.last_direction = Direction(direction)

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def tail(self) -> Point:
        return self.body[-1]

    # -------- Input --------
    def enqueue_direction(self, direction) -> None:
        """Buffer a turn. Anything that is not a cardinal direction is ignored."""
        if direction not in DIRECTION_TO_MOVE:
            return
        if len(self.pending) >= INPUT_QUEUE_LIMIT:
            return
        self.pending.append(Direction(direction))

    def next_direction(self) -> Direction:
        if self.pending:
            self.last_direction = self.pending.popleft()
        return self.last_direction

    # -------- Queries --------
    def occupies(self, p: Point) -> bool:
        return p in self.body
