import pytest

from game.board import Direction, Key, Point
from game.config import INPUT_QUEUE_LIMIT
from game.snake import Snake


def make_snake():
    return Snake([(2, 3), (2, 2), (2, 1)], Direction.DOWN)


def test_body_is_points_head_first():
    snake = make_snake()
    assert snake.head == Point(2, 3)
    assert snake.tail == Point(2, 1)
    assert len(snake) == 3


def test_empty_body_is_rejected():
    with pytest.raises(ValueError):
        Snake([], Direction.DOWN)


def test_next_direction_keeps_momentum():
    snake = make_snake()
    assert snake.next_direction() is Direction.DOWN
    assert snake.next_direction() is Direction.DOWN


def test_queued_turns_are_applied_in_order():
    snake = make_snake()
    snake.enqueue_direction(Direction.RIGHT)
    snake.enqueue_direction(Direction.UP)

    assert snake.next_direction() is Direction.RIGHT
    assert snake.next_direction() is Direction.UP
    # queue drained: keep going up
    assert snake.next_direction() is Direction.UP


def test_enqueue_accepts_keys_and_strings():
    snake = make_snake()
    snake.enqueue_direction(Key.LEFT)
    snake.enqueue_direction('right')
    assert list(snake.pending) == [Direction.LEFT, Direction.RIGHT]
    assert all(type(d) is Direction for d in snake.pending)


def test_enqueue_ignores_non_directions():
    snake = make_snake()
    for key in (Key.PAUSE, Key.RESTART, Key.QUIT, 'space', (1, 0)):
        snake.enqueue_direction(key)
    assert not snake.pending
    assert snake.next_direction() is Direction.DOWN


def test_queue_is_bounded():
    snake = make_snake()
    for _ in range(INPUT_QUEUE_LIMIT + 3):
        snake.enqueue_direction(Direction.LEFT)
    assert len(snake.pending) == INPUT_QUEUE_LIMIT


def test_occupies():
    snake = make_snake()
    assert snake.occupies(Point(2, 2))
    assert not snake.occupies(Point(3, 2))
