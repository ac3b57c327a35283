import numpy as np

from conftest import StubRng
from game.board import OCC_SNAKE, Point, occupancy, to_flat
from game.config import BOARD_HEIGHT, BOARD_WIDTH
from game.food import Food, FoodManager, FoodType


def test_apple_always_spawns_candy_rarely():
    manager = FoodManager(StubRng(roll=0.5))
    manager.update(occupancy())
    assert [f.kind for f in manager] == [FoodType.APPLE]

    apple = manager.items[0]
    assert (apple.score, apple.life_time, apple.lived_time) == (10, 45, 1)


def test_candy_spawns_on_a_lucky_roll():
    manager = FoodManager(StubRng(roll=0.0099))
    manager.update(occupancy())
    assert sorted(f.kind for f in manager) == [FoodType.APPLE, FoodType.CANDY]

    candy = next(f for f in manager if f.kind is FoodType.CANDY)
    assert (candy.score, candy.life_time) == (50, 15)


def test_candy_roll_boundary():
    """The roll must be strictly below one percent."""
    manager = FoodManager(StubRng(roll=0.01))
    manager.update(occupancy())
    assert not manager.has(FoodType.CANDY)


def test_spawned_food_avoids_occupied_cells():
    walls = [Point(x, 0) for x in range(BOARD_WIDTH)]
    hidden = [Point(0, y) for y in range(1, BOARD_HEIGHT)]
    body = [Point(1, 1), Point(1, 2)]
    manager = FoodManager(StubRng(roll=0.0, index=0))
    manager.update(occupancy(walls=walls, invisible_walls=hidden, bodies=[body]))

    positions = [f.position for f in manager]
    # index 0 picks the first free cell, the next kind takes the one after it
    assert positions == [Point(2, 1), Point(3, 1)]


def test_spawn_positions_never_collide(seeded_rng):
    body = [Point(x, 7) for x in range(BOARD_WIDTH)]
    occ = occupancy(bodies=[body])
    for _ in range(50):
        manager = FoodManager(seeded_rng)
        apple = manager.spawn(FoodType.APPLE, occ, 10, 45, 100.0)
        assert apple is manager.items[0]
        assert apple.position not in body
        assert occ[to_flat(apple.position)] == 0


def test_full_board_spawns_nothing():
    occ = np.full(BOARD_WIDTH * BOARD_HEIGHT, OCC_SNAKE, dtype=np.uint8)
    manager = FoodManager(StubRng(roll=0.0))
    manager.update(occ)
    assert len(manager) == 0


def test_at_most_one_of_each_kind(seeded_rng):
    manager = FoodManager(seeded_rng)
    for _ in range(1000):
        manager.update(occupancy(food=(f.position for f in manager)))
        kinds = [f.kind for f in manager]
        assert kinds.count(FoodType.APPLE) <= 1
        assert kinds.count(FoodType.CANDY) <= 1


def test_apple_expires_after_its_life_time():
    manager = FoodManager(StubRng(roll=0.5))
    manager.update(occupancy())
    first = manager.items[0]
    for _ in range(first.life_time - 1):
        manager.age()
    assert manager.items == [first]
    assert not first.expired

    manager.age()
    assert manager.items == []


def test_all_expired_items_go_in_the_same_tick():
    manager = FoodManager(StubRng())
    manager.items = [
        Food(FoodType.APPLE, Point(1, 1), 10, 45, lived_time=45),
        Food(FoodType.CANDY, Point(2, 2), 50, 15, lived_time=15),
    ]
    manager.age()
    assert manager.items == []


def test_eat_removes_and_returns_item():
    manager = FoodManager(StubRng())
    apple = Food(FoodType.APPLE, Point(2, 3), 10, 45)
    manager.items = [apple]
    assert manager.eat(Point(4, 4)) is None
    assert manager.eat(Point(2, 3)) is apple
    assert not manager.has(FoodType.APPLE)


def test_blinking_near_expiry():
    food = Food(FoodType.APPLE, Point(0, 0), 10, 45)
    food.lived_time = 38  # 7 ticks left
    assert food.visible
    food.lived_time = 40  # 5 ticks left, even tick
    assert not food.visible
    food.lived_time = 41
    assert food.visible
