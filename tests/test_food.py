import pytest

from config import ARENA_HEIGHT, ARENA_WIDTH
from game.components import Food, Position, Size
from game.ecs import QueryError
from game.food import food_spawner, random_food_position
from game.resources import Rng, Time


def test_food_positions_within_centred_bounds(seeded_rng):
    xs, ys = set(), set()
    for _ in range(10000):
        position = random_food_position(seeded_rng)
        assert -(ARENA_WIDTH // 2) <= position.x < ARENA_WIDTH // 2
        assert -(ARENA_HEIGHT // 2) <= position.y < ARENA_HEIGHT // 2
        xs.add(position.x)
        ys.add(position.y)
    # Truncation towards zero makes 0 twice as likely, but every inner cell shows up
    assert set(range(-4, 5)) <= xs
    assert set(range(-4, 5)) <= ys


def test_food_positions_reproducible_with_seed():
    a, b = Rng(7), Rng(7)
    first = [random_food_position(a) for _ in range(20)]
    second = [random_food_position(b) for _ in range(20)]
    assert first == second


def test_spawner_fires_once_per_second(started_world):
    time = started_world.resource(Time)

    time.advance(0.5)
    food_spawner(started_world)
    assert started_world.count(Food) == 0

    time.advance(0.5)
    food_spawner(started_world)
    assert started_world.count(Food) == 1

    for _ in range(2):
        time.advance(0.5)
        food_spawner(started_world)
    assert started_world.count(Food) == 2


def test_spawned_food_has_position_and_size(started_world):
    started_world.resource(Time).advance(1.0)
    food_spawner(started_world)
    position, size, _ = started_world.single(Position, Size, Food)
    assert size.width == size.height == pytest.approx(0.8)
    assert -5 <= position.x <= 4


def test_food_is_never_removed(started_world):
    time = started_world.resource(Time)
    for _ in range(5):
        time.advance(1.0)
        food_spawner(started_world)
    assert started_world.count(Food) == 5


def test_spawner_without_timer_raises(world):
    with pytest.raises(QueryError, match="FoodSpawnTimer"):
        food_spawner(world)
