import logging

from config import *
from game.components import Food, FoodSpawnTimer, Position, Size, Sprite, Transform
from game.resources import Rng, Time

logger = logging.getLogger(__name__)


def spawn_food_timer(world):
    world.spawn(FoodSpawnTimer(FOOD_SPAWN_INTERVAL, repeating=True))


def random_food_position(rng):
    """Draw a cell as a centred random offset inside the arena."""
    x = int((rng.random() - 0.5) * ARENA_WIDTH)
    y = int((rng.random() - 0.5) * ARENA_HEIGHT)
    return Position(x, y)


def food_spawner(world):
    """Spawn one food entity each time the spawn timer fires.

    The cell is not checked against the snake or other food, and food
    is never removed.
    """
    time = world.resource(Time)
    timer = world.single(FoodSpawnTimer)
    if not timer.tick(time.delta).just_finished():
        return

    position = random_food_position(world.resource(Rng))
    world.spawn(
        Sprite(FOOD_COLOR),
        Transform(),
        Food(),
        position,
        Size.square(SPRITE_SIZE),
    )
    logger.debug("Food spawned at (%d, %d)", position.x, position.y)
