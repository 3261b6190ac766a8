import logging

import pygame

from config import *
from game.components import (
    Direction,
    MovementTimer,
    Position,
    Size,
    SnakeHead,
    Sprite,
    Transform,
)
from game.resources import KeyboardInput, Time

logger = logging.getLogger(__name__)

# Checked in this order; the first held key wins
KEY_DIRECTIONS = (
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_UP, Direction.UP),
    (pygame.K_RIGHT, Direction.RIGHT),
)

STEPS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


def spawn_snake(world):
    """Spawn the single snake head."""
    x, y = SNAKE_START
    world.spawn(
        Sprite(SNAKE_HEAD_COLOR),
        Transform(),
        SnakeHead(Direction[SNAKE_START_DIRECTION]),
        Position(x, y),
        Size.square(SPRITE_SIZE),
    )
    logger.info("Snake spawned at (%d, %d) facing %s", x, y, SNAKE_START_DIRECTION)


def spawn_movement_timer(world):
    world.spawn(MovementTimer(MOVEMENT_INTERVAL, repeating=True))


def next_direction(current, desired):
    """Return ``desired`` unless it would reverse the snake onto itself."""
    if desired == current.opposite():
        return current
    return desired


def wrap(value, size):
    """Wrap a coordinate into the centred arena range.

    For an even size of 10 that is -5..4, so stepping off either edge
    re-enters on the opposite one.
    """
    low = -(size // 2)
    return (value - low) % size + low


def step(position, direction):
    """Move ``position`` one cell in ``direction`` in place."""
    dx, dy = STEPS[direction]
    position.x = wrap(position.x + dx, ARENA_WIDTH)
    position.y = wrap(position.y + dy, ARENA_HEIGHT)
    return position


def snake_movement_input(world):
    """Steer the head from the arrow keys held this frame."""
    heads = list(world.query(SnakeHead))
    if not heads:
        return
    (head,) = heads[0]
    keyboard = world.resource(KeyboardInput)

    desired = head.direction
    for key, direction in KEY_DIRECTIONS:
        if keyboard.pressed(key):
            desired = direction
            break
    head.direction = next_direction(head.direction, desired)


def snake_movement(world):
    """Advance the head one cell each time the movement timer fires."""
    time = world.resource(Time)
    timer = world.single(MovementTimer)
    if not timer.tick(time.delta).just_finished():
        return

    heads = list(world.query(Position, SnakeHead))
    if not heads:
        return
    position, head = heads[0]
    step(position, head.direction)
    logger.debug("Head moved %s to (%d, %d)", head.direction.value, position.x, position.y)
