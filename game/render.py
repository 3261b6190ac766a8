"""Grid-to-window mapping and sprite drawing.

``size_scaling`` and ``position_translation`` run after the game-state
systems every frame and only write ``Transform``; ``draw_sprites`` then
blits whatever the transforms say.
"""

import pygame

from config import *
from game.components import Position, Size, Sprite, Transform
from game.resources import ClearColor, Window


def setup_camera(world):
    """Prepare the 2D view. pygame draws in window space, so only the clear colour is needed."""
    if ClearColor not in world.resources:
        world.insert_resource(ClearColor())


def convert(pos, bound_window, bound_game):
    """Map a grid coordinate to its tile centre, in pixels from the window centre."""
    tile_size = bound_window / bound_game
    return pos / bound_game * bound_window + tile_size / 2


def to_screen(position, window):
    """Pixel centre of ``position`` in window space (origin top-left, y down)."""
    x = window.width / 2 + convert(position.x, window.width, ARENA_WIDTH)
    y = window.height / 2 - convert(position.y, window.height, ARENA_HEIGHT)
    return (x, y)


def size_scaling(world):
    window = world.resource(Window)
    for size, transform in world.query(Size, Transform):
        transform.scale = (
            size.width / ARENA_WIDTH * window.width,
            size.height / ARENA_HEIGHT * window.height,
        )


def position_translation(world):
    window = world.resource(Window)
    for position, transform in world.query(Position, Transform):
        transform.translation = to_screen(position, window)


def draw_sprites(surface, world):
    """Clear the surface and draw every sprite as a rect centred on its translation."""
    surface.fill(world.resource(ClearColor).color)
    for sprite, transform in world.query(Sprite, Transform):
        width, height = transform.scale
        cx, cy = transform.translation
        rect = pygame.Rect(0, 0, round(width), round(height))
        rect.center = (round(cx), round(cy))
        pygame.draw.rect(surface, sprite.color, rect)
