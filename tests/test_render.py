import pygame
import pytest

from config import CLEAR_COLOR, FOOD_COLOR
from game.components import Position, Size, Sprite, Transform
from game.ecs import QueryError, World
from game.render import convert, draw_sprites, position_translation, size_scaling, to_screen
from game.resources import ClearColor, Window


def test_convert_is_linear():
    step = convert(1, 500, 10) - convert(0, 500, 10)
    assert step == pytest.approx(50)
    for pos in range(-5, 5):
        assert convert(pos, 500, 10) == pytest.approx(convert(0, 500, 10) + pos * step)


def test_convert_is_reproducible():
    assert convert(3, 500, 10) == convert(3, 500, 10) == pytest.approx(175)


def test_arena_corners_map_to_edge_tiles():
    window = Window(500, 500)
    assert to_screen(Position(-5, -5), window) == pytest.approx((25, 475))
    assert to_screen(Position(4, 4), window) == pytest.approx((475, 25))
    assert to_screen(Position(0, 0), window) == pytest.approx((275, 225))


def test_size_scaling_follows_window(world):
    entity = world.spawn(Size.square(0.8), Transform())
    size_scaling(world)
    assert world.get(entity, Transform).scale == pytest.approx((40, 40))

    world.resource(Window).resize(1000, 250)
    size_scaling(world)
    assert world.get(entity, Transform).scale == pytest.approx((80, 20))


def test_position_translation_writes_transform(world):
    entity = world.spawn(Position(3, 3), Transform())
    position_translation(world)
    assert world.get(entity, Transform).translation == pytest.approx((425, 75))


def test_render_systems_require_window():
    world = World()
    world.spawn(Position(0, 0), Size.square(1), Transform())
    with pytest.raises(QueryError):
        position_translation(world)
    with pytest.raises(QueryError):
        size_scaling(world)


def test_draw_sprites_fills_and_draws(world):
    world.spawn(Sprite(FOOD_COLOR), Transform(translation=(100, 100), scale=(40, 40)))
    surface = pygame.Surface((500, 500))
    draw_sprites(surface, world)

    assert tuple(surface.get_at((100, 100)))[:3] == FOOD_COLOR
    assert tuple(surface.get_at((85, 85)))[:3] == FOOD_COLOR
    assert tuple(surface.get_at((130, 100)))[:3] == CLEAR_COLOR
    assert world.resource(ClearColor).color == CLEAR_COLOR
