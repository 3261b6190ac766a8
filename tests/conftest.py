"""Pytest configuration and fixtures for snake tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    from game.resources import Rng

    return Rng(42)


@pytest.fixture
def world():
    """A world with all resources inserted but no startup systems run."""
    from game.utils import build_world

    return build_world(seed=42)


@pytest.fixture
def started_world(world):
    """A world after the startup systems have spawned the snake and timers."""
    from game.utils import build_schedule

    build_schedule().startup(world)
    return world


@pytest.fixture
def game():
    """Headless game with a deterministic seed."""
    from game.utils import SnakeGame

    return SnakeGame(seed=42, headless=True)


@pytest.fixture
def windowed_game():
    """Game with a window on the SDL dummy driver; pygame is shut down afterwards."""
    import pygame

    from game.utils import SnakeGame

    game = SnakeGame(seed=42)
    yield game
    if pygame.get_init():
        game.cleanup()
