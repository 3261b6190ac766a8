"""Global resources shared by systems through the world."""

import numpy as np
import pygame

from config import *

ARROW_KEYS = (pygame.K_LEFT, pygame.K_DOWN, pygame.K_UP, pygame.K_RIGHT)


class Time:
    """Frame timing: seconds since the previous frame and since startup."""

    def __init__(self):
        self.delta = 0.0
        self.elapsed = 0.0

    def advance(self, delta):
        self.delta = float(delta)
        self.elapsed += self.delta


class Window:
    def __init__(self, width=RES_WIDTH, height=RES_HEIGHT, title=WINDOW_TITLE):
        self.width = float(width)
        self.height = float(height)
        self.title = title

    def resize(self, width, height):
        self.width = float(width)
        self.height = float(height)


class KeyboardInput:
    """Snapshot of which keys are held down this frame."""

    def __init__(self, pressed=()):
        self._pressed = set(pressed)

    def pressed(self, key):
        return key in self._pressed

    def set_pressed(self, pressed):
        self._pressed = set(pressed)

    @classmethod
    def from_pygame(cls, state, keys=ARROW_KEYS):
        """Build from ``pygame.key.get_pressed()``, keeping only ``keys``."""
        return cls(key for key in keys if state[key])


class ClearColor:
    def __init__(self, color=CLEAR_COLOR):
        self.color = tuple(int(c) for c in color[:3])


class Rng:
    """Seedable random source backed by numpy's Generator."""

    def __init__(self, seed=None):
        self.generator = np.random.default_rng(seed)

    def random(self):
        """Uniform float in [0, 1)."""
        return float(self.generator.random())
