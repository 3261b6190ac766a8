from dataclasses import dataclass
from enum import Enum


@dataclass
class Position:
    """Integer grid coordinates of an entity."""
    x: int
    y: int


@dataclass
class Size:
    """Sprite size in tiles, used for render scaling."""
    width: float
    height: float

    @classmethod
    def square(cls, x):
        return cls(x, x)


class Direction(Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    def opposite(self):
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass
class SnakeHead:
    direction: Direction


class Food:
    """Marker for food entities."""

    def __repr__(self):
        return "Food()"


@dataclass
class Sprite:
    color: tuple


@dataclass
class Transform:
    """Window-space render state: centre pixel and size in pixels."""
    translation: tuple = (0.0, 0.0)
    scale: tuple = (1.0, 1.0)


class Timer:
    """Countdown that reports when its duration elapses.

    Repeating timers wrap around and keep any overshoot, so a long frame
    can fire them more than once (see ``times_finished_this_tick``).
    """

    def __init__(self, duration, repeating=True):
        if duration <= 0:
            raise ValueError(f"timer duration must be positive, got {duration!r}")
        self.duration = float(duration)
        self.repeating = repeating
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def tick(self, delta):
        """Advance by ``delta`` seconds and return self."""
        if self.finished and not self.repeating:
            self.times_finished_this_tick = 0
            return self

        self.elapsed += delta
        if self.elapsed >= self.duration:
            if self.repeating:
                self.times_finished_this_tick = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self.times_finished_this_tick = 1
                self.elapsed = self.duration
            self.finished = True
        else:
            self.times_finished_this_tick = 0
            if self.repeating:
                self.finished = False
        return self

    def just_finished(self):
        return self.times_finished_this_tick > 0

    def reset(self):
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0

    def __repr__(self):
        return (f"{type(self).__name__}(duration={self.duration}, "
                f"elapsed={self.elapsed:.3f}, repeating={self.repeating})")


class FoodSpawnTimer(Timer):
    """Cadence for food spawning."""


class MovementTimer(Timer):
    """Cadence for snake head movement."""
