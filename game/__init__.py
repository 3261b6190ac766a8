"""Package initializer for the game package.

Provides a lazy convenience export so external code can do::

	from game import SnakeGame

without pulling in pygame and every system module at package import time.
"""

__version__ = "0.1"

__all__ = ["SnakeGame"]

def __getattr__(name: str):
	if name == "SnakeGame":
		from .utils import SnakeGame

		return SnakeGame
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
