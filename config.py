ARENA_WIDTH = 10
ARENA_HEIGHT = 10

RES_WIDTH = 500
RES_HEIGHT = 500
WINDOW_TITLE = "Snake!"
FPS = 60

CLEAR_COLOR = (10, 10, 10)
SNAKE_HEAD_COLOR = (178, 178, 178)
FOOD_COLOR = (255, 0, 255)

SNAKE_START = (3, 3)
SNAKE_START_DIRECTION = "UP"
# Fraction of a tile covered by a sprite
SPRITE_SIZE = 0.8

# Seconds between ticks
MOVEMENT_INTERVAL = 0.15
FOOD_SPAWN_INTERVAL = 1.0

# Upper bound on a single frame's delta so a stalled window doesn't fire a burst of ticks
MAX_FRAME_DELTA = 0.25

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
