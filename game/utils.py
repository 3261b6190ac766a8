import logging

import pygame

from config import *
from game.ecs import QueryError, Schedule, World
from game.food import food_spawner, spawn_food_timer
from game.render import draw_sprites, position_translation, setup_camera, size_scaling
from game.resources import ClearColor, KeyboardInput, Rng, Time, Window
from game.snake import snake_movement, snake_movement_input, spawn_movement_timer, spawn_snake

logger = logging.getLogger(__name__)


def build_schedule():
    """Register the game's systems in frame order."""
    schedule = Schedule()
    schedule.add_startup_system(setup_camera)
    schedule.add_startup_system(spawn_snake)
    schedule.add_startup_system(spawn_food_timer)
    schedule.add_startup_system(spawn_movement_timer)

    schedule.add_system(snake_movement)
    schedule.add_system(food_spawner)
    schedule.add_system(snake_movement_input, before=snake_movement)

    # Render mapping sees the state left by this frame's updates
    schedule.add_post_update_system(position_translation)
    schedule.add_post_update_system(size_scaling)
    return schedule


def build_world(seed=None):
    """World with every resource the systems expect."""
    world = World()
    world.insert_resource(Time())
    world.insert_resource(Window(RES_WIDTH, RES_HEIGHT, WINDOW_TITLE))
    world.insert_resource(KeyboardInput())
    world.insert_resource(ClearColor(CLEAR_COLOR))
    world.insert_resource(Rng(seed))
    return world


class SnakeGame:
    """Main game controller: owns the window, the world and the frame loop."""

    def __init__(self, seed=None, headless=False):
        self.headless = headless
        self.world = build_world(seed)
        self.schedule = build_schedule()
        self.screen = None
        self.clock = None
        self.running = False

        try:
            if not headless:
                pygame.init()
                window = self.world.resource(Window)
                self.screen = pygame.display.set_mode(
                    (int(window.width), int(window.height)), pygame.RESIZABLE
                )
                pygame.display.set_caption(window.title)
                self.clock = pygame.time.Clock()

            self.schedule.startup(self.world)
        except Exception:
            logger.exception("Startup failed")
            if not headless:
                pygame.quit()
            raise
        logger.info("Startup complete (%d entities)", len(self.world.entities))

    def step(self, delta, pressed=None):
        """Advance one frame by ``delta`` seconds.

        ``pressed`` replaces the held keys for this frame; when omitted the
        current ``KeyboardInput`` snapshot is used as is.
        """
        if pressed is not None:
            self.world.resource(KeyboardInput).set_pressed(pressed)
        self.world.resource(Time).advance(min(delta, MAX_FRAME_DELTA))
        self.schedule.run(self.world)

    def handle_events(self):
        """Process window events; return False once the window is closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.VIDEORESIZE:
                self.world.resource(Window).resize(event.w, event.h)
                logger.info("Window resized to %dx%d", event.w, event.h)
        return True

    def draw(self):
        draw_sprites(self.screen, self.world)
        pygame.display.flip()

    def run(self):
        """Main game loop."""
        if self.headless:
            raise RuntimeError("run() needs a display; use step() when headless")

        self.running = True
        try:
            while self.running:
                self.running = self.handle_events()
                if not self.running:
                    break
                self.world.insert_resource(KeyboardInput.from_pygame(pygame.key.get_pressed()))
                delta = self.clock.tick(FPS) / 1000.0
                self.step(delta)
                self.draw()
        except QueryError:
            logger.exception("Missing singleton, stopping")
            raise
        finally:
            self.cleanup()

    def cleanup(self):
        """Clean up resources."""
        self.running = False
        if not self.headless:
            pygame.quit()
        logger.info("Game closed")
