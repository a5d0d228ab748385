"""
Main game engine for Bug Crossing.

This module provides the pygame host: window, frame clock, sprite loading,
event dispatch and the game loop around a GameLoopController.
"""

import random
from pathlib import Path
from typing import Optional, Union

import pygame

from crossing.logging import get_logger
from crossing.resources import SpriteResources
from games.BugCrossing import config
from games.BugCrossing.game.controller import GameLoopController
from games.BugCrossing.game.render import PygameCanvas, render_background
from games.BugCrossing.input import map_key
from models import LevelConfig

log = get_logger('engine')


class GameEngine:
    """Pygame host for one Bug Crossing board.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        resources: Sprite cache
        canvas: Canvas drawing onto the screen
        controller: The board being played

    Examples:
        >>> engine = GameEngine()
        >>> engine.run()  # doctest: +SKIP
    """

    def __init__(
        self,
        level: Optional[LevelConfig] = None,
        asset_dir: Optional[Union[str, Path]] = None,
        fps: int = config.FPS,
        rng: Optional[random.Random] = None,
    ):
        """Initialize pygame and build the board.

        Args:
            level: Level to play (defaults to the classic board)
            asset_dir: Directory holding the sprite images
            fps: Target frame rate
            rng: Random source for obstacle spawns
        """
        self.level = level or LevelConfig()
        self.fps = fps

        pygame.init()

        playfield = self.level.playfield
        self.screen = pygame.display.set_mode((playfield.width, playfield.height))
        pygame.display.set_caption(config.WINDOW_CAPTION)

        self.clock = pygame.time.Clock()
        self.running = True

        self.resources = SpriteResources(asset_dir if asset_dir is not None else config.ASSET_DIR)
        self.resources.load(config.SPRITES)
        self.canvas = PygameCanvas(self.screen, self.resources)

        self.controller = GameLoopController(self.level, rng=rng)

        log.info("Engine started on level '%s' (%dx%d @ %d fps)",
                 self.level.name, playfield.width, playfield.height, fps)

    def handle_events(self) -> None:
        """Process pending pygame events.

        QUIT and ESC stop the loop; every other key press is mapped and
        handed to the controller right away.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                self.controller.handle_input(map_key(event.key))

    def update(self, dt: float) -> None:
        """Advance the board.

        Args:
            dt: Delta time since last frame in seconds
        """
        self.controller.update(dt)

    def render(self) -> None:
        """Draw the board and flip the display."""
        render_background(self.canvas, self.level.playfield)
        self.controller.render(self.canvas)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main game loop until the window is closed.

        1. Handle events
        2. Update game state
        3. Render frame
        4. Maintain target FPS
        """
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0

            self.handle_events()
            if not self.running:
                break

            self.update(dt)
            self.render()

    def quit(self) -> None:
        """Shut down pygame."""
        log.info("Engine stopped")
        pygame.quit()
