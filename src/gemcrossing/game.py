"""Application shell: window, asset preload, and session wiring."""

from __future__ import annotations

from pathlib import Path
import logging

import pygame

from .assets import GAME_IMAGES, ImageCache
from .loop import PygameScheduler
from .render import RenderContext, render_tiles
from .session import GameSession, SessionState
from .settings import GameSettings, SettingsManager
from .utils import CANVAS_HEIGHT, CANVAS_WIDTH, BG_COLOR

logger = logging.getLogger(__name__)


class GemCrossingGame:
    """Creates the 505x606 canvas and hands control to the pygame scheduler."""

    def __init__(self, root: Path, settings: GameSettings | None = None) -> None:
        pygame.init()
        pygame.font.init()

        self.root = root
        manager = SettingsManager()
        if settings is not None:
            manager.settings = settings
        self.settings = manager.settings

        flags = pygame.FULLSCREEN if self.settings.fullscreen else 0
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT), flags)
        pygame.display.set_caption("Gem Crossing")

        self.title_font = pygame.font.SysFont("arial", 40, bold=True)
        self.body_font = pygame.font.SysFont("arial", 24, bold=True)

        self.images = ImageCache(root)
        self.scheduler = PygameScheduler(fps=self.settings.fps, present=self._present)
        self.session = GameSession(
            scheduler=self.scheduler,
            ctx=RenderContext(surface=self.screen, images=self.images, grid=manager.grid()),
            settings=self.settings,
        )
        self.scheduler.event_handler = self._handle_event
        self.images.load(GAME_IMAGES)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            if self.session.state == SessionState.RUNNING:
                self.session.stop()
            else:
                self.scheduler.quit()
            return
        self.session.handle_event(event)

    def _present(self) -> None:
        if self.session.state != SessionState.RUNNING:
            self.screen.fill(BG_COLOR)
            render_tiles(self.session.ctx)
        self.session.hud.render(self.screen, self.body_font)
        self.session.start_screen.render(self.screen, self.title_font, self.body_font)
        pygame.display.flip()

    def run(self) -> None:
        """Main event/render/update loop."""
        logger.info("Engine started")
        self.images.on_ready(self.scheduler.run)
        self.session.stop()
        pygame.quit()
