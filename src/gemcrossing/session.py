"""Timed play session: world setup, frame pipeline wiring, and start/stop."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto
import logging
import random

import pygame

from .collectibles import place_collectibles
from .collision import CollisionReport, resolve_collisions
from .loop import FrameScheduler, GameLoop, update_entities
from .player import Player, spawn_enemies
from .render import Hud, RenderContext, StartScreen, render_world
from .settings import GameSettings
from .utils import GridConstants
from .world import World

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = auto()
    RUNNING = auto()


class GameSession:
    """Owns the world for one play-through and drives it through the loop."""

    def __init__(
        self,
        *,
        scheduler: FrameScheduler,
        ctx: RenderContext,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.scheduler = scheduler
        self.ctx = ctx
        # Settings own the session length and overlap tolerance.
        self.grid: GridConstants = replace(
            ctx.grid, duration_ms=self.settings.duration_ms, col_space=self.settings.col_space
        )
        ctx.grid = self.grid
        self.rng = rng or random.Random(self.settings.seed)

        self.hud = Hud()
        self.start_screen = StartScreen()
        self.world = World(player=self._new_player())
        self.loop = GameLoop(scheduler=scheduler, update_fn=self.update, render_fn=self.render)
        self.state = SessionState.IDLE
        self.last_report = CollisionReport()
        self.world_resets = 0
        self._session_id = 0

    def _new_player(self) -> Player:
        return Player(grid=self.grid, sprite=self.settings.player_sprite)

    def start(self) -> None:
        """Begin a new timed session."""
        if self.state == SessionState.RUNNING:
            return
        self._session_id += 1
        self.start_screen.hide()
        player = self._new_player()
        self.world = World(
            player=player,
            enemies=spawn_enemies(self.grid, self.rng, self.settings.enemy_count),
        )
        self.hud.set_score(player.score)
        self.world_resets = 0
        self.reset_world()
        self.state = SessionState.RUNNING
        logger.info("Session %d started (%d ms)", self._session_id, self.grid.duration_ms)

        session_id = self._session_id
        self.scheduler.call_later(self.grid.duration_ms, lambda: self._on_timeout(session_id))
        self.loop.start()

    def _on_timeout(self, session_id: int) -> None:
        # A timer left over from an earlier session must not end this one.
        if session_id == self._session_id:
            self.stop()

    def stop(self) -> int:
        """Freeze the loop, publish the final score, and show the start screen."""
        score = self.world.player.score
        if self.state != SessionState.RUNNING:
            return score
        self.loop.stop()
        self.state = SessionState.IDLE
        self.hud.set_score(score)
        self.start_screen.score_info = f"Your Score: {score}"
        self.start_screen.show()
        logger.info("Session %d stopped with score %d", self._session_id, score)
        return score

    def reset_world(self) -> None:
        """Discard the current layout and place a fresh one."""
        self.world.collectibles = place_collectibles(
            self.grid,
            self.rng,
            self.settings.collectible_count,
            occupied=[self.world.player.start_cell],
        )
        self.world_resets += 1
        logger.debug("Placed %d collectibles", len(self.world.collectibles))

    def update(self, dt: float) -> None:
        """Advance entities, then resolve collisions against the new positions."""
        update_entities(self.world, dt)
        self.last_report = resolve_collisions(
            self.world,
            self.grid,
            on_score=self.hud.set_score,
            on_enemy_contact=self.reset_world,
        )

    def render(self) -> None:
        render_world(self.ctx, self.world)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route start-screen and movement input."""
        if event.type == pygame.KEYDOWN:
            if self.start_screen.visible:
                if event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    self.start()
            elif self.state == SessionState.RUNNING:
                self.world.player.handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and self.start_screen.hit(event.pos):
            self.start()
