"""Frame rendering: tile background, entities, and screen overlays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol
import pygame

from .utils import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    OVERLAY_COLOR,
    SHADOW_COLOR,
    TEXT_COLOR,
    WHITE,
    YELLOW,
    GridConstants,
    row_tile,
)
from .world import World


class ImageLookup(Protocol):
    def get(self, name: str) -> pygame.Surface: ...


@dataclass(slots=True)
class RenderContext:
    """Drawing surface and image source handed to every ``render`` call."""

    surface: pygame.Surface
    images: ImageLookup
    grid: GridConstants

    def draw(self, name: str, x: float, y: float) -> None:
        self.surface.blit(self.images.get(name), (int(x), int(y)))


def render_tiles(ctx: RenderContext) -> None:
    """Redraw every cell top-to-bottom, left-to-right."""
    grid = ctx.grid
    for row in range(grid.num_rows):
        tile = row_tile(row)
        for col in range(grid.num_cols):
            x, y = grid.cell_origin(row, col)
            ctx.draw(tile, x, y)


def render_world(ctx: RenderContext, world: World) -> None:
    """Draw one frame: tiles, collectibles, enemies, then the player on top."""
    render_tiles(ctx)
    for item in world.active_collectibles():
        item.render(ctx)
    for enemy in world.enemies:
        enemy.render(ctx)
    world.player.render(ctx)


class Hud:
    """Score readout drawn over the playfield."""

    def __init__(self) -> None:
        self.score_text = "0"

    def set_score(self, score: int) -> None:
        self.score_text = str(score)

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        shadow = font.render(f"Score: {self.score_text}", True, SHADOW_COLOR)
        text = font.render(f"Score: {self.score_text}", True, TEXT_COLOR)
        surface.blit(shadow, (12, 12))
        surface.blit(text, (10, 10))


class StartScreen:
    """Start overlay with a start control and the last session's score."""

    def __init__(self, title: str = "GEM CROSSING", start_label: str = "Start new game!") -> None:
        self.title = title
        self.start_label = start_label
        self.score_info = ""
        self.opacity = 1.0
        self.button_rect = pygame.Rect(0, 0, 260, 56)
        self.button_rect.center = (CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2)

    @property
    def visible(self) -> bool:
        return self.opacity > 0

    def show(self) -> None:
        self.opacity = 1.0

    def hide(self) -> None:
        self.opacity = 0.0

    def hit(self, position: tuple[int, int]) -> bool:
        """Return whether a click lands on the start control."""
        return self.visible and self.button_rect.collidepoint(position)

    def render(self, surface: pygame.Surface, title_font: pygame.font.Font, body_font: pygame.font.Font) -> None:
        """Draw the overlay when visible."""
        if not self.visible:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((*OVERLAY_COLOR, int(200 * self.opacity)))
        surface.blit(overlay, (0, 0))

        title = title_font.render(self.title, True, YELLOW)
        surface.blit(title, (surface.get_width() // 2 - title.get_width() // 2, 120))

        pygame.draw.rect(surface, YELLOW, self.button_rect, border_radius=8)
        label = body_font.render(self.start_label, True, OVERLAY_COLOR)
        surface.blit(label, label.get_rect(center=self.button_rect.center))

        if self.score_info:
            info = body_font.render(self.score_info, True, WHITE)
            surface.blit(info, (surface.get_width() // 2 - info.get_width() // 2, self.button_rect.bottom + 40))
