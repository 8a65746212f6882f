"""Player and enemy entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol
import random

import pygame

from .utils import DOWN, LEFT, RIGHT, UP, Cell, Direction, GridConstants

if TYPE_CHECKING:
    from .render import RenderContext

PLAYER_SPRITES: tuple[str, ...] = (
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
)
ENEMY_SPRITE = "images/enemy-bug.png"

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}

# Enemies run along the stone rows.
ENEMY_ROWS: tuple[int, ...] = (1, 2, 3)
ENEMY_MIN_SPEED = 100.0
ENEMY_MAX_SPEED = 300.0


class Entity(Protocol):
    """Anything the frame pipelines can advance and draw."""

    def update(self, dt: float) -> None: ...

    def render(self, ctx: RenderContext) -> None: ...


@dataclass(slots=True, eq=False)
class Player:
    """Grid-stepping player controlled by the keyboard."""

    grid: GridConstants
    sprite: str = PLAYER_SPRITES[0]
    start_col: int | None = None
    start_row: int | None = None

    x: float = field(default=0, init=False)
    y: float = field(default=0, init=False)
    prev_x: float = field(default=0, init=False)
    prev_y: float = field(default=0, init=False)
    score: int = field(default=0, init=False)
    pending_move: Direction | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.start_col is None:
            self.start_col = self.grid.num_cols // 2
        if self.start_row is None:
            self.start_row = self.grid.num_rows - 1
        self.reset()

    @property
    def cell(self) -> Cell:
        """Grid (row, col) the player currently stands on."""
        row = round((self.y - self.grid.y_adjust) / self.grid.tile_height)
        col = round(self.x / self.grid.tile_width)
        return (row, col)

    @property
    def start_cell(self) -> Cell:
        return (self.start_row, self.start_col)

    def reset(self) -> None:
        """Return to the start cell. Score is kept."""
        self.x = self.start_col * self.grid.tile_width
        self.y = self.grid.entity_y(self.start_row)
        self.prev_x, self.prev_y = self.x, self.y
        self.pending_move = None

    def queue_move(self, direction: Direction) -> None:
        """Queue one grid step for the next update."""
        self.pending_move = direction

    def handle_key(self, key: int) -> None:
        if key in KEY_DIRECTIONS:
            self.queue_move(KEY_DIRECTIONS[key])

    def update(self, dt: float = 0.0) -> None:
        """Snapshot the position, then apply the queued step.

        Movement is discrete, so ``dt`` is ignored.
        """
        self.prev_x, self.prev_y = self.x, self.y
        if self.pending_move is None:
            return
        dx, dy = self.pending_move
        self.pending_move = None
        row, col = self.cell
        row, col = row + dy, col + dx
        if not self.grid.in_bounds(row, col):
            return
        self.x = col * self.grid.tile_width
        self.y = self.grid.entity_y(row)

    def rollback(self) -> None:
        """Undo this frame's movement."""
        self.x, self.y = self.prev_x, self.prev_y

    def collect(self, points: int) -> None:
        self.score += points

    def render(self, ctx: RenderContext) -> None:
        ctx.draw(self.sprite, self.x, self.y)


@dataclass(slots=True, eq=False)
class Enemy:
    """Bug crawling left to right along one row."""

    grid: GridConstants
    row: int
    speed: float
    x: float = 0.0
    sprite: str = ENEMY_SPRITE
    y: float = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.y = self.grid.entity_y(self.row)

    def update(self, dt: float) -> None:
        """Advance by ``speed * dt`` and wrap at either edge of the canvas."""
        self.x += self.speed * dt
        if self.x > self.grid.width:
            self.x = -self.grid.tile_width
        elif self.x < -self.grid.tile_width:
            self.x = self.grid.width

    def render(self, ctx: RenderContext) -> None:
        ctx.draw(self.sprite, self.x, self.y)


def spawn_enemies(grid: GridConstants, rng: random.Random, count: int) -> list[Enemy]:
    """Create ``count`` enemies spread across the stone rows."""
    rows = [row for row in ENEMY_ROWS if row < grid.num_rows] or [0]
    enemies: list[Enemy] = []
    for idx in range(count):
        enemies.append(
            Enemy(
                grid=grid,
                row=rows[idx % len(rows)],
                speed=rng.uniform(ENEMY_MIN_SPEED, ENEMY_MAX_SPEED),
                x=float(rng.randrange(-grid.tile_width, grid.width)),
            )
        )
    return enemies
