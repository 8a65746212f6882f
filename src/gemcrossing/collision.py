"""Grid collision detection and resolution between the player and the world."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging

from .collectibles import Collectible
from .player import Enemy, Player
from .utils import GridConstants
from .world import World

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Box:
    """Axis-aligned box in pixel space."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def shrink(self, margin: float) -> Box:
        """Pull every side in by ``margin`` pixels."""
        return Box(self.x + margin, self.y + margin, self.w - 2 * margin, self.h - 2 * margin)


@dataclass(slots=True)
class CollisionReport:
    """What happened during one resolution pass."""

    blocked: bool = False
    collected: list[Collectible] = field(default_factory=list)
    enemy_contact: bool = False


def boxes_overlap(a: Box, b: Box) -> bool:
    """Inclusive AABB test: boxes that share an edge overlap."""
    return a.x <= b.right and b.x <= a.right and a.y <= b.bottom and b.y <= a.bottom


def tile_box(x: float, y: float, grid: GridConstants) -> Box:
    return Box(x, y, grid.tile_width, grid.tile_height)


def tolerance_overlap(player: Player, other: Enemy | Collectible, grid: GridConstants) -> bool:
    """Overlap of two tile boxes after shrinking each by ``grid.col_space``."""
    mine = tile_box(player.x, player.y, grid).shrink(grid.col_space)
    theirs = tile_box(other.x, other.y, grid).shrink(grid.col_space)
    return boxes_overlap(mine, theirs)


def cell_match(player: Player, item: Collectible, grid: GridConstants) -> bool:
    """Exact cell equality, correcting for the player's sprite anchor."""
    return player.x == item.x and player.y - grid.y_adjust == item.y


def resolve_collisions(
    world: World,
    grid: GridConstants,
    on_score: Callable[[int], None] | None = None,
    on_enemy_contact: Callable[[], None] | None = None,
) -> CollisionReport:
    """Apply rock, pickup, and enemy outcomes for the current frame.

    Every category is checked; a rock rollback does not skip pickups or
    enemies. Enemy contact resets the player and fires ``on_enemy_contact``
    at most once per call.
    """
    report = CollisionReport()
    player = world.player

    for item in world.active_collectibles():
        if item.blocking:
            if tolerance_overlap(player, item, grid):
                player.rollback()
                report.blocked = True
        elif cell_match(player, item, grid):
            player.collect(item.points)
            item.remove()
            report.collected.append(item)
            logger.debug("Collected %s for %d points", item.kind.value, item.points)
            if on_score is not None:
                on_score(player.score)

    for enemy in list(world.enemies):
        if tolerance_overlap(player, enemy, grid):
            logger.info("Enemy contact at %s; score kept at %d", player.cell, player.score)
            player.reset()
            report.enemy_contact = True
            if on_enemy_contact is not None:
                on_enemy_contact()
            break

    return report
