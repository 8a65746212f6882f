"""Collectible definitions and placement logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable
import random

from .utils import Cell, GridConstants

if TYPE_CHECKING:
    from .render import RenderContext


class CollectibleKind(str, Enum):
    """Objects that can be placed on the grid."""

    ROCK = "rock"
    GEM_BLUE = "gem_blue"
    GEM_GREEN = "gem_green"
    GEM_ORANGE = "gem_orange"
    HEART = "heart"
    STAR = "star"
    KEY = "key"


COLLECTIBLE_SPRITES = {
    CollectibleKind.ROCK: "images/Rock.png",
    CollectibleKind.GEM_BLUE: "images/Gem Blue.png",
    CollectibleKind.GEM_GREEN: "images/Gem Green.png",
    CollectibleKind.GEM_ORANGE: "images/Gem Orange.png",
    CollectibleKind.HEART: "images/Heart.png",
    CollectibleKind.STAR: "images/Star.png",
    CollectibleKind.KEY: "images/Key.png",
}

COLLECTIBLE_POINTS = {
    CollectibleKind.ROCK: 0,
    CollectibleKind.GEM_BLUE: 10,
    CollectibleKind.GEM_GREEN: 20,
    CollectibleKind.GEM_ORANGE: 30,
    CollectibleKind.HEART: 50,
    CollectibleKind.STAR: 100,
    CollectibleKind.KEY: 200,
}

# Rocks and gems go on stone and grass, never in the water.
PLACEMENT_FIRST_ROW = 1


@dataclass(slots=True, eq=False)
class Collectible:
    """A placed grid object: a blocking rock or a point-valued pickup."""

    kind: CollectibleKind
    row: int
    col: int
    x: float
    y: float
    points: int = -1
    removed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.points < 0:
            self.points = COLLECTIBLE_POINTS[self.kind]

    @classmethod
    def at(cls, grid: GridConstants, kind: CollectibleKind, row: int, col: int) -> Collectible:
        x, y = grid.cell_origin(row, col)
        return cls(kind=kind, row=row, col=col, x=x, y=y)

    @property
    def blocking(self) -> bool:
        return self.kind == CollectibleKind.ROCK

    @property
    def sprite(self) -> str:
        return COLLECTIBLE_SPRITES[self.kind]

    def remove(self) -> None:
        """Take the object out of play. Removing twice does nothing."""
        self.removed = True

    def render(self, ctx: RenderContext) -> None:
        if self.removed:
            return
        ctx.draw(self.sprite, self.x, self.y)


def place_collectibles(
    grid: GridConstants,
    rng: random.Random,
    count: int,
    occupied: Iterable[Cell] = (),
) -> list[Collectible]:
    """Return a fresh random layout with at most one object per free cell."""
    blocked = set(occupied)
    free = [
        (row, col)
        for row in range(PLACEMENT_FIRST_ROW, grid.num_rows)
        for col in range(grid.num_cols)
        if (row, col) not in blocked
    ]
    cells = rng.sample(free, min(max(count, 0), len(free)))
    kinds = list(CollectibleKind)
    return [Collectible.at(grid, rng.choice(kinds), row, col) for row, col in cells]
