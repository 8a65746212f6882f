"""Shared constants, grid model, and utility helpers for Gem Crossing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Tuple
import json

CANVAS_WIDTH = 505
CANVAS_HEIGHT = 606
FPS = 60

BG_COLOR = (255, 255, 255)
TEXT_COLOR = (30, 30, 30)
SHADOW_COLOR = (200, 200, 200)
OVERLAY_COLOR = (20, 24, 40)
YELLOW = (255, 221, 68)
WHITE = (255, 255, 255)

Cell = Tuple[int, int]
Direction = Tuple[int, int]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)

WATER_TILE = "images/water-block.png"
STONE_TILE = "images/stone-block.png"
GRASS_TILE = "images/grass-block.png"

# Top row is water, three rows of stone, two rows of grass.
ROW_TILES: tuple[str, ...] = (
    WATER_TILE,
    STONE_TILE,
    STONE_TILE,
    STONE_TILE,
    GRASS_TILE,
    GRASS_TILE,
)

DATA_DIR = Path(".gemcrossing")
SETTINGS_FILE = DATA_DIR / "settings.json"


@dataclass(frozen=True, slots=True)
class GridConstants:
    """Immutable tile grid configuration."""

    tile_width: int = 101
    tile_height: int = 83
    num_rows: int = 6
    num_cols: int = 5
    y_adjust: int = -20
    duration_ms: int = 30_000
    col_space: int = 25

    def __post_init__(self) -> None:
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise ValueError("tile dimensions must be positive")
        if self.num_rows <= 0 or self.num_cols <= 0:
            raise ValueError("row and column counts must be positive")

    @property
    def width(self) -> int:
        return self.tile_width * self.num_cols

    def cell_origin(self, row: int, col: int) -> tuple[int, int]:
        """Return the pixel origin used to draw a grid cell."""
        return (col * self.tile_width, row * self.tile_height)

    def pixel_to_cell(self, x: float, y: float) -> Cell:
        """Return the (row, col) containing a pixel position."""
        return (int(y // self.tile_height), int(x // self.tile_width))

    def entity_y(self, row: int) -> int:
        """Pixel y of an entity standing on ``row``."""
        return row * self.tile_height + self.y_adjust

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols


def row_tile(row: int) -> str:
    """Return the background tile drawn for a grid row."""
    return ROW_TILES[min(max(row, 0), len(ROW_TILES) - 1)]


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning default when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        return default
