"""Image loading and caching."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
import logging

import pygame

logger = logging.getLogger(__name__)

GAME_IMAGES: tuple[str, ...] = (
    "images/stone-block.png",
    "images/water-block.png",
    "images/grass-block.png",
    "images/enemy-bug.png",
    "images/char-boy.png",
    "images/char-cat-girl.png",
    "images/char-horn-girl.png",
    "images/char-pink-girl.png",
    "images/char-princess-girl.png",
    "images/Gem Blue.png",
    "images/Gem Green.png",
    "images/Gem Orange.png",
    "images/Heart.png",
    "images/Star.png",
    "images/Key.png",
    "images/Rock.png",
)

PLACEHOLDER_SIZE = (101, 83)
PLACEHOLDER_COLORS = {
    "images/water-block.png": (64, 128, 224),
    "images/stone-block.png": (150, 150, 150),
    "images/grass-block.png": (90, 190, 90),
    "images/enemy-bug.png": (200, 40, 40),
    "images/Rock.png": (90, 80, 70),
}
DEFAULT_PLACEHOLDER_COLOR = (240, 200, 60)


class ImageCache:
    """Caches surfaces by name with a coloured stand-in when a file is absent."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.images: dict[str, pygame.Surface] = {}
        self._requested: set[str] = set()
        self._ready_callbacks: list[Callable[[], None]] = []

    def load(self, names: Iterable[str]) -> None:
        """Preload images, then notify ``on_ready`` listeners."""
        for name in names:
            self._requested.add(name)
            if name not in self.images:
                self.images[name] = self._load_one(name)
        if self.is_ready():
            callbacks, self._ready_callbacks = self._ready_callbacks, []
            for callback in callbacks:
                callback()

    def get(self, name: str) -> pygame.Surface:
        """Return the cached image, loading it on first use."""
        image = self.images.get(name)
        if image is None:
            image = self.images[name] = self._load_one(name)
        return image

    def is_ready(self, names: Iterable[str] | None = None) -> bool:
        wanted = self._requested if names is None else set(names)
        return bool(wanted) and all(name in self.images for name in wanted)

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once a requested batch has finished loading."""
        if self.is_ready():
            callback()
            return
        self._ready_callbacks.append(callback)

    def _load_one(self, name: str) -> pygame.Surface:
        path = self.root / name
        if path.exists():
            try:
                image = pygame.image.load(str(path))
                if pygame.display.get_surface() is not None:
                    image = image.convert_alpha()
                return image
            except pygame.error:
                logger.warning("Could not decode image %s", path)
        else:
            logger.warning("Image %s not found, using placeholder", path)
        return self._placeholder(name)

    @staticmethod
    def _placeholder(name: str) -> pygame.Surface:
        surface = pygame.Surface(PLACEHOLDER_SIZE, pygame.SRCALPHA)
        color = PLACEHOLDER_COLORS.get(name, DEFAULT_PLACEHOLDER_COLOR)
        if name in PLACEHOLDER_COLORS:
            surface.fill(color)
        else:
            pygame.draw.ellipse(surface, color, surface.get_rect().inflate(-30, -20))
        return surface
