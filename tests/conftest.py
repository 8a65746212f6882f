"""Pytest configuration for headless pygame tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingSurface:
    """Stands in for a pygame surface and remembers what was blitted."""

    def __init__(self) -> None:
        self.blits: list[tuple[object, tuple[int, int]]] = []

    def blit(self, image: object, position: tuple[int, int]) -> None:
        self.blits.append((image, position))

    @property
    def drawn(self) -> list[object]:
        return [image for image, _ in self.blits]


class NameImages:
    """Image lookup that hands back the requested name."""

    def get(self, name: str) -> str:
        return name


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def images() -> NameImages:
    return NameImages()
