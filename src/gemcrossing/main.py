"""Executable entrypoint for Gem Crossing."""

from __future__ import annotations

from pathlib import Path

from .game import GemCrossingGame
from .log import setup_logging


def main() -> None:
    """Launch the game."""
    setup_logging()
    root = Path(__file__).resolve().parents[2]
    GemCrossingGame(root=root).run()


if __name__ == "__main__":
    main()
