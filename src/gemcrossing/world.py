"""Per-session entity collections."""

from __future__ import annotations

from dataclasses import dataclass, field

from .collectibles import Collectible
from .player import Enemy, Player


@dataclass(slots=True)
class World:
    """Everything the frame pipelines read and mutate during a session."""

    player: Player
    enemies: list[Enemy] = field(default_factory=list)
    collectibles: list[Collectible] = field(default_factory=list)

    def active_collectibles(self) -> list[Collectible]:
        """Collectibles still in play."""
        return [item for item in self.collectibles if not item.removed]
