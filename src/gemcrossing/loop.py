"""Frame scheduling, the update pipeline, and the game loop driver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum, auto
from typing import Protocol
import heapq
import itertools
import logging
import time

import pygame

from .utils import FPS
from .world import World

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Host-side primitive that drives the loop one frame at a time."""

    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> None: ...

    def call_later(self, delay_ms: int, callback: FrameCallback) -> None: ...


class _TimerQueue(ABC):
    """One-shot timers ordered by due time (seconds)."""

    def __init__(self) -> None:
        self._timers: list[tuple[float, int, FrameCallback]] = []
        self._counter = itertools.count()
        self._pending: FrameCallback | None = None

    @abstractmethod
    def now(self) -> float: ...

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def call_later(self, delay_ms: int, callback: FrameCallback) -> None:
        due = self.now() + delay_ms / 1000.0
        heapq.heappush(self._timers, (due, next(self._counter), callback))

    @property
    def has_pending_frame(self) -> bool:
        return self._pending is not None

    def _fire_due_timers(self) -> None:
        now = self.now()
        while self._timers and self._timers[0][0] <= now:
            _, _, callback = heapq.heappop(self._timers)
            callback()

    def _run_pending_frame(self) -> bool:
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback()
        return True


class PygameScheduler(_TimerQueue):
    """Runs frames on the pygame clock and dispatches window events."""

    def __init__(
        self,
        fps: int = FPS,
        event_handler: Callable[[pygame.event.Event], None] | None = None,
        present: FrameCallback | None = None,
    ) -> None:
        super().__init__()
        self.fps = fps
        self.event_handler = event_handler
        self.present = present
        self.clock = pygame.time.Clock()
        self.running = False

    def now(self) -> float:
        return time.monotonic()

    def quit(self) -> None:
        self.running = False

    def run(self) -> None:
        """Pump events, timers, and the requested frame until the window closes."""
        self.running = True
        while self.running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                if self.event_handler is not None:
                    self.event_handler(event)
            if not self.running:
                break
            self._fire_due_timers()
            self._run_pending_frame()
            if self.present is not None:
                self.present()


class ManualScheduler(_TimerQueue):
    """Deterministic stepper with simulated time, for tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        super().__init__()
        self.time = start

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds
        self._fire_due_timers()

    def step(self, seconds: float = 1.0 / FPS) -> bool:
        """Advance time, fire due timers, and run the pending frame if any."""
        self.advance(seconds)
        return self._run_pending_frame()


class LoopState(Enum):
    IDLE = auto()
    RUNNING = auto()


def update_entities(world: World, dt: float) -> None:
    """Advance enemies by ``dt``, then the player (which moves on input only)."""
    for enemy in world.enemies:
        enemy.update(dt)
    world.player.update()


class GameLoop:
    """Computes frame deltas and sequences update before render."""

    def __init__(
        self,
        *,
        scheduler: FrameScheduler,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None],
    ) -> None:
        self._scheduler = scheduler
        self._update_fn = update_fn
        self._render_fn = render_fn
        self.state = LoopState.IDLE
        self.frames = 0
        self._last_t = 0.0

    @property
    def running(self) -> bool:
        return self.state == LoopState.RUNNING

    def start(self) -> None:
        if self.running:
            return
        self.state = LoopState.RUNNING
        self.frames = 0
        self._last_t = self._scheduler.now()
        self._frame()

    def stop(self) -> None:
        """Stop re-requesting frames. A frame already running completes."""
        if self.running:
            logger.debug("Loop stopped after %d frames", self.frames)
        self.state = LoopState.IDLE

    def _frame(self) -> None:
        if not self.running:
            return

        now = self._scheduler.now()
        dt = now - self._last_t

        try:
            self._update_fn(dt)
            self._render_fn()
        except Exception:
            self.stop()
            raise

        self._last_t = now
        self.frames += 1
        if self.running:
            self._scheduler.request_frame(self._frame)
