"""Spawns beats at fixed moments of the song."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

from .beat import Beat
from .element import EleType, Element
from .settings import FPS

if TYPE_CHECKING:
    from .scene import Scene

BEAT_TICKS = frozenset({97, 159, 221, 304, 1111, 1180, 1282})
TICK_RATE = 60
SPAWN_X = 1000
SPAWN_Y = 580
SPAWN_SPEED = -4
SPAWN_COLOR = (100, 100, 100)


class BeatTimer(Element):
    """Counts ticks since creation and adds a beat on each listed tick."""

    def __init__(
        self,
        label: int = EleType.TIMER,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(label)
        self._clock = clock
        self._start = clock()
        self.count = 0
        self.last = 0

    def update(self, scene: Scene) -> None:
        """Register a new beat when the tick count reaches a spawn moment."""
        self.count = int((self._clock() - self._start) * TICK_RATE)
        if self.count in BEAT_TICKS and self.count != self.last:
            scene.register(Beat(SPAWN_X, SPAWN_Y, SPAWN_SPEED, SPAWN_COLOR))
            self.last = self.count


assert TICK_RATE == int(FPS)