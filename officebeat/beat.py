"""Beats that scroll towards the judgement ring."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from .element import EleType, Element
from .judge import Judge
from .shapes import Circle

if TYPE_CHECKING:
    from .scene import Scene

KEY_SPACE = "space"


class Beat(Element):
    """A moving note; hit it with the space key while it crosses the judge.

    ``rating`` records the judgement given to the beat, if any.
    """

    def __init__(
        self,
        x: int,
        y: int,
        v: int,
        color: tuple[int, int, int],
        label: int = EleType.BEAT,
    ) -> None:
        super().__init__(label, interacts=[EleType.JUDGE])
        self.x = x
        self.y = y
        self.r = 40
        self.v = v
        self.color = color
        self.hitbox = Circle(x, y, 5)
        self.ev = False
        self.rating: str | None = None

    def _rate(self, rating: str) -> None:
        self.rating = rating
        print(rating)

    def update(self, scene: Scene) -> None:
        """Move the beat; it is judged bad past the ring and dropped off screen."""
        self.shift(self.v, 0)
        if self.x <= 5 and not self.ev:
            self._rate("Bad")
            self.ev = True
        if self.x < -100:
            self.expired = True

    def shift(self, dx: int, dy: int) -> None:
        """Move the beat and its hitbox."""
        self.x += dx
        self.y += dy
        self.hitbox.shift(dx, dy)

    def interact(self, target: Element, scene: Scene) -> None:
        """Judge the beat against the ring while the hit key is held."""
        if not isinstance(target, Judge):
            return
        if not scene.input.is_pressed(KEY_SPACE) or self.ev:
            return
        zones = (
            (target.hitbox_pf, "Perfect"),
            (target.hitbox_gd, "Good"),
            (target.hitbox_ok, "Ok"),
        )
        for zone, rating in zones:
            if zone.overlap(self.hitbox):
                self._rate(rating)
                self.expired = True
                return

    def draw(self, surface: Any) -> None:
        """Draw the beat as a ring."""
        pygame.draw.circle(surface, self.color, (self.x, self.y), self.r, 10)