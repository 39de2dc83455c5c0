"""The judgement ring that beats are hit against."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from .element import EleType, Element
from .shapes import Circle

if TYPE_CHECKING:
    from .scene import Scene

KEY_SPACE = "space"
IDLE_COLOR = (153, 204, 51)
PRESSED_COLOR = (0, 0, 0)


class Judge(Element):
    """A fixed ring with three hit zones: perfect, good and ok."""

    def __init__(self, label: int = EleType.JUDGE) -> None:
        super().__init__(label, interacts=[EleType.BEAT])
        self.x = 85
        self.y = 580
        self.r = 40
        self.color = IDLE_COLOR
        self.hitbox_pf = Circle(self.x, self.y, 5)
        self.hitbox_gd = Circle(self.x, self.y, 30)
        self.hitbox_ok = Circle(self.x, self.y, 50)

    def update(self, scene: Scene) -> None:
        """Darken the ring while the hit key is held."""
        self.color = PRESSED_COLOR if scene.input.is_pressed(KEY_SPACE) else IDLE_COLOR

    def draw(self, surface: Any) -> None:
        """Draw the ring outline."""
        pygame.draw.circle(surface, self.color, (self.x, self.y), self.r, 10)