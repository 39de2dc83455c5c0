"""A star that flashes at a spot chosen by the arrow key held."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pygame

from .element import EleType, Element
from .settings import FPS

if TYPE_CHECKING:
    from .scene import Scene

SWITCH_TIME = 2.0
HIDDEN_START = (-400, -400)
HIDDEN_AFTER = (-500, -500)

_KEY_SPOTS = (
    ("up", (240, 190)),
    ("down", (350, 290)),
    ("left", (270, 230)),
    ("right", (430, 190)),
)


class Star(Element):
    """Moves on screen while an arrow key is held and hides again after a while."""

    def __init__(
        self,
        label: int = EleType.STAR,
        image: Any = None,
        image_path: str | PathLike[str] = Path("assets/image/star.png"),
    ) -> None:
        super().__init__(label)
        self.img = image if image is not None else pygame.image.load(str(image_path))
        self.width, self.height = self.img.get_size()
        self.x, self.y = HIDDEN_START
        self.image_switched = False
        self.switch_timer = 0.0

    def update(self, scene: Scene) -> None:
        """Jump to the spot of the held arrow key and count down to hiding."""
        for key, spot in _KEY_SPOTS:
            if scene.input.is_pressed(key):
                self.x, self.y = spot
                self.image_switched = True
                self.switch_timer = SWITCH_TIME
                break
        if self.image_switched:
            self.switch_timer -= 1.0 / FPS
            if self.switch_timer <= 0:
                self.x, self.y = HIDDEN_AFTER
                self.image_switched = False

    def draw(self, surface: Any) -> None:
        """Draw the star image."""
        surface.blit(self.img, (self.x, self.y))