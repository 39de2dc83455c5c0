"""Projectiles fired by the character."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pygame

from .element import EleType, Element
from .settings import WIDTH
from .shapes import Circle

if TYPE_CHECKING:
    from .scene import Scene


class Projectile(Element):
    """Flies horizontally at speed ``v`` until it leaves the floor or hits a tree."""

    def __init__(
        self,
        x: int,
        y: int,
        v: int,
        label: int = EleType.PROJECTILE,
        image: Any = None,
        image_path: str | PathLike[str] = Path("assets/image/projectile.png"),
    ) -> None:
        super().__init__(label, interacts=[EleType.TREE, EleType.FLOOR])
        self.img = image if image is not None else pygame.image.load(str(image_path))
        self.width, self.height = self.img.get_size()
        self.x = x
        self.y = y
        self.v = v
        self.hitbox = Circle(
            self.x + self.width // 2,
            self.y + self.height // 2,
            min(self.width, self.height) // 2,
        )

    def update(self, scene: Scene) -> None:
        """Move by the projectile's speed."""
        self.shift(self.v, 0)

    def shift(self, dx: int, dy: int) -> None:
        """Move the projectile and its hitbox."""
        self.x += dx
        self.y += dy
        self.hitbox.shift(dx, dy)

    def interact(self, target: Element, scene: Scene) -> None:
        """Expire off screen or on hitting a tree."""
        if target.label == EleType.FLOOR:
            if self.x < -self.width or self.x > WIDTH + self.width:
                self.expired = True
        elif target.label == EleType.TREE:
            if target.hitbox.overlap(self.hitbox):
                self.expired = True

    def draw(self, surface: Any) -> None:
        """Draw the projectile, mirrored when flying right."""
        image = pygame.transform.flip(self.img, True, False) if self.v > 0 else self.img
        surface.blit(image, (self.x, self.y))