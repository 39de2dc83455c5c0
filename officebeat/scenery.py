"""Static scenery: the floor, the teleport pad and the tree."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, Sequence

import pygame

from .element import EleType, Element
from .settings import HEIGHT, WIDTH, GameError
from .shapes import Rectangle

if TYPE_CHECKING:
    from .scene import Scene

MAP_SIZE = 6
KEY_TELEPORT = "w"


def _load_image(image: Any, path: str | PathLike[str]) -> Any:
    return image if image is not None else pygame.image.load(str(path))


def load_map(path: str | PathLike[str]) -> list[list[int]]:
    """Read a 6 by 6 grid of integers from a whitespace-separated text file."""
    try:
        words = Path(path).read_text().split()
    except OSError as exc:
        raise GameError(f"cannot read map file {path}") from exc
    needed = MAP_SIZE * MAP_SIZE
    if len(words) < needed:
        raise GameError(f"map file {path} holds fewer than {needed} numbers")
    try:
        numbers = [int(word) for word in words[:needed]]
    except ValueError as exc:
        raise GameError(f"map file {path} holds a value that is not a number") from exc
    return [numbers[row * MAP_SIZE : (row + 1) * MAP_SIZE] for row in range(MAP_SIZE)]


class Floor(Element):
    """Tiles drawn from a map, and the walls that keep the character on screen."""

    def __init__(
        self,
        label: int = EleType.FLOOR,
        image: Any = None,
        image_path: str | PathLike[str] = Path("assets/image/floor.png"),
        map_data: Sequence[Sequence[int]] | None = None,
        map_path: str | PathLike[str] = Path("assets/map/gamescene_map.txt"),
    ) -> None:
        super().__init__(label, interacts=[EleType.CHARACTER])
        self.img = _load_image(image, image_path)
        self.width, self.height = self.img.get_size()
        self.map_data = (
            [list(row) for row in map_data] if map_data is not None else load_map(map_path)
        )
        self.x = 0
        self.y = 0

    def interact(self, target: Element, scene: Scene) -> None:
        """Push the character back inside the screen edges."""
        if target.label != EleType.CHARACTER:
            return
        half = target.width // 2
        right_limit = WIDTH - half
        left_limit = -half
        if target.x < left_limit:
            target.shift(left_limit - target.x, 0)
        elif target.x > right_limit:
            target.shift(right_limit - target.x, 0)

    def draw(self, surface: Any) -> None:
        """Draw a tile for every non-zero map cell."""
        for i, row in enumerate(self.map_data):
            for j, cell in enumerate(row):
                if cell:
                    surface.blit(
                        self.img, (self.x + j * self.width, self.y + i * self.height)
                    )


class Teleport(Element):
    """A pad in the bottom-right corner that sends the character to the left edge."""

    def __init__(
        self,
        label: int = EleType.TELEPORT,
        image: Any = None,
        image_path: str | PathLike[str] = Path("assets/image/teleport.png"),
    ) -> None:
        super().__init__(label, interacts=[EleType.CHARACTER])
        self.img = _load_image(image, image_path)
        self.width, self.height = self.img.get_size()
        self.x = WIDTH - self.width
        self.y = HEIGHT - self.height
        self.activate = False

    def update(self, scene: Scene) -> None:
        """The pad is active while the teleport key is held."""
        self.activate = scene.input.is_pressed(KEY_TELEPORT)

    def interact(self, target: Element, scene: Scene) -> None:
        """Move a character standing on the active pad to x = 0."""
        if target.label != EleType.CHARACTER:
            return
        if self.activate and self.x <= target.x <= self.x + self.width:
            target.shift(-target.x, 0)

    def draw(self, surface: Any) -> None:
        """Draw the pad."""
        surface.blit(self.img, (self.x, self.y))


class Tree(Element):
    """A tree whose middle third blocks projectiles."""

    def __init__(
        self,
        label: int = EleType.TREE,
        image: Any = None,
        image_path: str | PathLike[str] = Path("assets/image/tree.png"),
    ) -> None:
        super().__init__(label)
        self.img = _load_image(image, image_path)
        self.width, self.height = self.img.get_size()
        self.x = 85
        self.y = HEIGHT - self.height
        self.hitbox = Rectangle(
            self.x + self.width // 3,
            self.y + self.height // 3,
            self.x + 2 * self.width // 3,
            self.y + 2 * self.height // 3,
        )

    def draw(self, surface: Any) -> None:
        """Draw the tree."""
        surface.blit(self.img, (self.x, self.y))