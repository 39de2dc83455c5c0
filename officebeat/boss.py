"""The boss, who strikes a pose for each arrow key."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import pygame

from .element import EleType, Element
from .settings import FPS, HEIGHT, WIDTH, GameError

if TYPE_CHECKING:
    from .scene import Scene

SCALE = 0.25
SWITCH_TIME = 2.0


class BossPose(Enum):
    NORMAL = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


IMAGE_FILES = {
    BossPose.NORMAL: "boss_normal.png",
    BossPose.UP: "boss_top.png",
    BossPose.DOWN: "boss_buttom.png",
    BossPose.LEFT: "boss_left.png",
    BossPose.RIGHT: "boss_right.png",
}

_KEY_POSES = (
    ("up", BossPose.UP),
    ("down", BossPose.DOWN),
    ("left", BossPose.LEFT),
    ("right", BossPose.RIGHT),
)


class Boss(Element):
    """Shows a pose image while an arrow key is held, then returns to normal."""

    def __init__(
        self,
        label: int = EleType.BOSS,
        images: Mapping[BossPose, Any] | None = None,
        image_dir: str | PathLike[str] = "assets/image",
    ) -> None:
        super().__init__(label)
        if images is None:
            images = {
                pose: pygame.image.load(str(Path(image_dir) / name))
                for pose, name in IMAGE_FILES.items()
            }
        missing = set(BossPose) - set(images)
        if missing:
            raise GameError(f"missing boss images: {sorted(p.name for p in missing)}")
        self.images = dict(images)
        self.pose = BossPose.NORMAL
        self.width, self.height = self.current_image.get_size()
        self.image_switched = False
        self.switch_timer = 0.0
        self.x = (WIDTH - self.width * SCALE) / 2 - 30
        self.y = (HEIGHT - self.height * SCALE) / 2 + 10

    @property
    def current_image(self) -> Any:
        return self.images[self.pose]

    def _set_pose(self, pose: BossPose) -> None:
        self.pose = pose
        self.width, self.height = self.current_image.get_size()

    def update(self, scene: Scene) -> None:
        """Pick the pose for the held arrow key and count down back to normal."""
        for key, pose in _KEY_POSES:
            if scene.input.is_pressed(key):
                self._set_pose(pose)
                self.image_switched = True
                self.switch_timer = SWITCH_TIME
                break
        if self.image_switched:
            self.switch_timer -= 1.0 / FPS
            if self.switch_timer <= 0:
                self._set_pose(BossPose.NORMAL)
                self.image_switched = False

    def draw(self, surface: Any) -> None:
        """Draw the current pose at a quarter of its size."""
        size = (int(self.width * SCALE), int(self.height * SCALE))
        scaled = pygame.transform.scale(self.current_image, size)
        surface.blit(scaled, (self.x, self.y))