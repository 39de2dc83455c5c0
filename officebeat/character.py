"""The player character, driven by a small state machine."""

from __future__ import annotations

import time
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Mapping

import pygame

from .element import EleType, Element
from .gif import new_gif
from .projectile import Projectile
from .settings import HEIGHT, GameError
from .shapes import Rectangle

if TYPE_CHECKING:
    from .scene import Scene

KEY_ATTACK = "space"
KEY_LEFT = "a"
KEY_RIGHT = "d"
MOVE_STEP = 5
PROJECTILE_SPEED = 5
SPAWN_FRAME = 2


class CharacterState(IntEnum):
    STOP = 0
    MOVE = 1
    ATK = 2


GIF_FILES = {
    CharacterState.STOP: "chara_stop.gif",
    CharacterState.MOVE: "chara_move.gif",
    CharacterState.ATK: "chara_attack.gif",
}


class Character(Element):
    """Walks left and right and fires a projectile when attacking.

    ``direction`` is True when facing right. ``gifs`` maps each state to an
    animation with ``width``, ``height``, ``done``, ``display_index`` and
    ``frame_at(seconds)``.
    """

    def __init__(
        self,
        label: int = EleType.CHARACTER,
        gifs: Mapping[CharacterState, Any] | None = None,
        image_dir: str | PathLike[str] = "assets/image",
        sound: Any = None,
        sound_path: str | PathLike[str] = Path("assets/sound/atk_sound.wav"),
        projectile_image: Any = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(label)
        if gifs is None:
            gifs = {
                state: new_gif(Path(image_dir) / name, -1)
                for state, name in GIF_FILES.items()
            }
        missing = set(CharacterState) - set(gifs)
        if missing:
            raise GameError(
                f"missing character animations: {sorted(s.name for s in missing)}"
            )
        self.gifs = dict(gifs)
        if sound is None and pygame.mixer.get_init():
            sound = pygame.mixer.Sound(str(sound_path))
        self.atk_sound = sound
        self.projectile_image = projectile_image
        self._clock = clock
        self.width = self.gifs[CharacterState.STOP].width
        self.height = self.gifs[CharacterState.STOP].height
        self.x = 300
        self.y = HEIGHT - self.height - 60
        self.hitbox = Rectangle(
            self.x, self.y, self.x + self.width, self.y + self.height
        )
        self.direction = False
        self.state = CharacterState.STOP
        self.new_proj = False

    def update(self, scene: Scene) -> None:
        """Advance the state machine from the keys held."""
        pressed = scene.input.is_pressed
        if self.state == CharacterState.STOP:
            if pressed(KEY_ATTACK):
                self.state = CharacterState.ATK
            elif pressed(KEY_LEFT):
                self.direction = False
                self.state = CharacterState.MOVE
            elif pressed(KEY_RIGHT):
                self.direction = True
                self.state = CharacterState.MOVE
        elif self.state == CharacterState.MOVE:
            if pressed(KEY_ATTACK):
                self.state = CharacterState.ATK
            elif pressed(KEY_LEFT):
                self.direction = False
                self.shift(-MOVE_STEP, 0)
            elif pressed(KEY_RIGHT):
                self.direction = True
                self.shift(MOVE_STEP, 0)
            if self.gifs[self.state].done:
                self.state = CharacterState.STOP
        elif self.state == CharacterState.ATK:
            attack = self.gifs[CharacterState.ATK]
            if attack.done:
                self.state = CharacterState.STOP
                self.new_proj = False
            if attack.display_index == SPAWN_FRAME and not self.new_proj:
                scene.register(self._spawn_projectile())
                self.new_proj = True

    def _spawn_projectile(self) -> Projectile:
        if self.direction:
            x, v = self.x + self.width - 100, PROJECTILE_SPEED
        else:
            x, v = self.x - 50, -PROJECTILE_SPEED
        return Projectile(x, self.y + 10, v, image=self.projectile_image)

    def shift(self, dx: int, dy: int) -> None:
        """Move the character and its hitbox."""
        self.x += dx
        self.y += dy
        self.hitbox.shift(dx, dy)

    def draw(self, surface: Any) -> None:
        """Draw the current animation frame and play the attack sound."""
        gif = self.gifs[self.state]
        frame = gif.frame_at(self._clock())
        if frame:
            image = pygame.image.frombuffer(frame, (gif.width, gif.height), "RGBA")
            if self.direction:
                image = pygame.transform.flip(image, True, False)
            surface.blit(image, (self.x, self.y))
        if (
            self.state == CharacterState.ATK
            and gif.display_index == SPAWN_FRAME
            and self.atk_sound is not None
        ):
            self.atk_sound.play()

    def destroy(self) -> None:
        """Stop the attack sound."""
        if self.atk_sound is not None:
            self.atk_sound.stop()