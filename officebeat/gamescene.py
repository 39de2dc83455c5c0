"""The rhythm stage: the judge ring, scrolling beats, the boss and the song."""

from __future__ import annotations

import time
from os import PathLike
from pathlib import Path
from typing import Any, Callable, Mapping

import pygame

from .beat import Beat
from .beat_timer import BeatTimer
from .boss import Boss, BossPose
from .judge import Judge
from .scene import Scene
from .settings import GameError, InputState
from .star import Star

GAME_SCENE_LABEL = 1
SONG_VOLUME = 0.4
CLEAR_COLOR = (0, 0, 0)
BEAT_STARTS = (505, 890, 1111)
BEAT_Y = 580
BEAT_SPEED = -4
BEAT_COLOR = (100, 100, 100)


class GameScene(Scene):
    """The playing field; the song restarts whenever it has finished."""

    def __init__(
        self,
        label: int = GAME_SCENE_LABEL,
        input_state: InputState | None = None,
        *,
        background: Any = None,
        song: Any = None,
        boss_images: Mapping[BossPose, Any] | None = None,
        star_image: Any = None,
        asset_dir: str | PathLike[str] = "assets",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(label, input_state)
        assets = Path(asset_dir)
        if background is None:
            path = assets / "image" / "office.jpg"
            try:
                background = pygame.image.load(str(path))
            except (pygame.error, OSError) as exc:
                raise GameError(f"cannot load background {path}") from exc
        self.background = background
        if song is None and pygame.mixer.get_init():
            song = pygame.mixer.Sound(str(assets / "sound" / "bokuwa.mp3"))
            song.set_volume(SONG_VOLUME)
        self.song = song
        self._channel: Any = None

        self.register(Judge())
        for x in BEAT_STARTS:
            self.register(Beat(x, BEAT_Y, BEAT_SPEED, BEAT_COLOR))
        self.register(BeatTimer(clock=clock))
        self.register(Boss(images=boss_images, image_dir=assets / "image"))
        self.register(Star(image=star_image, image_path=assets / "image" / "star.png"))

    def update(self) -> None:
        """Update, interact and prune the elements."""
        super().update()

    def _play_song(self) -> None:
        if self.song is None:
            return
        if self._channel is None or not self._channel.get_busy():
            self._channel = self.song.play()

    def draw(self, surface: Any) -> None:
        """Draw the background and the elements, keeping the song playing."""
        surface.fill(CLEAR_COLOR)
        surface.blit(self.background, (0, 0))
        super().draw(surface)
        self._play_song()

    def destroy(self) -> None:
        """Stop the song and destroy every element."""
        if self.song is not None:
            self.song.stop()
        self._channel = None
        super().destroy()