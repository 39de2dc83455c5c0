"""The title menu, left by pressing Enter."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Any

import pygame

from .scene import Scene
from .settings import HEIGHT, WIDTH, GameError, InputState

MENU_LABEL = 0
NEXT_WINDOW = 1
KEY_START = "enter"
PROMPT = "Press 'Enter' to start"
FONT_SIZE = 12
SONG_VOLUME = 0.1
WHITE = (255, 255, 255)
BOX_HALF_WIDTH = 150
BOX_HALF_HEIGHT = 30


class Menu(Scene):
    """Shows a boxed prompt and switches to the game on Enter."""

    def __init__(
        self,
        label: int = MENU_LABEL,
        input_state: InputState | None = None,
        *,
        font: Any = None,
        font_path: str | PathLike[str] = Path("assets/font/pirulen.ttf"),
        song: Any = None,
    ) -> None:
        super().__init__(label, input_state)
        if font is None:
            pygame.font.init()
            try:
                font = pygame.font.Font(str(font_path), FONT_SIZE)
            except (pygame.error, OSError) as exc:
                raise GameError(f"cannot load font {font_path}") from exc
        self.font = font
        self.song = song
        if song is not None:
            song.set_volume(SONG_VOLUME)
        self._song_started = False
        self.title_x = WIDTH // 2
        self.title_y = HEIGHT // 2

    def update(self) -> None:
        """End the menu when Enter is held."""
        if self.input.is_pressed(KEY_START):
            self.scene_end = True
            self.next_window = NEXT_WINDOW

    def draw(self, surface: Any) -> None:
        """Draw the prompt and its box; loop the menu song if there is one."""
        text = self.font.render(PROMPT, True, WHITE)
        surface.blit(text, text.get_rect(midtop=(self.title_x, self.title_y)))
        box = pygame.Rect(
            self.title_x - BOX_HALF_WIDTH,
            self.title_y - BOX_HALF_HEIGHT,
            2 * BOX_HALF_WIDTH,
            2 * BOX_HALF_HEIGHT,
        )
        pygame.draw.rect(surface, WHITE, box, 1)
        if self.song is not None and not self._song_started:
            self.song.play(loops=-1)
            self._song_started = True

    def destroy(self) -> None:
        """Stop the song."""
        if self.song is not None:
            self.song.stop()
        self._song_started = False
        super().destroy()