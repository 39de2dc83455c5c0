"""The game window, its main loop and the scene switching."""

from __future__ import annotations

import argparse
import os
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

import pygame

from .gamescene import GameScene
from .menu import Menu
from .scene import Scene
from .settings import FPS, GAME_TERMINATE, HEIGHT, WIDTH, GameError, InputState

TITLE = "Final Project 10xxxxxxx"
CLEAR_COLOR = (100, 100, 100)
ICON_PATH = Path("assets/image/icon.jpg")

_KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_w: "w",
}


class SceneType(IntEnum):
    MENU = 0
    GAME_SCENE = 1


def create_scene(scene_type: int, input_state: InputState) -> Scene:
    """Build the scene of the given type sharing the given input state."""
    try:
        kind = SceneType(scene_type)
    except ValueError as exc:
        raise GameError(f"unknown scene type {scene_type}") from exc
    if kind is SceneType.MENU:
        return Menu(SceneType.MENU, input_state)
    return GameScene(SceneType.GAME_SCENE, input_state)


def _key_name(key: int) -> Any:
    return _KEY_NAMES.get(key, key)


class Game:
    """Owns the window and the current scene and runs the frame loop."""

    def __init__(
        self,
        screen: Any = None,
        input_state: InputState | None = None,
        scene_factory: Callable[[int, InputState], Scene] = create_scene,
        title: str = TITLE,
        event_source: Callable[[], Iterable[Any]] | None = None,
        tick: Callable[[], Any] | None = None,
    ) -> None:
        print("Game Initializing...")
        self.title = title
        self.input = input_state if input_state is not None else InputState()
        self._owns_display = screen is None
        self.screen = screen if screen is not None else self._open_display()
        self._scene_factory = scene_factory
        self._event_source = event_source
        self._tick = tick
        self.scene: Scene | None = scene_factory(SceneType.MENU, self.input)

    def _open_display(self) -> Any:
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "0,0")
        pygame.init()
        if not pygame.display.get_init():
            raise GameError("failed to initialize the display.")
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error as exc:
            raise GameError("failed to create display.") from exc
        pygame.display.set_caption(self.title)
        if ICON_PATH.exists():
            pygame.display.set_icon(pygame.image.load(str(ICON_PATH)))
        return screen

    def execute(self) -> None:
        """Run frames until the window closes or a scene ends the game."""
        events = self._event_source or pygame.event.get
        tick = self._tick
        if tick is None:
            clock = pygame.time.Clock()

            def tick() -> Any:
                return clock.tick(FPS)

        run = True
        while run:
            for event in events():
                run = self.handle_event(event) and run
            if not run:
                break
            run = self.update()
            self.draw()
            tick()

    def handle_event(self, event: Any) -> bool:
        """Record input from one event; False when the window is closed."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            self.input.press(_key_name(event.key))
        elif event.type == pygame.KEYUP:
            self.input.release(_key_name(event.key))
        elif event.type == pygame.MOUSEMOTION:
            self.input.move_mouse(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.input.press_button(event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.input.release_button(event.button)
        return True

    def update(self) -> bool:
        """Update the scene and switch scenes; False when the game should end."""
        if self.scene is None:
            return False
        self.scene.update()
        if not self.scene.scene_end:
            return True
        window = self.scene.next_window
        self.scene.destroy()
        self.scene = None
        if window == GAME_TERMINATE:
            return False
        try:
            kind = SceneType(window)
        except ValueError as exc:
            raise GameError(f"unknown scene type {window}") from exc
        self.scene = self._scene_factory(kind, self.input)
        return True

    def draw(self) -> None:
        """Clear the screen, draw the scene and show the frame."""
        self.screen.fill(CLEAR_COLOR)
        if self.scene is not None:
            self.scene.draw(self.screen)
        if self._owns_display:
            pygame.display.flip()

    def destroy(self) -> None:
        """Destroy the scene and close the window if this game opened it."""
        if self.scene is not None:
            self.scene.destroy()
            self.scene = None
        if self._owns_display:
            pygame.quit()
            self._owns_display = False


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="officebeat", description="Play the game.")
    parser.parse_args(argv)
    game = Game()
    try:
        game.execute()
    finally:
        game.destroy()
    return 0