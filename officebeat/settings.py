"""Game-wide settings, the shared input state and the fatal game error."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

FPS = 60.0
WIDTH = 900
HEIGHT = 672
MAX_ELEMENT = 100
GAME_TERMINATE = -1
DEBUG_MODE = True


class GameError(RuntimeError):
    """Raised when the game reaches a state it cannot continue from."""


@dataclass
class InputState:
    """Keyboard keys and mouse buttons held down, and the mouse position."""

    keys: set[Hashable] = field(default_factory=set)
    buttons: set[Hashable] = field(default_factory=set)
    mouse: tuple[float, float] = (0.0, 0.0)

    def press(self, key: Hashable) -> None:
        """Mark a key as held down."""
        self.keys.add(key)

    def release(self, key: Hashable) -> None:
        """Mark a key as released."""
        self.keys.discard(key)

    def is_pressed(self, key: Hashable) -> bool:
        """Whether the key is currently held down."""
        return key in self.keys

    def move_mouse(self, x: float, y: float) -> None:
        """Record the new mouse position."""
        self.mouse = (x, y)

    def press_button(self, button: Hashable) -> None:
        """Mark a mouse button as held down."""
        self.buttons.add(button)

    def release_button(self, button: Hashable) -> None:
        """Mark a mouse button as released."""
        self.buttons.discard(button)

    def is_button_pressed(self, button: Hashable) -> bool:
        """Whether the mouse button is currently held down."""
        return button in self.buttons