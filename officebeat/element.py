"""Base class of everything that lives in a scene."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .settings import MAX_ELEMENT, GameError

if TYPE_CHECKING:
    from .scene import Scene


class EleType(IntEnum):
    """Labels of the kinds of element in the game scene."""

    FLOOR = 0
    TELEPORT = 1
    TREE = 2
    CHARACTER = 3
    PROJECTILE = 4
    JUDGE = 5
    BEAT = 6
    TIMER = 7
    BOSS = 8
    STAR = 9


class Element:
    """An object in a scene, updated, interacted with and drawn each frame.

    ``interacts`` lists the labels of elements this one interacts with;
    ``expired`` marks it for removal at the end of the frame.
    """

    def __init__(self, label: int, interacts: Iterable[int] = ()) -> None:
        self.label = label
        self.id: int | None = None
        self.interacts: list[int] = list(interacts)
        if len(self.interacts) > MAX_ELEMENT:
            raise GameError("too many interaction labels for one element")
        self.expired = False

    def update(self, scene: Scene) -> None:
        """Advance the element by one frame."""

    def interact(self, target: Element, scene: Scene) -> None:
        """React to an element carrying one of the labels in ``interacts``."""

    def draw(self, surface: Any) -> None:
        """Draw the element onto the surface."""

    def destroy(self) -> None:
        """Release anything the element holds."""