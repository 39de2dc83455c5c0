"""A scene holds its elements grouped by label and runs them each frame."""

from __future__ import annotations

from typing import Any

from .element import Element
from .settings import MAX_ELEMENT, GameError, InputState


class Scene:
    """A set of elements that are updated, interacted and drawn together.

    ``scene_end`` asks the game to leave this scene; ``next_window`` says
    which scene comes next.
    """

    def __init__(self, label: int, input_state: InputState | None = None) -> None:
        self.label = label
        self.input = input_state if input_state is not None else InputState()
        self.scene_end = False
        self.next_window = 0
        self._elements: dict[int, list[Element]] = {}

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._elements.values())

    def register(self, element: Element) -> None:
        """Add an element at the end of its label's list and give it an id."""
        if not 0 <= element.label < MAX_ELEMENT:
            raise GameError(f"element label {element.label} out of range")
        if len(self) >= MAX_ELEMENT:
            raise GameError("too many elements in scene")
        element.id = len(self)
        self._elements.setdefault(int(element.label), []).append(element)

    def remove(self, element: Element) -> None:
        """Take an element out of the scene; absent elements are ignored."""
        bucket = self._elements.get(int(element.label), [])
        for index, candidate in enumerate(bucket):
            if candidate is element:
                del bucket[index]
                return

    def all_elements(self) -> list[Element]:
        """Every element, by label and then in order of registration."""
        return [
            element
            for label in sorted(self._elements)
            for element in self._elements[label]
        ]

    def label_elements(self, label: int) -> list[Element]:
        """The elements carrying the given label, in order of registration."""
        return list(self._elements.get(int(label), []))

    def update(self) -> None:
        """Update every element, run interactions, then drop expired ones."""
        current = self.all_elements()
        for element in current:
            element.update(self)
        for element in current:
            for label in element.interacts:
                for target in self.label_elements(label):
                    element.interact(target, self)
        for element in current:
            if element.expired:
                self.remove(element)

    def draw(self, surface: Any) -> None:
        """Draw every element onto the surface."""
        for element in self.all_elements():
            element.draw(surface)

    def destroy(self) -> None:
        """Destroy every element and empty the scene."""
        for element in self.all_elements():
            element.destroy()
        self._elements.clear()