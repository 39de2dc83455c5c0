"""Hitbox shapes and their overlap tests."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar

from .settings import GameError


class ShapeType(Enum):
    POINT = 0
    RECTANGLE = 1
    CIRCLE = 2


class Shape(ABC):
    """Base of all hitbox shapes."""

    shape_type: ClassVar[ShapeType]

    @abstractmethod
    def center_x(self) -> float:
        """Horizontal centre of the shape."""

    @abstractmethod
    def center_y(self) -> float:
        """Vertical centre of the shape."""

    @abstractmethod
    def shift(self, dx: float, dy: float) -> None:
        """Move the shape by the given offsets."""

    def overlap(self, other: Shape) -> bool:
        """Whether this shape overlaps another."""
        return check_overlap(self, other)


@dataclass
class Point(Shape):
    x: float
    y: float

    shape_type: ClassVar[ShapeType] = ShapeType.POINT

    def center_x(self) -> float:
        return self.x

    def center_y(self) -> float:
        return self.y

    def shift(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def dist2(self, other: Point) -> float:
        """Squared distance to another point."""
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def dist(self, other: Point) -> float:
        """Distance to another point."""
        return math.sqrt(self.dist2(other))


@dataclass
class Rectangle(Shape):
    x1: float
    y1: float
    x2: float
    y2: float

    shape_type: ClassVar[ShapeType] = ShapeType.RECTANGLE

    def center_x(self) -> float:
        return (self.x1 + self.x2) / 2

    def center_y(self) -> float:
        return (self.y1 + self.y2) / 2

    def shift(self, dx: float, dy: float) -> None:
        self.x1 += dx
        self.x2 += dx
        self.y1 += dy
        self.y2 += dy


@dataclass
class Circle(Shape):
    x: float
    y: float
    r: float

    shape_type: ClassVar[ShapeType] = ShapeType.CIRCLE

    def center_x(self) -> float:
        return self.x

    def center_y(self) -> float:
        return self.y

    def shift(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


def _overlap_pp(p1: Point, p2: Point) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def _overlap_pr(p: Point, r: Rectangle) -> bool:
    return r.x1 <= p.x <= r.x2 and r.y1 <= p.y <= r.y2


def _overlap_pc(p: Point, c: Circle) -> bool:
    # The comparison deliberately matches the game's original rule.
    return c.r * c.r <= p.dist2(Point(c.x, c.y))


def _overlap_rr(r1: Rectangle, r2: Rectangle) -> bool:
    return not (r1.x2 < r2.x1 or r2.x2 < r1.x1 or r1.y2 < r2.y1 or r2.y2 < r1.y1)


def _overlap_rc(r: Rectangle, c: Circle) -> bool:
    nearest = Point(max(r.x1, min(c.x, r.x2)), max(r.y1, min(c.y, r.y2)))
    return c.r * c.r >= Point(c.x, c.y).dist2(nearest)


def _overlap_cc(c1: Circle, c2: Circle) -> bool:
    d = c1.r + c2.r
    return d * d >= Point(c1.x, c1.y).dist2(Point(c2.x, c2.y))


_DISPATCH: dict[tuple[ShapeType, ShapeType], Callable[[Shape, Shape], bool]] = {
    (ShapeType.POINT, ShapeType.POINT): _overlap_pp,
    (ShapeType.POINT, ShapeType.RECTANGLE): _overlap_pr,
    (ShapeType.POINT, ShapeType.CIRCLE): _overlap_pc,
    (ShapeType.RECTANGLE, ShapeType.POINT): lambda r, p: _overlap_pr(p, r),
    (ShapeType.RECTANGLE, ShapeType.RECTANGLE): _overlap_rr,
    (ShapeType.RECTANGLE, ShapeType.CIRCLE): _overlap_rc,
    (ShapeType.CIRCLE, ShapeType.POINT): lambda c, p: _overlap_pc(p, c),
    (ShapeType.CIRCLE, ShapeType.RECTANGLE): lambda c, r: _overlap_rc(r, c),
    (ShapeType.CIRCLE, ShapeType.CIRCLE): _overlap_cc,
}


def check_overlap(first: Shape, second: Shape) -> bool:
    """Whether two shapes overlap; raises GameError for unknown shapes."""
    if not isinstance(first, Shape) or not isinstance(second, Shape):
        raise GameError("Unknown ShapeType.")
    handler = _DISPATCH.get((first.shape_type, second.shape_type))
    if handler is None:
        raise GameError("Unknown ShapeType.")
    return handler(first, second)