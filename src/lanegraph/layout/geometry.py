"""Integer geometry primitives shared by the stacker, router and renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """A 2-D integer point."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def y_diff(self, other: Point) -> int:
        """Signed vertical distance from ``other`` to this point."""
        return self.y - other.y

    def svg_path_point(self) -> str:
        return f"{self.x} {self.y}"


@dataclass(frozen=True)
class Rect:
    """A placed node rectangle."""

    height: int
    width: int
    top_left: Point

    @property
    def x(self) -> int:
        return self.top_left.x

    @property
    def y(self) -> int:
        return self.top_left.y

    @property
    def bottom(self) -> int:
        return self.top_left.y + self.height

    @property
    def right(self) -> int:
        return self.top_left.x + self.width

    @property
    def left_middle(self) -> Point:
        return self.top_left + Point(0, self.height // 2)

    @property
    def right_middle(self) -> Point:
        return self.top_left + Point(self.width, self.height // 2)
