"""Integer grid points, distances and straight lines across the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol


@dataclass(frozen=True)
class Point:
    """A position on the tile grid."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        if not isinstance(factor, int):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)


class _Walkable(Protocol):
    def can_enter_tile(self, point: Point) -> bool: ...


def distance(a: Point, b: Point) -> float:
    """Straight-line (Pythagorean) distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def bresenham_line(start: Point, end: Point) -> Iterator[Point]:
    """Yield the grid points from ``start`` to ``end`` inclusive."""
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = 1 if start.x < end.x else -1
    sy = 1 if start.y < end.y else -1
    err = dx - dy
    x, y = start.x, start.y
    while True:
        yield Point(x, y)
        if x == end.x and y == end.y:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def has_clear_path(map: _Walkable, start: Point, end: Point) -> bool:
    """True when every tile strictly between ``start`` and ``end`` can be entered."""
    return all(
        map.can_enter_tile(point)
        for point in bresenham_line(start, end)
        if point != start and point != end
    )