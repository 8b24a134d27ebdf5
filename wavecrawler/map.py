"""The tile map and its grid dimensions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .geometry import Point, distance

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
DISPLAY_WIDTH = SCREEN_WIDTH // 2
DISPLAY_HEIGHT = SCREEN_HEIGHT // 2
NUM_TILES = SCREEN_WIDTH * SCREEN_HEIGHT

_EXITS = (
    (-1, 0, 1.0),
    (1, 0, 1.0),
    (0, -1, 1.0),
    (0, 1, 1.0),
    (-1, -1, 1.45),
    (1, -1, 1.45),
    (-1, 1, 1.45),
    (1, 1, 1.45),
)


class TileType(Enum):
    WALL = auto()
    FLOOR = auto()


def map_idx(x: int, y: int) -> int:
    """Index of the tile at ``(x, y)`` in row-major order."""
    return y * SCREEN_WIDTH + x


@dataclass
class Map:
    """A fixed-size grid of tiles, all floor to begin with."""

    tiles: list[TileType] = field(default_factory=lambda: [TileType.FLOOR] * NUM_TILES)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < SCREEN_WIDTH and 0 <= point.y < SCREEN_HEIGHT

    def try_idx(self, point: Point) -> int | None:
        if not self.in_bounds(point):
            return None
        return map_idx(point.x, point.y)

    def can_enter_tile(self, point: Point) -> bool:
        return self.in_bounds(point) and self.tiles[map_idx(point.x, point.y)] is TileType.FLOOR

    def _is_exit_valid(self, x: int, y: int) -> bool:
        if x < 1 or x > SCREEN_WIDTH - 1 or y < 1 or y > SCREEN_HEIGHT - 1:
            return False
        return self.tiles[map_idx(x, y)] is TileType.FLOOR

    def is_opaque(self, idx: int) -> bool:
        return self.tiles[idx] is TileType.WALL

    def available_exits(self, idx: int) -> list[tuple[int, float]]:
        """Neighbouring floor tiles of ``idx`` with their step costs."""
        x, y = idx % SCREEN_WIDTH, idx // SCREEN_WIDTH
        return [
            (map_idx(x + dx, y + dy), cost)
            for dx, dy, cost in _EXITS
            if self._is_exit_valid(x + dx, y + dy)
        ]

    def pathing_distance(self, idx1: int, idx2: int) -> float:
        p1 = Point(idx1 % SCREEN_WIDTH, idx1 // SCREEN_WIDTH)
        p2 = Point(idx2 % SCREEN_WIDTH, idx2 // SCREEN_WIDTH)
        return distance(p1, p2)

    def dimensions(self) -> Point:
        return Point(SCREEN_WIDTH, SCREEN_HEIGHT)