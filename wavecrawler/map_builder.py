"""Random room-and-corridor dungeon generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

from .geometry import Point
from .map import SCREEN_HEIGHT, SCREEN_WIDTH, Map, TileType, map_idx

NUM_ROOMS = 20


@dataclass(frozen=True)
class Rect:
    """A rectangle spanning ``x1..x2`` by ``y1..y2`` (upper bounds exclusive)."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def with_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        return cls(x, y, x + width, y + height)

    def center(self) -> Point:
        return Point((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect) -> bool:
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def points(self) -> Iterator[Point]:
        for y in range(self.y1, self.y2):
            for x in range(self.x1, self.x2):
                yield Point(x, y)


class MapBuilder:
    """Carves non-overlapping rooms joined by L-shaped corridors."""

    def __init__(self, rng: random.Random) -> None:
        self.map = Map()
        self.rooms: list[Rect] = []
        self.map.tiles = [TileType.WALL] * len(self.map.tiles)
        self._build_random_rooms(rng)
        self._build_corridors(rng)
        self.player_start = self.rooms[0].center()

    def _build_random_rooms(self, rng: random.Random) -> None:
        while len(self.rooms) < NUM_ROOMS:
            room = Rect.with_size(
                rng.randrange(1, SCREEN_WIDTH - 10),
                rng.randrange(1, SCREEN_HEIGHT - 10),
                rng.randrange(2, 10),
                rng.randrange(2, 10),
            )
            if any(existing.intersects(room) for existing in self.rooms):
                continue
            for p in room.points():
                if 0 < p.x < SCREEN_WIDTH and 0 < p.y < SCREEN_HEIGHT:
                    self.map.tiles[map_idx(p.x, p.y)] = TileType.FLOOR
            self.rooms.append(room)

    def _carve(self, point: Point) -> None:
        idx = self.map.try_idx(point)
        if idx is not None:
            self.map.tiles[idx] = TileType.FLOOR

    def _horizontal_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._carve(Point(x, y))

    def _vertical_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._carve(Point(x, y))

    def _build_corridors(self, rng: random.Random) -> None:
        rooms = sorted(self.rooms, key=lambda r: r.center().x)
        for previous, room in zip(rooms, rooms[1:]):
            prev, new = previous.center(), room.center()
            if rng.randrange(0, 2) == 1:
                self._horizontal_tunnel(prev.x, new.x, prev.y)
                self._vertical_tunnel(prev.y, new.y, new.x)
            else:
                self._vertical_tunnel(prev.y, new.y, prev.x)
                self._horizontal_tunnel(prev.x, new.x, new.y)