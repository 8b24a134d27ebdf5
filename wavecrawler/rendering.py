"""Systems that draw the map, entities, fireball blasts and tooltips."""

from __future__ import annotations

from .components import BLACK, RED, WHITE, YELLOW, ColorPair, FireballEffect, Health, Name, Render
from .draw import DrawBatch
from .geometry import Point, distance
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH, TileType, map_idx
from .world import CommandBuffer, Resources, World

MAP_LAYER = 0
ENTITY_LAYER = 1
TEXT_LAYER = 2

TOOLTIP_SCALE = 4

_TILE_GLYPHS = {TileType.FLOOR: ".", TileType.WALL: "#"}


def _camera_offset(res: Resources) -> Point:
    return Point(res.camera.left_x, res.camera.top_y)


def map_render(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Draw the tiles that fall inside the camera's view."""
    batch = DrawBatch(MAP_LAYER)
    camera = res.camera
    offset = _camera_offset(res)
    color = ColorPair(WHITE, BLACK)
    for y in range(camera.top_y, camera.bottom_y + 1):
        for x in range(camera.left_x, camera.right_x):
            point = Point(x, y)
            if res.map.in_bounds(point):
                glyph = _TILE_GLYPHS[res.map.tiles[map_idx(x, y)]]
                batch.set(point - offset, color, glyph)
    batch.submit(res.canvas, 0)


def entity_render(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Draw every positioned entity that has a glyph."""
    batch = DrawBatch(ENTITY_LAYER)
    offset = _camera_offset(res)
    for _, pos, render in world.query(Point, Render):
        batch.set(pos - offset, render.color, render.glyph)
    batch.submit(res.canvas, 5000)


def fireball_effects(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Draw each fireball blast once, then remove it."""
    offset = _camera_offset(res)
    color = ColorPair(YELLOW, RED)
    for entity, effect in list(world.query(FireballEffect)):
        batch = DrawBatch(ENTITY_LAYER)
        center, radius = effect.center, effect.radius
        for y in range(center.y - radius, center.y + radius + 1):
            for x in range(center.x - radius, center.x + radius + 1):
                point = Point(x, y)
                if distance(center, point) <= radius:
                    screen = point - offset
                    if 0 <= screen.x < DISPLAY_WIDTH and 0 <= screen.y < DISPLAY_HEIGHT:
                        batch.set(screen, color, "*")
        batch.submit(res.canvas, 6000)
        commands.remove(entity)


def tooltips(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Name the entities under the mouse cursor, with their health if they have any."""
    batch = DrawBatch(TEXT_LAYER)
    map_pos = res.mouse_pos + _camera_offset(res)
    for entity, pos, name in world.query(Point, Name):
        if pos != map_pos:
            continue
        screen = res.mouse_pos * TOOLTIP_SCALE
        if world.has(entity, Health):
            display = f"{name.value} : {world.get(entity, Health).current} hp"
        else:
            display = name.value
        batch.print(screen, display)
    batch.submit(res.canvas, 10100)