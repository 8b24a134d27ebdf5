"""Drawing the targeting cursor, valid destinations and the fireball's reach."""

from __future__ import annotations

from typing import Iterator

from .components import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    ORANGE,
    RED,
    YELLOW,
    CanCastFireball,
    CanDash,
    ColorPair,
    Mana,
    Player,
    TargetingState,
)
from .draw import DrawBatch
from .geometry import Point, bresenham_line, distance, has_clear_path
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH
from .world import CommandBuffer, Resources, World

BLAST_RADIUS = 1.5

HIGHLIGHT_LAYER = 3
CURSOR_LAYER = 4


def _on_screen(point: Point) -> bool:
    return 0 <= point.x < DISPLAY_WIDTH and 0 <= point.y < DISPLAY_HEIGHT


def _player_data(world: World):
    found = next(world.query(Player, Point, CanDash, CanCastFireball, Mana), None)
    if found is None:
        return None
    _, _, pos, dash, fireball, mana = found
    return pos, dash, fireball, mana


def _within_reach(center: Point, radius: int) -> Iterator[Point]:
    """Points at a distance in ``(0, radius]`` from ``center``, row by row."""
    for y in range(center.y - radius, center.y + radius + 1):
        for x in range(center.x - radius, center.x + radius + 1):
            point = Point(x, y)
            d = distance(center, point)
            if 0.0 < d <= radius:
                yield point


def targeting_cursor(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Mark the dash cursor as valid, invalid or unaffordable."""
    batch = DrawBatch(CURSOR_LAYER)
    mouse = res.mouse_pos
    if res.targeting_state.is_targeting() and _on_screen(mouse):
        offset = Point(res.camera.left_x, res.camera.top_y)
        world_mouse = mouse + offset
        data = _player_data(world)
        if data is not None and res.targeting_state is TargetingState.SELECTING_DASH_TARGET:
            player_pos, dash, _, mana = data
            d = distance(player_pos, world_mouse)
            in_range = 0.0 < d <= dash.range
            valid_tile = res.map.can_enter_tile(world_mouse)
            clear = valid_tile and has_clear_path(res.map, player_pos, world_mouse)
            if mana.current < dash.cost:
                glyph, color = "M", ColorPair(BLUE, BLACK)
            elif not (valid_tile and in_range and clear):
                glyph, color = "X", ColorPair(RED, BLACK)
            else:
                glyph, color = "X", ColorPair(GREEN, BLACK)
            batch.set(mouse, color, glyph)
    batch.submit(res.canvas, 25000)


def targeting_highlights(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Highlight reachable dash tiles, or fireball targets and the blast area."""
    batch = DrawBatch(HIGHLIGHT_LAYER)
    offset = Point(res.camera.left_x, res.camera.top_y)
    world_mouse = res.mouse_pos + offset
    state = res.targeting_state
    data = _player_data(world) if state.is_targeting() else None
    if data is not None:
        player_pos, dash, fireball, mana = data
        game_map = res.map
        if state is TargetingState.SELECTING_DASH_TARGET and mana.current >= dash.cost:
            for target in _within_reach(player_pos, dash.range):
                if game_map.can_enter_tile(target) and has_clear_path(game_map, player_pos, target):
                    screen = target - offset
                    if _on_screen(screen):
                        batch.set(screen, ColorPair(CYAN, BLACK), "·")
        elif state is TargetingState.SELECTING_FIREBALL_TARGET and mana.current >= fireball.cost:
            mouse_valid = game_map.can_enter_tile(world_mouse) and has_clear_path(
                game_map, player_pos, world_mouse
            )
            for target in _within_reach(player_pos, fireball.range):
                if game_map.can_enter_tile(target) and has_clear_path(game_map, player_pos, target):
                    screen = target - offset
                    if not _on_screen(screen):
                        continue
                    if distance(world_mouse, target) <= BLAST_RADIUS:
                        if mouse_valid:
                            color, glyph = ColorPair(ORANGE, BLACK), "*"
                        else:
                            color, glyph = ColorPair(RED, BLACK), "x"
                    else:
                        color, glyph = ColorPair(YELLOW, BLACK), "·"
                    batch.set(screen, color, glyph)
            if mouse_valid and distance(player_pos, world_mouse) <= fireball.range:
                draw_line_of_sight(player_pos, world_mouse, offset, batch)
    batch.submit(res.canvas, 7000)


def draw_line_of_sight(start: Point, end: Point, camera_offset: Point, batch: DrawBatch) -> None:
    """Dot the on-screen tiles strictly between ``start`` and ``end``."""
    for point in bresenham_line(start, end):
        if point == start or point == end:
            continue
        screen = point - camera_offset
        if _on_screen(screen):
            batch.set(screen, ColorPair(GREEN, BLACK), ".")