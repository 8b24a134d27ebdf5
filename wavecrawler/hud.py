"""The heads-up display and the targeting debug readout."""

from __future__ import annotations

from .components import (
    BLACK,
    BLUE,
    CYAN,
    GRAY,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    CanCastFireball,
    CanDash,
    ColorPair,
    Health,
    Mana,
    Player,
    TargetingState,
)
from .draw import DrawBatch
from .geometry import Point, distance, has_clear_path
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from .world import CommandBuffer, Resources, World

HUD_LAYER = 2
FINAL_WAVE = 3

_CANCEL_HINT = "ESC or Right-click to cancel"
_CURSOR_HINT = "Cursor: Green=valid | Red=invalid | Blue M=no mana"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _wave_banner(batch: DrawBatch, res: Resources) -> None:
    waves = res.wave_manager
    if waves.current_wave > FINAL_WAVE:
        batch.print_color_centered(1, "All waves completed! Victory!", ColorPair(GREEN, BLACK))
    elif waves.wave_active:
        batch.print_color_centered(
            1,
            f"Wave {waves.current_wave} - Enemies: {waves.enemies_remaining}",
            ColorPair(YELLOW, BLACK),
        )
    else:
        batch.print_color_centered(
            1,
            f"Wave {waves.current_wave} incoming in {waves.spawn_timer} turns",
            ColorPair(CYAN, BLACK),
        )


def _affordable(mana: Mana, cost: int) -> ColorPair:
    return ColorPair(WHITE, BLACK) if mana.current >= cost else ColorPair(GRAY, BLACK)


def hud(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Show wave progress, mode hints, health and mana bars and the skill list."""
    found = next(world.query(Player, Health, Mana, CanDash, CanCastFireball), None)
    if found is None:
        return
    _, _, health, mana, dash, fireball = found
    state = res.targeting_state
    targeting = state.is_targeting()

    batch = DrawBatch(HUD_LAYER)
    _wave_banner(batch, res)

    if state is TargetingState.NONE:
        if res.wave_manager.current_wave <= FINAL_WAVE:
            batch.print_centered(2, "Survive the waves! Cursor keys to move, SPACE to wait.")
    elif state is TargetingState.SELECTING_DASH_TARGET:
        batch.print_color_centered(
            2, "DASH MODE: Click to dash to target position", ColorPair(CYAN, BLACK)
        )
        batch.print_color_centered(3, _CANCEL_HINT, ColorPair(WHITE, BLACK))
    else:
        batch.print_color_centered(
            2, "FIREBALL MODE: Click to cast at target", ColorPair(YELLOW, BLACK)
        )
        batch.print_color_centered(3, _CANCEL_HINT, ColorPair(WHITE, BLACK))

    shift = 1 if targeting else 0
    health_y, mana_y, skills_y = 4 + shift, 6 + shift, 8 + shift

    batch.bar_horizontal(
        Point(0, health_y), SCREEN_WIDTH * 2, health.current, health.max, ColorPair(RED, BLACK)
    )
    batch.print_color_centered(
        health_y - 1, f" Health: {health.current} / {health.max} ", ColorPair(WHITE, RED)
    )
    batch.bar_horizontal(
        Point(0, mana_y), SCREEN_WIDTH * 2, mana.current, mana.max, ColorPair(BLUE, BLACK)
    )
    batch.print_color_centered(
        mana_y - 1, f" Mana: {mana.current} / {mana.max} ", ColorPair(WHITE, BLUE)
    )

    if not targeting:
        batch.print_centered(skills_y, "Skills:")
        batch.print_color(
            Point(5, skills_y + 1),
            f"(D) Dash - Cost: {dash.cost} mana",
            _affordable(mana, dash.cost),
        )
        batch.print_color(
            Point(5, skills_y + 2),
            f"(F) Fireball - Cost: {fireball.cost} mana",
            _affordable(mana, fireball.cost),
        )
        batch.print_centered(skills_y + 4, "Press D or F to select skills")
        batch.print_centered(
            skills_y + 5,
            "Move with arrow keys, SPACE to wait, attack by bumping onto enemies",
        )
    elif state is TargetingState.SELECTING_DASH_TARGET:
        batch.print_color_centered(
            skills_y,
            f"DASH: Range {dash.range} tiles, Cost {dash.cost} mana",
            ColorPair(CYAN, BLACK),
        )
        batch.print_centered(skills_y + 1, "Cyan dots show valid dash destinations")
        batch.print_centered(skills_y + 2, "Click exactly where you want to dash")
        batch.print_color_centered(skills_y + 3, _CURSOR_HINT, ColorPair(WHITE, BLACK))
    else:
        batch.print_color_centered(
            skills_y,
            f"FIREBALL: Range {fireball.range} tiles, Damage {fireball.damage}, "
            f"Cost {fireball.cost} mana",
            ColorPair(YELLOW, BLACK),
        )
        batch.print_centered(skills_y + 1, "Yellow dots: valid targets | Orange: blast area")
        batch.print_centered(skills_y + 2, "Green line shows line of sight to cursor")
        batch.print_color_centered(skills_y + 3, _CURSOR_HINT, ColorPair(WHITE, BLACK))

    batch.submit(res.canvas, 10000)


def debug_coordinates(world: World, commands: CommandBuffer, res: Resources) -> None:
    """While targeting, print mouse, player and camera coordinates."""
    state = res.targeting_state
    if not state.is_targeting():
        return
    found = next(world.query(Player, Point), None)
    if found is None:
        return
    _, _, player_pos = found

    batch = DrawBatch(HUD_LAYER)
    mouse = res.mouse_pos
    camera = res.camera
    world_mouse = mouse + Point(camera.left_x, camera.top_y)
    valid_tile = res.map.in_bounds(world_mouse)
    can_enter = valid_tile and res.map.can_enter_tile(world_mouse)

    batch.print(Point(1, 14), f"Mouse Screen: ({mouse.x}, {mouse.y})")
    batch.print(Point(1, 15), f"Mouse World: ({world_mouse.x}, {world_mouse.y})")
    batch.print(Point(1, 16), f"Player: ({player_pos.x}, {player_pos.y})")
    batch.print(Point(1, 17), f"Camera: ({camera.left_x}, {camera.top_y})")
    batch.print(
        Point(1, 18), f"Valid Tile: {_flag(valid_tile)}, Can Enter: {_flag(can_enter)}"
    )

    if state is TargetingState.SELECTING_FIREBALL_TARGET:
        los = has_clear_path(res.map, player_pos, world_mouse)
        batch.print(Point(1, 19), f"Line of Sight: {_flag(los)}")
        batch.print(Point(1, 20), f"Distance: {distance(player_pos, world_mouse):.2f}")

    batch.print(
        Point(1, 21),
        f"Display: {DISPLAY_WIDTH}x{DISPLAY_HEIGHT} | Screen: {SCREEN_WIDTH}x{SCREEN_HEIGHT}",
    )
    at_edge = (
        mouse.x == 0
        or mouse.x == DISPLAY_WIDTH - 1
        or mouse.y == 0
        or mouse.y == DISPLAY_HEIGHT - 1
    )
    batch.print(
        Point(1, 22),
        f"At edge: {_flag(at_edge)} | Bounds: 0-{DISPLAY_WIDTH - 1}, 0-{DISPLAY_HEIGHT - 1}",
    )
    in_bounds = 0 <= mouse.x < DISPLAY_WIDTH and 0 <= mouse.y < DISPLAY_HEIGHT
    batch.print(
        Point(1, 23),
        f"Targeting: {_flag(state.is_targeting())} | Mouse in bounds: {_flag(in_bounds)}",
    )
    batch.submit(res.canvas, 11000)