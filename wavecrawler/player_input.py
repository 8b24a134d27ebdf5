"""Turning keyboard and mouse input into the player's intentions."""

from __future__ import annotations

from enum import Enum, auto

from .components import (
    CanCastFireball,
    CanDash,
    Enemy,
    Entity,
    Mana,
    Player,
    TargetingState,
    TurnState,
    WantsToAttack,
    WantsToMove,
    WantsToUseDashToPoint,
    WantsToUseFireball,
)
from .geometry import Point, distance, has_clear_path
from .world import CommandBuffer, Resources, World


class Key(Enum):
    """Keys the game responds to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    D = auto()
    F = auto()
    ESCAPE = auto()


_STEPS = {
    Key.LEFT: Point(-1, 0),
    Key.RIGHT: Point(1, 0),
    Key.UP: Point(0, -1),
    Key.DOWN: Point(0, 1),
}


def _click_target(
    commands: CommandBuffer,
    res: Resources,
    player: Entity,
    player_pos: Point,
    dash: CanDash,
    fireball: CanCastFireball,
    mana: Mana,
    target: Point,
) -> None:
    state = res.targeting_state
    if state is TargetingState.SELECTING_DASH_TARGET:
        if (
            mana.current >= dash.cost
            and distance(player_pos, target) <= dash.range
            and has_clear_path(res.map, player_pos, target)
        ):
            commands.push(WantsToUseDashToPoint(entity=player, target=target))
            res.turn_state = TurnState.PLAYER_TURN
            res.targeting_state = TargetingState.NONE
    elif state is TargetingState.SELECTING_FIREBALL_TARGET:
        if (
            mana.current >= fireball.cost
            and distance(player_pos, target) <= fireball.range
            and has_clear_path(res.map, player_pos, target)
        ):
            commands.push(WantsToUseFireball(entity=player, target=target))
            res.turn_state = TurnState.PLAYER_TURN
            res.targeting_state = TargetingState.NONE


def player_input(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Handle clicks on targets, ability selection, movement and bump attacks."""
    found = next(world.query(Player, Point, CanDash, CanCastFireball, Mana), None)
    if found is None:
        return
    player, _, player_pos, dash, fireball, mana = found

    if res.mouse_buttons is not None:
        _, _, left_click, right_click, _ = res.mouse_buttons
        if right_click:
            res.targeting_state = TargetingState.NONE
            return
        if left_click and res.targeting_state.is_targeting():
            offset = Point(res.camera.left_x, res.camera.top_y)
            target = res.mouse_pos + offset
            if not res.map.can_enter_tile(target):
                return
            _click_target(commands, res, player, player_pos, dash, fireball, mana, target)

    key = res.key
    if key is None:
        return

    if res.targeting_state.is_targeting():
        if key is Key.ESCAPE:
            res.targeting_state = TargetingState.NONE
        return

    if key in _STEPS:
        destination = player_pos + _STEPS[key]
        victims = [enemy for enemy, _, pos in world.query(Enemy, Point) if pos == destination]
        for victim in victims:
            commands.push(WantsToAttack(attacker=player, victim=victim))
        if not victims:
            commands.push(WantsToMove(entity=player, destination=destination))
        res.turn_state = TurnState.PLAYER_TURN
    elif key is Key.SPACE:
        res.turn_state = TurnState.PLAYER_TURN
    elif key is Key.D:
        if mana.current >= dash.cost:
            res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    elif key is Key.F:
        if mana.current >= fireball.cost:
            res.targeting_state = TargetingState.SELECTING_FIREBALL_TARGET