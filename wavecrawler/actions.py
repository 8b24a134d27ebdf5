"""Turn systems for moving, fighting, mana and wave pacing."""

from __future__ import annotations

import random

from .components import (
    Enemy,
    Health,
    Mana,
    MovingRandomly,
    Player,
    TurnState,
    WantsToAttack,
    WantsToMove,
)
from .geometry import Point
from .world import CommandBuffer, Resources, World

ATTACK_DAMAGE = 1
WAVE_DELAY = 2

_WANDER_STEPS = (Point(-1, 0), Point(1, 0), Point(0, -1), Point(0, 1))

_NEXT_TURN = {
    TurnState.PLAYER_TURN: TurnState.MONSTER_TURN,
    TurnState.MONSTER_TURN: TurnState.AWAITING_INPUT,
}

_rng = random.Random()


def collisions(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Every enemy standing on the player's tile attacks the player."""
    players = list(world.query(Player, Point))
    if not players:
        return
    player, _, player_pos = players[-1]
    for enemy, _, pos in world.query(Enemy, Point):
        if pos == player_pos:
            commands.push(WantsToAttack(attacker=enemy, victim=player))


def combat(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Resolve attack requests: each one deals a single point of damage."""
    for message, attack in world.query(WantsToAttack):
        if world.has(attack.victim, Health):
            health = world.get(attack.victim, Health)
            remaining = max(0, health.current - ATTACK_DAMAGE)
            if remaining <= 0:
                commands.remove(attack.victim)
            else:
                commands.add_component(attack.victim, Health(remaining, health.max))
        commands.remove(message)


def movement(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Carry out move requests onto enterable tiles; the camera follows the player."""
    for message, move in world.query(WantsToMove):
        if res.map.can_enter_tile(move.destination):
            commands.add_component(move.entity, move.destination)
            if not world.contains(move.entity):
                raise KeyError(f"no entity {move.entity}")
            if world.has(move.entity, Player):
                res.camera.on_player_move(move.destination)
        commands.remove(message)


def end_turn(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Advance from the player's turn to the monsters' and back to input."""
    res.turn_state = _NEXT_TURN.get(res.turn_state, res.turn_state)


def mana_regeneration(world: World, commands: CommandBuffer, res: Resources) -> None:
    """The player regains one mana per turn, up to the maximum."""
    found = next(world.query(Player, Mana), None)
    if found is None:
        return
    player, _, mana = found
    if mana.current < mana.max:
        commands.add_component(player, Mana(min(mana.current + 1, mana.max), mana.max))


def wave_management(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Track the live wave and count down to the next one once it is cleared."""
    waves = res.wave_manager
    if waves.wave_active:
        remaining = world.count(Enemy)
        waves.enemies_remaining = remaining
        if remaining == 0:
            waves.wave_active = False
            waves.spawn_timer = WAVE_DELAY
            waves.current_wave += 1
    elif waves.spawn_timer > 0:
        waves.spawn_timer -= 1


def random_move(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Each wandering entity asks to step one tile in a random direction."""
    for entity, pos, _ in world.query(Point, MovingRandomly):
        commands.push(WantsToMove(entity=entity, destination=pos + _rng.choice(_WANDER_STEPS)))