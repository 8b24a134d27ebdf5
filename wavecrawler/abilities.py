"""Systems for the player's dash and fireball abilities."""

from __future__ import annotations

from typing import Any

from .components import (
    CanCastFireball,
    CanDash,
    Enemy,
    Entity,
    FireballEffect,
    Health,
    Mana,
    Player,
    WantsToUseDash,
    WantsToUseDashToPoint,
    WantsToUseFireball,
)
from .geometry import Point, distance, has_clear_path
from .world import CommandBuffer, Resources, World

BLAST_RADIUS = 1.5
EFFECT_RADIUS = 1
EFFECT_DURATION = 3


def _components(world: World, entity: Entity, *types: type) -> tuple[Any, ...] | None:
    if not all(world.has(entity, t) for t in types):
        return None
    return tuple(world.get(entity, t) for t in types)


def _relocate(
    world: World, commands: CommandBuffer, res: Resources,
    entity: Entity, mana: Mana, cost: int, destination: Point,
) -> None:
    commands.add_component(entity, Mana(mana.current - cost, mana.max))
    commands.add_component(entity, destination)
    if world.has(entity, Player):
        res.camera.on_player_move(destination)


def dash(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Dash in a direction as far as the range and open floor allow."""
    for message, want in world.query(WantsToUseDash):
        parts = _components(world, want.entity, CanDash, Mana, Point)
        if parts is not None:
            ability, mana, current = parts
            if mana.current >= ability.cost:
                destination = current
                for step in range(1, ability.range + 1):
                    candidate = current + want.direction * step
                    if not res.map.can_enter_tile(candidate):
                        break
                    destination = candidate
                if destination != current:
                    _relocate(world, commands, res, want.entity, mana, ability.cost, destination)
        commands.remove(message)


def dash_to_point(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Dash straight to a chosen tile within range along an unobstructed line."""
    for message, want in world.query(WantsToUseDashToPoint):
        parts = _components(world, want.entity, CanDash, Mana, Point)
        if parts is not None:
            ability, mana, current = parts
            if (
                mana.current >= ability.cost
                and distance(current, want.target) <= ability.range
                and res.map.can_enter_tile(want.target)
                and has_clear_path(res.map, current, want.target)
            ):
                _relocate(world, commands, res, want.entity, mana, ability.cost, want.target)
        commands.remove(message)


def fireball(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Cast a fireball that damages every enemy close to the target tile."""
    for message, want in world.query(WantsToUseFireball):
        parts = _components(world, want.entity, CanCastFireball, Mana, Point)
        if parts is not None:
            ability, mana, caster_pos = parts
            if mana.current >= ability.cost and distance(caster_pos, want.target) <= ability.range:
                commands.add_component(want.entity, Mana(mana.current - ability.cost, mana.max))
                commands.push(
                    FireballEffect(
                        center=want.target,
                        radius=EFFECT_RADIUS,
                        damage=ability.damage,
                        duration=EFFECT_DURATION,
                    )
                )
                caught = [
                    (enemy, health)
                    for enemy, _, pos, health in world.query(Enemy, Point, Health)
                    if distance(want.target, pos) <= BLAST_RADIUS
                ]
                for enemy, health in caught:
                    remaining = max(0, health.current - ability.damage)
                    if remaining <= 0:
                        commands.remove(enemy)
                    else:
                        commands.add_component(enemy, Health(remaining, health.max))
        commands.remove(message)