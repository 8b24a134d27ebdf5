"""Creating the player and the enemy waves."""

from __future__ import annotations

import random
from typing import Iterator

from .components import (
    BLACK,
    WHITE,
    CanCastFireball,
    CanDash,
    ColorPair,
    Enemy,
    EnemyStats,
    EnemyType,
    Entity,
    FollowsPlayer,
    Health,
    Mana,
    Name,
    Player,
    Render,
)
from .geometry import Point
from .map import SCREEN_HEIGHT, SCREEN_WIDTH, Map
from .world import World

_MONSTERS = {
    EnemyType.WEAK: (2, "Goblin", "g"),
    EnemyType.MEDIUM: (5, "Orc", "O"),
    EnemyType.BOSS: (12, "Troll", "E"),
}

_RANDOM_TYPES = (EnemyType.WEAK, EnemyType.MEDIUM, EnemyType.BOSS)


def spawn_player(world: World, pos: Point) -> Entity:
    return world.spawn(
        Player(),
        pos,
        Render(ColorPair(WHITE, BLACK), "@"),
        Health(current=15, max=15),
        Mana(current=8, max=8),
        CanDash(cost=4, range=4),
        CanCastFireball(cost=5, damage=3, range=6),
    )


def spawn_monster_by_type(world: World, enemy_type: EnemyType, pos: Point) -> Entity:
    hp, name, glyph = _MONSTERS[enemy_type]
    return world.spawn(
        Enemy(),
        pos,
        Render(ColorPair(WHITE, BLACK), glyph),
        FollowsPlayer(move_timer=0),
        Health(current=hp, max=hp),
        Name(name),
        EnemyStats(enemy_type),
    )


def _wave_roster(wave_number: int, rng: random.Random) -> Iterator[EnemyType]:
    if wave_number == 1:
        yield from [EnemyType.WEAK] * 3
    elif wave_number == 2:
        yield from [EnemyType.WEAK] * 2 + [EnemyType.MEDIUM] * 2
    elif wave_number == 3:
        yield from [EnemyType.MEDIUM] * 3 + [EnemyType.BOSS]
    else:
        for _ in range(wave_number):
            yield _RANDOM_TYPES[rng.randrange(0, 3)]


def spawn_wave_monsters(
    world: World, map: Map, wave_number: int, rng: random.Random
) -> int:
    """Spawn the enemies of one wave on random free tiles; return how many."""
    positions = [
        Point(x, y)
        for y in range(1, SCREEN_HEIGHT - 1)
        for x in range(1, SCREEN_WIDTH - 1)
        if map.can_enter_tile(Point(x, y))
    ]
    rng.shuffle(positions)
    spawned = 0
    for pos, enemy_type in zip(positions, _wave_roster(wave_number, rng)):
        spawn_monster_by_type(world, enemy_type, pos)
        spawned += 1
    return spawned