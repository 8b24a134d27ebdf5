"""Components, colours and game-state enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .geometry import Point

Entity = int
Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
ORANGE: Color = (255, 165, 0)
GRAY: Color = (128, 128, 128)


@dataclass(frozen=True)
class ColorPair:
    fg: Color
    bg: Color


@dataclass(frozen=True)
class Render:
    color: ColorPair
    glyph: str


@dataclass(frozen=True)
class Player:
    """Marks the player entity."""


@dataclass(frozen=True)
class Enemy:
    """Marks a hostile entity."""


@dataclass(frozen=True)
class MovingRandomly:
    """Marks an entity that wanders at random."""


@dataclass(frozen=True)
class WantsToMove:
    entity: Entity
    destination: Point


@dataclass(frozen=True)
class Health:
    current: int
    max: int


@dataclass(frozen=True)
class Mana:
    current: int
    max: int


@dataclass(frozen=True)
class Name:
    value: str


@dataclass(frozen=True)
class WantsToAttack:
    attacker: Entity
    victim: Entity


@dataclass(frozen=True)
class CanDash:
    cost: int
    range: int


@dataclass(frozen=True)
class CanCastFireball:
    cost: int
    damage: int
    range: int


@dataclass(frozen=True)
class WantsToUseDash:
    entity: Entity
    direction: Point


@dataclass(frozen=True)
class WantsToUseDashToPoint:
    entity: Entity
    target: Point


@dataclass(frozen=True)
class WantsToUseFireball:
    entity: Entity
    target: Point


@dataclass(frozen=True)
class FireballEffect:
    center: Point
    radius: int
    damage: int
    duration: int


@dataclass
class WaveManager:
    """Progress through the enemy waves."""

    current_wave: int = 1
    enemies_remaining: int = 0
    wave_active: bool = False
    spawn_timer: int = 2


class EnemyType(Enum):
    WEAK = auto()
    MEDIUM = auto()
    BOSS = auto()


@dataclass(frozen=True)
class EnemyStats:
    enemy_type: EnemyType


@dataclass(frozen=True)
class FollowsPlayer:
    move_timer: int


class TurnState(Enum):
    AWAITING_INPUT = auto()
    PLAYER_TURN = auto()
    MONSTER_TURN = auto()


class TargetingState(Enum):
    NONE = auto()
    SELECTING_DASH_TARGET = auto()
    SELECTING_FIREBALL_TARGET = auto()

    def is_targeting(self) -> bool:
        return self is not TargetingState.NONE