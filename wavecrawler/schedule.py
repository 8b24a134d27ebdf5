"""Ordered system schedules for each phase of a turn."""

from __future__ import annotations

from typing import Callable

from .abilities import dash, dash_to_point, fireball
from .actions import collisions, combat, end_turn, mana_regeneration, movement, wave_management
from .hud import debug_coordinates, hud
from .pathfinding import pathfinding
from .player_input import player_input
from .rendering import entity_render, fireball_effects, map_render, tooltips
from .targeting import targeting_cursor, targeting_highlights
from .world import CommandBuffer, Resources, World

System = Callable[[World, CommandBuffer, Resources], None]


class Schedule:
    """Systems run in order; queued commands are applied at each flush point."""

    def __init__(self) -> None:
        self._stages: list[list[System]] = [[]]

    def add_system(self, system: System) -> Schedule:
        self._stages[-1].append(system)
        return self

    def flush(self) -> Schedule:
        """End the current stage so its commands land before the next one runs."""
        if self._stages[-1]:
            self._stages.append([])
        return self

    @property
    def stages(self) -> tuple[tuple[System, ...], ...]:
        return tuple(tuple(stage) for stage in self._stages if stage)

    def execute(self, world: World, res: Resources) -> None:
        commands = CommandBuffer()
        for stage in self.stages:
            for system in stage:
                system(world, commands, res)
            commands.flush(world)


def build_input_scheduler() -> Schedule:
    return (
        Schedule()
        .add_system(player_input)
        .flush()
        .add_system(map_render)
        .add_system(entity_render)
        .flush()
        .add_system(targeting_highlights)
        .flush()
        .add_system(targeting_cursor)
        .add_system(fireball_effects)
        .flush()
        .add_system(hud)
        .add_system(tooltips)
        .add_system(debug_coordinates)
    )


def build_player_scheduler() -> Schedule:
    return (
        Schedule()
        .add_system(dash)
        .add_system(dash_to_point)
        .add_system(fireball)
        .flush()
        .add_system(movement)
        .flush()
        .add_system(combat)
        .flush()
        .add_system(collisions)
        .flush()
        .add_system(mana_regeneration)
        .flush()
        .add_system(wave_management)
        .flush()
        .add_system(map_render)
        .add_system(entity_render)
        .flush()
        .add_system(targeting_highlights)
        .flush()
        .add_system(targeting_cursor)
        .add_system(fireball_effects)
        .flush()
        .add_system(hud)
        .add_system(debug_coordinates)
        .add_system(end_turn)
    )


def build_monster_scheduler() -> Schedule:
    return (
        Schedule()
        .add_system(pathfinding)
        .flush()
        .add_system(movement)
        .flush()
        .add_system(combat)
        .flush()
        .add_system(collisions)
        .flush()
        .add_system(map_render)
        .add_system(entity_render)
        .flush()
        .add_system(hud)
        .add_system(end_turn)
    )