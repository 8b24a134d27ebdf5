"""The game state advanced one frame at a time."""

from __future__ import annotations

import random

from .camera import Camera
from .components import TurnState
from .draw import Canvas
from .geometry import Point
from .map import DISPLAY_HEIGHT, DISPLAY_WIDTH
from .map_builder import MapBuilder
from .schedule import build_input_scheduler, build_monster_scheduler, build_player_scheduler
from .spawner import spawn_player, spawn_wave_monsters
from .world import Resources, World

FINAL_WAVE = 3


class Game:
    """A freshly generated dungeon with the player at its first room."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        builder = MapBuilder(self.rng)
        self.world = World()
        self.player = spawn_player(self.world, builder.player_start)
        self.resources = Resources(map=builder.map, camera=Camera(builder.player_start))
        self._schedules = {
            TurnState.AWAITING_INPUT: build_input_scheduler(),
            TurnState.PLAYER_TURN: build_player_scheduler(),
            TurnState.MONSTER_TURN: build_monster_scheduler(),
        }

    def _spawn_wave_if_due(self) -> None:
        waves = self.resources.wave_manager
        if waves.wave_active or waves.spawn_timer > 0 or waves.current_wave > FINAL_WAVE:
            return
        spawned = spawn_wave_monsters(
            self.world, self.resources.map, waves.current_wave, self.rng
        )
        waves.wave_active = True
        waves.enemies_remaining = spawned

    def tick(
        self,
        key=None,
        mouse_pos: Point = Point(0, 0),
        left_click: bool = False,
        right_click: bool = False,
    ) -> Canvas:
        """Advance one frame with the given input and return the drawn canvas."""
        res = self.resources
        res.canvas.clear()
        res.key = key
        mouse = Point(
            max(0, min(mouse_pos.x, DISPLAY_WIDTH - 1)),
            max(0, min(mouse_pos.y, DISPLAY_HEIGHT - 1)),
        )
        res.mouse_pos = mouse
        if left_click or right_click:
            res.mouse_buttons = (mouse.x, mouse.y, left_click, right_click, False)
        else:
            res.mouse_buttons = None

        self._spawn_wave_if_due()
        self._schedules[res.turn_state].execute(self.world, res)
        return res.canvas