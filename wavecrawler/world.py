"""Entity storage, deferred commands and shared resources."""

from __future__ import annotations

import itertools
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, TypeVar

from .camera import Camera
from .components import Entity, TargetingState, TurnState, WaveManager
from .draw import Canvas
from .geometry import Point
from .map import Map

T = TypeVar("T")


class World:
    """Entities, each holding at most one component of every type."""

    def __init__(self) -> None:
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._ids = itertools.count(1)

    def spawn(self, *args: Any) -> Entity:
        entity = next(self._ids)
        self._entities[entity] = {type(component): component for component in args}
        return entity

    def contains(self, entity: Entity) -> bool:
        return entity in self._entities

    def get(self, entity: Entity, component_type: type[T]) -> T:
        try:
            return self._entities[entity][component_type]
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None

    def has(self, entity: Entity, component_type: type) -> bool:
        return component_type in self._entities.get(entity, {})

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach ``component``, replacing any existing one of the same type."""
        try:
            components = self._entities[entity]
        except KeyError:
            raise KeyError(f"no entity {entity}") from None
        components[type(component)] = component

    def despawn(self, entity: Entity) -> bool:
        return self._entities.pop(entity, None) is not None

    def query(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, *components)`` for entities holding all the given types."""
        for entity, components in list(self._entities.items()):
            if all(t in components for t in args):
                yield (entity, *(components[t] for t in args))

    def count(self, component_type: type) -> int:
        return sum(component_type in c for c in self._entities.values())


class CommandBuffer:
    """World changes recorded now and applied, in order, on flush."""

    def __init__(self) -> None:
        self._commands: deque[Callable[[World], None]] = deque()

    def __len__(self) -> int:
        return len(self._commands)

    def push(self, *args: Any) -> None:
        def spawn(world: World) -> None:
            world.spawn(*args)

        self._commands.append(spawn)

    def add_component(self, entity: Entity, component: Any) -> None:
        def add(world: World) -> None:
            if world.contains(entity):
                world.add_component(entity, component)

        self._commands.append(add)

    def remove(self, entity: Entity) -> None:
        def despawn(world: World) -> None:
            world.despawn(entity)

        self._commands.append(despawn)

    def flush(self, world: World) -> None:
        while self._commands:
            self._commands.popleft()(world)


@dataclass
class Resources:
    """Shared state read and written by the systems."""

    map: Map = field(default_factory=Map)
    camera: Camera = field(default_factory=lambda: Camera(Point(0, 0)))
    turn_state: TurnState = TurnState.AWAITING_INPUT
    targeting_state: TargetingState = TargetingState.NONE
    wave_manager: WaveManager = field(default_factory=WaveManager)
    key: Any | None = None
    mouse_pos: Point = Point(0, 0)
    mouse_buttons: tuple[int, int, bool, bool, bool] | None = None
    canvas: Canvas = field(default_factory=Canvas)