"""Flow-field pathfinding that brings enemies to the player."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .components import Enemy, FollowsPlayer, Player, WantsToAttack, WantsToMove
from .geometry import Point
from .map import Map
from .world import CommandBuffer, Resources, World

FlowField = dict[Point, int]

_ADJACENT = (Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0))

_DIRECTIONS = tuple(
    Point(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

MOVE_DELAY = 1


def create_flow_field(map: Map, player_pos: Point) -> FlowField:
    """Steps from each reachable tile to a tile orthogonally next to the player.

    Tiles next to the player score 0; the player's own tile and unreachable
    tiles are absent.
    """
    field: FlowField = {}
    queue: deque[Point] = deque()
    for offset in _ADJACENT:
        target = player_pos + offset
        if map.can_enter_tile(target):
            field[target] = 0
            queue.append(target)
    while queue:
        current = queue.popleft()
        for direction in _DIRECTIONS:
            neighbour = current + direction
            if neighbour != player_pos and neighbour not in field and map.can_enter_tile(neighbour):
                field[neighbour] = field[current] + 1
                queue.append(neighbour)
    return field


def find_best_move(
    flow_field: FlowField,
    map: Map,
    enemy_pos: Point,
    enemy_positions: Iterable[Point],
    player_pos: Point,
) -> Point | None:
    """The free neighbouring tile that most lowers the distance, if any."""
    current = flow_field.get(enemy_pos)
    if current is None or current == 0:
        return None
    occupied = set(enemy_positions)
    best_move = None
    best_distance = current
    for direction in _DIRECTIONS:
        candidate = enemy_pos + direction
        if candidate == player_pos or candidate in occupied or not map.can_enter_tile(candidate):
            continue
        steps = flow_field.get(candidate)
        if steps is not None and steps < best_distance:
            best_distance = steps
            best_move = candidate
    return best_move


def pathfinding(world: World, commands: CommandBuffer, res: Resources) -> None:
    """Enemies whose timer has run out attack an adjacent player or step closer."""
    found = next(world.query(Player, Point), None)
    if found is None:
        return
    player, _, player_pos = found
    field = create_flow_field(res.map, player_pos)
    enemy_positions = [pos for _, _, pos in world.query(Enemy, Point)]
    for entity, _, pos, follower in list(world.query(Enemy, Point, FollowsPlayer)):
        if follower.move_timer > 0:
            commands.add_component(entity, FollowsPlayer(move_timer=follower.move_timer - 1))
            continue
        commands.add_component(entity, FollowsPlayer(move_timer=MOVE_DELAY))
        if abs(pos.x - player_pos.x) + abs(pos.y - player_pos.y) == 1:
            commands.push(WantsToAttack(attacker=entity, victim=player))
            continue
        best = find_best_move(field, res.map, pos, enemy_positions, player_pos)
        if best is not None:
            commands.push(WantsToMove(entity=entity, destination=best))