import pytest

from wavecrawler.camera import Camera
from wavecrawler.components import (
    Mana,
    TargetingState,
    TurnState,
    WantsToAttack,
    WantsToMove,
    WantsToUseDashToPoint,
    WantsToUseFireball,
)
from wavecrawler.geometry import Point
from wavecrawler.map import TileType, map_idx
from wavecrawler.player_input import Key, player_input
from wavecrawler.spawner import spawn_monster_by_type, spawn_player
from wavecrawler.components import EnemyType
from wavecrawler.world import CommandBuffer, Resources, World

START = Point(10, 10)


def setup(mana=None):
    world = World()
    player = spawn_player(world, START)
    if mana is not None:
        world.add_component(player, Mana(mana, 8))
    res = Resources(camera=Camera(START))
    return world, player, res


def run(world, res):
    commands = CommandBuffer()
    player_input(world, commands, res)
    commands.flush(world)
    return commands


def mouse_for(res, target):
    return target - Point(res.camera.left_x, res.camera.top_y)


def click(res, target, left=True, right=False):
    res.mouse_pos = mouse_for(res, target)
    res.mouse_buttons = (res.mouse_pos.x, res.mouse_pos.y, left, right, False)


def wall(res, point):
    res.map.tiles[map_idx(point.x, point.y)] = TileType.WALL


@pytest.mark.parametrize(
    "key,delta",
    [
        (Key.LEFT, Point(-1, 0)),
        (Key.RIGHT, Point(1, 0)),
        (Key.UP, Point(0, -1)),
        (Key.DOWN, Point(0, 1)),
    ],
)
def test_arrow_requests_move(key, delta):
    world, player, res = setup()
    res.key = key
    run(world, res)
    moves = [m for _, m in world.query(WantsToMove)]
    assert moves == [WantsToMove(entity=player, destination=START + delta)]
    assert res.turn_state is TurnState.PLAYER_TURN


def test_arrow_into_enemy_attacks():
    world, player, res = setup()
    enemy = spawn_monster_by_type(world, EnemyType.WEAK, START + Point(1, 0))
    res.key = Key.RIGHT
    run(world, res)
    attacks = [a for _, a in world.query(WantsToAttack)]
    assert attacks == [WantsToAttack(attacker=player, victim=enemy)]
    assert list(world.query(WantsToMove)) == []
    assert res.turn_state is TurnState.PLAYER_TURN


def test_space_waits():
    world, _, res = setup()
    res.key = Key.SPACE
    commands = CommandBuffer()
    player_input(world, commands, res)
    assert len(commands) == 0
    assert res.turn_state is TurnState.PLAYER_TURN


@pytest.mark.parametrize(
    "key,state",
    [
        (Key.D, TargetingState.SELECTING_DASH_TARGET),
        (Key.F, TargetingState.SELECTING_FIREBALL_TARGET),
    ],
)
def test_ability_keys_enter_targeting(key, state):
    world, _, res = setup()
    res.key = key
    run(world, res)
    assert res.targeting_state is state
    assert res.turn_state is TurnState.AWAITING_INPUT


@pytest.mark.parametrize("key", [Key.D, Key.F])
def test_ability_keys_need_mana(key):
    world, _, res = setup(mana=0)
    res.key = key
    run(world, res)
    assert res.targeting_state is TargetingState.NONE


def test_escape_cancels_targeting():
    world, _, res = setup()
    res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    res.key = Key.ESCAPE
    run(world, res)
    assert res.targeting_state is TargetingState.NONE


def test_movement_ignored_while_targeting():
    world, _, res = setup()
    res.targeting_state = TargetingState.SELECTING_FIREBALL_TARGET
    res.key = Key.RIGHT
    run(world, res)
    assert list(world.query(WantsToMove)) == []
    assert res.turn_state is TurnState.AWAITING_INPUT
    assert res.targeting_state is TargetingState.SELECTING_FIREBALL_TARGET


def test_right_click_cancels_and_skips_keys():
    world, _, res = setup()
    res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    click(res, START + Point(1, 0), left=False, right=True)
    res.key = Key.SPACE
    run(world, res)
    assert res.targeting_state is TargetingState.NONE
    assert res.turn_state is TurnState.AWAITING_INPUT


def test_left_click_dash_in_range():
    world, player, res = setup()
    res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    target = START + Point(3, 0)
    click(res, target)
    run(world, res)
    wants = [w for _, w in world.query(WantsToUseDashToPoint)]
    assert wants == [WantsToUseDashToPoint(entity=player, target=target)]
    assert res.turn_state is TurnState.PLAYER_TURN
    assert res.targeting_state is TargetingState.NONE


def test_left_click_dash_out_of_range():
    world, _, res = setup()
    res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    click(res, START + Point(5, 0))
    run(world, res)
    assert list(world.query(WantsToUseDashToPoint)) == []
    assert res.targeting_state is TargetingState.SELECTING_DASH_TARGET


def test_left_click_dash_blocked_by_wall():
    world, _, res = setup()
    wall(res, START + Point(1, 0))
    res.targeting_state = TargetingState.SELECTING_DASH_TARGET
    click(res, START + Point(3, 0))
    run(world, res)
    assert list(world.query(WantsToUseDashToPoint)) == []
    assert res.turn_state is TurnState.AWAITING_INPUT


def test_left_click_on_wall_does_nothing():
    world, _, res = setup()
    target = START + Point(2, 0)
    wall(res, target)
    res.targeting_state = TargetingState.SELECTING_FIREBALL_TARGET
    click(res, target)
    res.key = Key.ESCAPE
    run(world, res)
    assert list(world.query(WantsToUseFireball)) == []
    assert res.targeting_state is TargetingState.SELECTING_FIREBALL_TARGET


def test_left_click_fireball():
    world, player, res = setup()
    res.targeting_state = TargetingState.SELECTING_FIREBALL_TARGET
    target = START + Point(0, 5)
    click(res, target)
    run(world, res)
    wants = [w for _, w in world.query(WantsToUseFireball)]
    assert wants == [WantsToUseFireball(entity=player, target=target)]
    assert res.turn_state is TurnState.PLAYER_TURN


def test_left_click_fireball_without_mana():
    world, _, res = setup(mana=4)
    res.targeting_state = TargetingState.SELECTING_FIREBALL_TARGET
    click(res, START + Point(0, 2))
    run(world, res)
    assert list(world.query(WantsToUseFireball)) == []
    assert res.turn_state is TurnState.AWAITING_INPUT


def test_no_player_no_effect():
    world = World()
    res = Resources()
    res.key = Key.SPACE
    commands = CommandBuffer()
    player_input(world, commands, res)
    assert len(commands) == 0
    assert res.turn_state is TurnState.AWAITING_INPUT