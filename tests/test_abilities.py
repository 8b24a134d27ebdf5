import pytest

from wavecrawler.abilities import dash, dash_to_point, fireball
from wavecrawler.camera import Camera
from wavecrawler.components import (
    CanCastFireball,
    CanDash,
    EnemyType,
    FireballEffect,
    Health,
    Mana,
    WantsToUseDash,
    WantsToUseDashToPoint,
    WantsToUseFireball,
)
from wavecrawler.geometry import Point
from wavecrawler.map import Map, TileType, map_idx
from wavecrawler.spawner import spawn_monster_by_type, spawn_player
from wavecrawler.world import CommandBuffer, Resources, World

START = Point(10, 10)


def _run(system, world, res):
    commands = CommandBuffer()
    system(world, commands, res)
    commands.flush(world)


@pytest.fixture
def res():
    return Resources(map=Map(), camera=Camera(START))


@pytest.fixture
def world():
    return World()


@pytest.fixture
def player(world):
    return spawn_player(world, START)


def _camera_corner(camera):
    return camera.left_x, camera.top_y


def test_dash_travels_full_range(world, player, res):
    ability = world.get(player, CanDash)
    mana = world.get(player, Mana)
    world.spawn(WantsToUseDash(entity=player, direction=Point(1, 0)))
    _run(dash, world, res)
    destination = START + Point(1, 0) * ability.range
    assert world.get(player, Point) == destination
    assert world.get(player, Mana) == Mana(mana.current - ability.cost, mana.max)
    assert _camera_corner(res.camera) == _camera_corner(Camera(destination))
    assert world.count(WantsToUseDash) == 0


def test_dash_stops_before_wall(world, player, res):
    res.map.tiles[map_idx(12, 10)] = TileType.WALL
    world.spawn(WantsToUseDash(entity=player, direction=Point(1, 0)))
    _run(dash, world, res)
    assert world.get(player, Point) == START + Point(1, 0)


def test_dash_blocked_immediately_costs_nothing(world, player, res):
    res.map.tiles[map_idx(11, 10)] = TileType.WALL
    mana = world.get(player, Mana)
    world.spawn(WantsToUseDash(entity=player, direction=Point(1, 0)))
    _run(dash, world, res)
    assert world.get(player, Point) == START
    assert world.get(player, Mana) == mana
    assert world.count(WantsToUseDash) == 0


def test_dash_without_mana_does_nothing(world, player, res):
    world.add_component(player, Mana(0, 8))
    world.spawn(WantsToUseDash(entity=player, direction=Point(0, 1)))
    _run(dash, world, res)
    assert world.get(player, Point) == START
    assert world.get(player, Mana) == Mana(0, 8)


def test_dash_to_point_in_range(world, player, res):
    ability = world.get(player, CanDash)
    mana = world.get(player, Mana)
    target = START + Point(2, 2)
    world.spawn(WantsToUseDashToPoint(entity=player, target=target))
    _run(dash_to_point, world, res)
    assert world.get(player, Point) == target
    assert world.get(player, Mana) == Mana(mana.current - ability.cost, mana.max)
    assert _camera_corner(res.camera) == _camera_corner(Camera(target))
    assert world.count(WantsToUseDashToPoint) == 0


def test_dash_to_point_out_of_range(world, player, res):
    ability = world.get(player, CanDash)
    target = START + Point(ability.range + 1, 0)
    world.spawn(WantsToUseDashToPoint(entity=player, target=target))
    _run(dash_to_point, world, res)
    assert world.get(player, Point) == START
    assert world.count(WantsToUseDashToPoint) == 0


def test_dash_to_point_through_wall_refused(world, player, res):
    res.map.tiles[map_idx(11, 10)] = TileType.WALL
    world.spawn(WantsToUseDashToPoint(entity=player, target=Point(13, 10)))
    _run(dash_to_point, world, res)
    assert world.get(player, Point) == START


def test_dash_to_point_onto_wall_refused(world, player, res):
    res.map.tiles[map_idx(12, 10)] = TileType.WALL
    world.spawn(WantsToUseDashToPoint(entity=player, target=Point(12, 10)))
    _run(dash_to_point, world, res)
    assert world.get(player, Point) == START


def test_fireball_damages_enemies_in_blast(world, player, res):
    spell = world.get(player, CanCastFireball)
    mana = world.get(player, Mana)
    target = Point(14, 10)
    goblin = spawn_monster_by_type(world, EnemyType.WEAK, target)
    troll = spawn_monster_by_type(world, EnemyType.BOSS, target + Point(1, 1))
    orc = spawn_monster_by_type(world, EnemyType.MEDIUM, target + Point(2, 0))
    troll_before = world.get(troll, Health)
    orc_before = world.get(orc, Health)
    world.spawn(WantsToUseFireball(entity=player, target=target))
    _run(fireball, world, res)
    assert not world.contains(goblin)
    assert world.get(troll, Health) == Health(troll_before.current - spell.damage, troll_before.max)
    assert world.get(orc, Health) == orc_before
    assert world.get(player, Mana) == Mana(mana.current - spell.cost, mana.max)
    effects = [e for _, e in world.query(FireballEffect)]
    assert effects == [FireballEffect(center=target, radius=1, damage=spell.damage, duration=3)]
    assert world.count(WantsToUseFireball) == 0


def test_fireball_out_of_range_does_nothing(world, player, res):
    spell = world.get(player, CanCastFireball)
    mana = world.get(player, Mana)
    target = START + Point(spell.range + 1, 0)
    enemy = spawn_monster_by_type(world, EnemyType.WEAK, target)
    world.spawn(WantsToUseFireball(entity=player, target=target))
    _run(fireball, world, res)
    assert world.contains(enemy)
    assert world.get(player, Mana) == mana
    assert world.count(FireballEffect) == 0
    assert world.count(WantsToUseFireball) == 0


def test_fireball_without_mana_does_nothing(world, player, res):
    world.add_component(player, Mana(1, 8))
    target = Point(12, 10)
    enemy = spawn_monster_by_type(world, EnemyType.WEAK, target)
    world.spawn(WantsToUseFireball(entity=player, target=target))
    _run(fireball, world, res)
    assert world.contains(enemy)
    assert world.get(player, Mana) == Mana(1, 8)
    assert world.count(FireballEffect) == 0