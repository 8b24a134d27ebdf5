import random

from wavecrawler.components import Enemy, Player, TargetingState, TurnState
from wavecrawler.game import Game
from wavecrawler.geometry import Point
from wavecrawler.map import DISPLAY_HEIGHT, DISPLAY_WIDTH
from wavecrawler.player_input import Key


def _game():
    return Game(random.Random(7))


def test_new_game_places_player_on_floor_with_camera_centred():
    game = _game()
    pos = game.world.get(game.player, Point)
    assert game.world.has(game.player, Player)
    assert game.resources.map.can_enter_tile(pos)
    assert game.resources.camera.left_x == pos.x - DISPLAY_WIDTH // 2
    assert game.resources.camera.top_y == pos.y - DISPLAY_HEIGHT // 2
    assert game.resources.turn_state is TurnState.AWAITING_INPUT


def test_tick_draws_player_at_screen_centre():
    canvas = _game().tick()
    assert canvas.cell(1, Point(DISPLAY_WIDTH // 2, DISPLAY_HEIGHT // 2)).glyph == "@"


def test_turn_cycle():
    game = _game()
    game.tick(Key.SPACE)
    assert game.resources.turn_state is TurnState.PLAYER_TURN
    game.tick()
    assert game.resources.turn_state is TurnState.MONSTER_TURN
    game.tick()
    assert game.resources.turn_state is TurnState.AWAITING_INPUT


def test_first_wave_spawns_after_two_player_turns():
    game = _game()
    for key in (Key.SPACE, None, None, Key.SPACE, None):
        game.tick(key)
        assert game.world.count(Enemy) == 0
    game.tick()
    assert game.world.count(Enemy) == 3
    assert game.resources.wave_manager.wave_active
    assert game.resources.wave_manager.enemies_remaining == 3


def test_no_waves_after_the_last():
    game = _game()
    game.resources.wave_manager.current_wave = 4
    game.resources.wave_manager.spawn_timer = 0
    game.tick()
    assert game.world.count(Enemy) == 0


def test_mouse_position_is_clamped_to_display():
    game = _game()
    game.tick(mouse_pos=Point(500, -5))
    assert game.resources.mouse_pos == Point(DISPLAY_WIDTH - 1, 0)
    assert game.resources.mouse_buttons is None


def test_click_is_recorded_with_position():
    game = _game()
    game.tick(mouse_pos=Point(2, 3), left_click=True)
    assert game.resources.mouse_buttons == (2, 3, True, False, False)


def test_dash_key_enters_targeting_and_right_click_cancels():
    game = _game()
    game.tick(Key.D)
    assert game.resources.targeting_state is TargetingState.SELECTING_DASH_TARGET
    game.tick(right_click=True)
    assert game.resources.targeting_state is TargetingState.NONE
    assert game.resources.turn_state is TurnState.AWAITING_INPUT