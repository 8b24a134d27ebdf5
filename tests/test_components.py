import dataclasses

import pytest

from wavecrawler.components import (
    CanDash,
    Health,
    Name,
    TargetingState,
    WaveManager,
)


@pytest.mark.parametrize(
    "state,expected",
    [
        (TargetingState.NONE, False),
        (TargetingState.SELECTING_DASH_TARGET, True),
        (TargetingState.SELECTING_FIREBALL_TARGET, True),
    ],
)
def test_is_targeting(state, expected):
    assert state.is_targeting() is expected


def test_components_are_immutable():
    health = Health(current=3, max=5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        health.current = 1
    assert health.current == 3
    assert health == Health(current=3, max=5)
    assert dataclasses.replace(health, current=1) == Health(current=1, max=5)


def test_component_equality():
    assert Health(3, 5) == Health(current=3, max=5)
    assert Name("Orc") != Name("Troll")
    assert CanDash(cost=4, range=4) == CanDash(4, 4)


def test_wave_manager_is_mutable():
    wm = WaveManager()
    wm.spawn_timer -= 1
    wm.wave_active = True
    assert wm == WaveManager(spawn_timer=1, wave_active=True)


def test_wave_manager_starts_at_first_wave():
    wm = WaveManager()
    assert wm.current_wave == 1
    assert not wm.wave_active